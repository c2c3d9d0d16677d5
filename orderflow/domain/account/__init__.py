"""Account contracts."""

from .accounts import (
    BasicAccount,
    DepositableAccount,
    MinimumDepositAccount,
    NoOverdraftAccount,
    OverdraftAccount,
    OverdraftBankAccount,
    SavingsAccount,
    StandardBankAccount,
)

__all__ = [
    "DepositableAccount",
    "MinimumDepositAccount",
    "NoOverdraftAccount",
    "OverdraftAccount",
    "BasicAccount",
    "SavingsAccount",
    "StandardBankAccount",
    "OverdraftBankAccount",
]
