"""Bank account contracts.

Accounts with different withdrawal or deposit rules are separate contracts
rather than subclasses that tighten or loosen their parent's rules, so a
caller holding a NoOverdraftAccount can always rely on a non-negative
balance and a caller holding a DepositableAccount can deposit any positive
amount.
"""
from abc import ABC, abstractmethod

from orderflow.domain.core.exceptions import (
    InsufficientFundsError,
    InvalidArgumentError,
    MinimumDepositError,
)


def _require_positive(amount: float) -> None:
    if amount <= 0:
        raise InvalidArgumentError(
            f"Invalid amount: {amount}. Amount must be greater than zero",
            {"amount": amount},
        )


class DepositableAccount(ABC):
    """Accepts any deposit greater than zero."""

    @abstractmethod
    def deposit(self, amount: float) -> None:
        pass

    @abstractmethod
    def get_balance(self) -> float:
        pass


class MinimumDepositAccount(ABC):
    """Requires each deposit to reach a minimum."""

    @abstractmethod
    def deposit(self, amount: float) -> None:
        pass

    @abstractmethod
    def get_balance(self) -> float:
        pass

    @abstractmethod
    def get_minimum_deposit(self) -> float:
        pass


class NoOverdraftAccount(DepositableAccount):
    """Withdrawals never take the balance below zero."""

    @abstractmethod
    def withdraw(self, amount: float) -> None:
        pass


class OverdraftAccount(DepositableAccount):
    """Withdrawals may take the balance below zero, down to the limit."""

    @abstractmethod
    def withdraw(self, amount: float) -> None:
        pass

    @abstractmethod
    def get_overdraft_limit(self) -> float:
        pass


class BasicAccount(DepositableAccount):

    def __init__(self) -> None:
        self._balance = 0.0

    def deposit(self, amount: float) -> None:
        _require_positive(amount)
        self._balance += amount

    def get_balance(self) -> float:
        return self._balance


class SavingsAccount(MinimumDepositAccount):

    def __init__(self, minimum_deposit: float = 10.0) -> None:
        self._balance = 0.0
        self._minimum_deposit = minimum_deposit

    def deposit(self, amount: float) -> None:
        _require_positive(amount)
        if amount < self._minimum_deposit:
            raise MinimumDepositError(amount, self._minimum_deposit)
        self._balance += amount

    def get_balance(self) -> float:
        return self._balance

    def get_minimum_deposit(self) -> float:
        return self._minimum_deposit


class StandardBankAccount(NoOverdraftAccount):

    def __init__(self) -> None:
        self._balance = 0.0

    def deposit(self, amount: float) -> None:
        _require_positive(amount)
        self._balance += amount

    def withdraw(self, amount: float) -> None:
        _require_positive(amount)
        if amount > self._balance:
            raise InsufficientFundsError(amount, self._balance)
        self._balance -= amount

    def get_balance(self) -> float:
        return self._balance


class OverdraftBankAccount(OverdraftAccount):

    def __init__(self, overdraft_limit: float = 1000.0) -> None:
        self._balance = 0.0
        self._overdraft_limit = overdraft_limit

    def deposit(self, amount: float) -> None:
        _require_positive(amount)
        self._balance += amount

    def withdraw(self, amount: float) -> None:
        _require_positive(amount)
        available = self._balance + self._overdraft_limit
        if amount > available:
            raise InsufficientFundsError(amount, available, "Overdraft limit exceeded")
        self._balance -= amount

    def get_balance(self) -> float:
        return self._balance

    def get_overdraft_limit(self) -> float:
        return self._overdraft_limit

    @property
    def is_overdrawn(self) -> bool:
        return self._balance < 0
