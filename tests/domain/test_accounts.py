import pytest
from orderflow.domain.account import (
    BasicAccount,
    DepositableAccount,
    NoOverdraftAccount,
    OverdraftBankAccount,
    SavingsAccount,
    StandardBankAccount,
)
from orderflow.domain.core.exceptions import (
    InsufficientFundsError,
    InvalidArgumentError,
    MinimumDepositError,
)


@pytest.mark.parametrize("account_class", [BasicAccount, StandardBankAccount, OverdraftBankAccount])
def test_depositable_accounts_accept_any_positive_deposit(account_class):
    # Arrange
    account = account_class()

    # Act
    account.deposit(0.5)

    # Assert
    assert isinstance(account, DepositableAccount)
    assert account.get_balance() == 0.5


@pytest.mark.parametrize("account_class", [BasicAccount, StandardBankAccount, OverdraftBankAccount, SavingsAccount])
@pytest.mark.parametrize("amount", [0, -10])
def test_non_positive_deposit_rejected(account_class, amount):
    with pytest.raises(InvalidArgumentError):
        account_class().deposit(amount)


def test_standard_account_never_goes_negative():
    # Arrange
    account = StandardBankAccount()
    account.deposit(100)

    # Act & Assert
    with pytest.raises(InsufficientFundsError):
        account.withdraw(150)

    assert account.get_balance() == 100


def test_standard_account_withdraw():
    account = StandardBankAccount()
    account.deposit(100)

    account.withdraw(40)

    assert account.get_balance() == 60
    assert isinstance(account, NoOverdraftAccount)


def test_overdraft_account_goes_negative_within_limit():
    account = OverdraftBankAccount()
    account.deposit(100)

    account.withdraw(500)

    assert account.get_balance() == -400
    assert account.is_overdrawn


def test_overdraft_account_rejects_beyond_limit():
    account = OverdraftBankAccount(overdraft_limit=1000)
    account.deposit(100)

    with pytest.raises(InsufficientFundsError) as exc_info:
        account.withdraw(1100.01)

    assert exc_info.value.message == "Overdraft limit exceeded"
    assert account.get_balance() == 100
    assert account.get_overdraft_limit() == 1000


@pytest.mark.parametrize("account_class", [StandardBankAccount, OverdraftBankAccount])
def test_non_positive_withdrawal_rejected(account_class):
    with pytest.raises(InvalidArgumentError):
        account_class().withdraw(0)


def test_savings_account_enforces_minimum():
    account = SavingsAccount()

    with pytest.raises(MinimumDepositError):
        account.deposit(5)

    account.deposit(10)
    assert account.get_balance() == 10
    assert account.get_minimum_deposit() == 10


def test_basic_account_accepts_small_deposit():
    account = BasicAccount()

    account.deposit(5)

    assert account.get_balance() == 5
