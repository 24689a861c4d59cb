"""Tests for Account withdraw operations."""

import pytest

from ledgerbank.models.exceptions import InsufficientBalanceError, InvalidAmountError
from ledgerbank.services.bank import create_bank


@pytest.fixture
def bank():
    """Create a bank and its manager."""
    return create_bank()


@pytest.fixture
def account(bank):
    """Create an account with an opening balance of 50."""
    return bank.bank.create_account("Erin", 50)


def test_withdraw_success(account):
    """Withdraw decreases the account balance."""
    account.withdraw(20)
    assert account.check_balance() == 30


def test_multiple_withdrawals(account):
    """Withdrawals accumulate."""
    account.withdraw(20)
    account.withdraw(20)
    assert account.check_balance() == 10


def test_withdraw_updates_total_balance(bank, account):
    """Withdraw is reflected in the bank's total balance."""
    account.withdraw(20)
    assert bank.manager.get_total_bank_balance() == 30


def test_withdraw_entire_balance(bank, account):
    """A withdrawal that brings the balance to 0 is allowed."""
    account.withdraw(50)
    assert account.check_balance() == 0
    assert bank.manager.get_total_bank_balance() == 0


@pytest.mark.parametrize("amount", [51, 70, 50.01])
def test_withdraw_insufficient_balance(bank, account, amount):
    """Should raise InsufficientBalanceError and leave balances untouched."""
    with pytest.raises(InsufficientBalanceError):
        account.withdraw(amount)

    assert account.check_balance() == 50
    assert bank.manager.get_total_bank_balance() == 50


@pytest.mark.parametrize("amount", [0, -5])
def test_withdraw_invalid_amount(bank, account, amount):
    """Should raise InvalidAmountError for zero or negative amount."""
    with pytest.raises(InvalidAmountError):
        account.withdraw(amount)

    assert account.check_balance() == 50
    assert bank.manager.get_total_bank_balance() == 50


def test_withdraw_invalid_amount_checked_before_balance(account):
    """A negative amount is invalid even when it would otherwise be 'affordable'."""
    account.withdraw(50)

    with pytest.raises(InvalidAmountError):
        account.withdraw(-100)
