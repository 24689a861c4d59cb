"""Tests for data models, validation helpers and exceptions."""

import math

import pytest

from ledgerbank.models.account import LEDGER_TOKEN, Account
from ledgerbank.models.exceptions import (
    BankError,
    InvalidAmountError,
    InvalidNameError,
    NameAlreadyExistsError,
    InsufficientBalanceError,
    MissingAccountError,
)
from ledgerbank.models.validation import normalize_name, validate_amount
from ledgerbank.services.ledger import Ledger


@pytest.mark.parametrize("amount", [1, 0.01, 50, 10**12])
def test_validate_amount_accepts_positive(amount):
    """Positive finite amounts pass silently."""
    assert validate_amount(amount) is None


@pytest.mark.parametrize("amount", [0, 0.0, -1, -0.5, math.inf, -math.inf, math.nan])
def test_validate_amount_rejects_non_positive_or_non_finite(amount):
    """Zero, negative and non-finite amounts are invalid."""
    with pytest.raises(InvalidAmountError):
        validate_amount(amount)


@pytest.mark.parametrize("amount", ["10", None, True, [5]])
def test_validate_amount_rejects_non_numbers(amount):
    """Strings, None, booleans and containers are not amounts."""
    with pytest.raises(InvalidAmountError):
        validate_amount(amount)


def test_normalize_name_strips_whitespace():
    """Surrounding whitespace is removed, inner whitespace kept."""
    assert normalize_name("  John Doe \t") == "John Doe"
    assert normalize_name("   ") == ""


def test_normalize_name_rejects_non_string():
    """Only strings can be account names."""
    with pytest.raises(InvalidNameError):
        normalize_name(42)


def test_account_cannot_be_constructed_directly():
    """Accounts are only handed out by a ledger."""
    with pytest.raises(TypeError):
        Account(Ledger(), "Erin", 50)


def test_account_construction_with_ledger_token():
    """The ledger token opens an account with a stripped name."""
    account = Account(Ledger(), "  Erin ", 50, _token=LEDGER_TOKEN)

    assert account.name == "Erin"
    assert account.balance == 50
    assert account.check_balance() == 50
    assert repr(account) == "Account(name='Erin', balance=50)"


def test_account_construction_validates_inputs():
    """Opening balance and name are validated on construction."""
    with pytest.raises(InvalidAmountError):
        Account(Ledger(), "Erin", 0, _token=LEDGER_TOKEN)
    with pytest.raises(InvalidNameError):
        Account(Ledger(), "  ", 50, _token=LEDGER_TOKEN)


def test_exceptions_hierarchy():
    """Test that all custom exceptions inherit from BankError."""
    assert issubclass(InvalidAmountError, BankError)
    assert issubclass(InvalidNameError, BankError)
    assert issubclass(NameAlreadyExistsError, BankError)
    assert issubclass(InsufficientBalanceError, BankError)
    assert issubclass(MissingAccountError, BankError)

    # Also verify they can be instantiated and caught
    errors = [
        InvalidAmountError(),
        InvalidNameError(),
        NameAlreadyExistsError(),
        InsufficientBalanceError(),
        MissingAccountError(),
    ]

    for error in errors:
        assert isinstance(error, BankError)
