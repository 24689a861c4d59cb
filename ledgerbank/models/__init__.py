"""Data models for the banking system."""

from .account import Account, AggregateLedger
from .exceptions import (
    BankError,
    InvalidAmountError,
    InvalidNameError,
    NameAlreadyExistsError,
    InsufficientBalanceError,
    MissingAccountError,
)
from .validation import normalize_name, validate_amount

__all__ = [
    "Account",
    "AggregateLedger",
    "BankError",
    "InvalidAmountError",
    "InvalidNameError",
    "NameAlreadyExistsError",
    "InsufficientBalanceError",
    "MissingAccountError",
    "normalize_name",
    "validate_amount",
]
