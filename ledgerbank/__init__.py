"""In-memory bank with accounts, transfers and a running total balance."""

from ledgerbank.models import (
    Account,
    BankError,
    InvalidAmountError,
    InvalidNameError,
    NameAlreadyExistsError,
    InsufficientBalanceError,
    MissingAccountError,
)
from ledgerbank.services import Bank, BankCreationResult, Manager, create_bank

__all__ = [
    "Account",
    "Bank",
    "BankCreationResult",
    "Manager",
    "create_bank",
    "BankError",
    "InvalidAmountError",
    "InvalidNameError",
    "NameAlreadyExistsError",
    "InsufficientBalanceError",
    "MissingAccountError",
]
