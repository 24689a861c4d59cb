"""Banking services built on top of the account model."""

from .bank import Bank, BankCreationResult, Manager, create_bank
from .ledger import Ledger
from .reporter import Reporter

__all__ = [
    "Bank",
    "BankCreationResult",
    "Manager",
    "create_bank",
    "Ledger",
    "Reporter",
]
