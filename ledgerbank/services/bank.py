"""Entry point for creating a bank and its manager."""

from typing import NamedTuple, Protocol

from ledgerbank.models.account import Account
from ledgerbank.services.ledger import Ledger
from ledgerbank.services.reporter import Reporter


class Bank(Protocol):
    """What holders of the bank capability can do: open accounts."""

    def create_account(self, name: str, balance: float) -> Account: ...


class Manager(Protocol):
    """What holders of the manager capability can do: read the total."""

    def get_total_bank_balance(self) -> float: ...


class BankCreationResult(NamedTuple):
    """A new bank together with its manager."""

    bank: Bank
    manager: Manager


def create_bank() -> BankCreationResult:
    """
    Create a new, empty bank.

    Every call returns an independent bank; nothing is shared between them.

    Returns:
        The bank (account creation) and its manager (total balance)
    """
    ledger = Ledger()
    return BankCreationResult(bank=ledger, manager=Reporter(ledger))
