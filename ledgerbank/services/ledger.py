"""Ledger service: the bank's account registry and running total."""

import logging

from ledgerbank.models.account import LEDGER_TOKEN, Account
from ledgerbank.models.exceptions import MissingAccountError, NameAlreadyExistsError
from ledgerbank.models.validation import normalize_name, validate_amount

logger = logging.getLogger(__name__)


class Ledger:
    """Registry of accounts keeping the total balance of the bank."""

    def __init__(self):
        self._accounts: dict[str, Account] = {}
        self._total_balance = 0

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip() in self._accounts

    def create_account(self, name: str, balance: float) -> Account:
        """
        Create an account with the given name and opening balance.

        Args:
            name: The account holder's name (surrounding whitespace is stripped)
            balance: The opening balance (must be positive)

        Returns:
            The newly created Account

        Raises:
            InvalidAmountError: If the opening balance is invalid
            NameAlreadyExistsError: If an account with that name already exists
            InvalidNameError: If the name is empty
        """
        validate_amount(balance)

        key = normalize_name(name)
        if key in self._accounts:
            raise NameAlreadyExistsError(f"Account {key} already exists")

        account = Account(self, key, balance, _token=LEDGER_TOKEN)

        self._accounts[key] = account
        self._total_balance += balance

        logger.debug("Opened account %s with balance %s", key, balance)
        return account

    def get_account_by_name(self, name: str) -> Account:
        """
        Find an account by name.

        Raises:
            MissingAccountError: If the account does not exist within the bank
        """
        account = self._accounts.get(name)
        if account is None:
            raise MissingAccountError(f"Account {name} not found")
        return account

    def record_deposit(self, amount: float) -> None:
        """Add an amount already credited to one of the accounts."""
        self._total_balance += amount

    def record_withdraw(self, amount: float) -> None:
        """Remove an amount already debited from one of the accounts."""
        # Accounts never go negative, so neither can their sum
        self._total_balance -= amount

    def get_total_balance(self) -> float:
        """Return the total balance held across all accounts."""
        return self._total_balance
