"""Account data model."""

from typing import Protocol

from ledgerbank.models.exceptions import InsufficientBalanceError, InvalidNameError
from ledgerbank.models.validation import normalize_name, validate_amount

# Passed by the ledger when it opens an account. Anything else is refused.
LEDGER_TOKEN = object()


class AggregateLedger(Protocol):
    """The part of a ledger an account is allowed to talk back to."""

    def record_deposit(self, amount: float) -> None: ...

    def record_withdraw(self, amount: float) -> None: ...

    def get_account_by_name(self, name: str) -> "Account": ...


class Account:
    """Represents a bank account."""

    def __init__(
        self,
        ledger: AggregateLedger,
        name: str,
        balance: float,
        *,
        _token: object = None,
    ):
        """
        Open an account. Only a ledger can do this.

        Args:
            ledger: The ledger the account belongs to
            name: The account holder's name (surrounding whitespace is stripped)
            balance: The opening balance (must be positive)

        Raises:
            TypeError: If called from anywhere but the ledger
            InvalidAmountError: If the opening balance is invalid
            InvalidNameError: If the name is empty after stripping
        """
        if _token is not LEDGER_TOKEN:
            raise TypeError("Accounts can only be opened with Ledger.create_account()")

        validate_amount(balance)

        name = normalize_name(name)
        if not name:
            raise InvalidNameError("A valid account name needs to be provided")

        self._ledger = ledger
        self._name = name
        self._balance = balance

    def __repr__(self) -> str:
        return f"Account(name={self._name!r}, balance={self._balance!r})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def balance(self) -> float:
        return self._balance

    def check_balance(self) -> float:
        """Return the current balance of the account."""
        return self._balance

    def deposit(self, amount: float) -> None:
        """
        Deposit funds into the account.

        Args:
            amount: The amount to deposit (must be positive)

        Raises:
            InvalidAmountError: If the amount is invalid
        """
        validate_amount(amount)

        self._balance += amount
        self._ledger.record_deposit(amount)

    def withdraw(self, amount: float) -> None:
        """
        Withdraw funds from the account.

        Withdrawing the whole balance is allowed and leaves the account at zero.

        Args:
            amount: The amount to withdraw (must be positive)

        Raises:
            InvalidAmountError: If the amount is invalid
            InsufficientBalanceError: If the account has insufficient balance
        """
        validate_amount(amount)
        self._ensure_available(amount, "withdraw")

        self._balance -= amount
        self._ledger.record_withdraw(amount)

    def transfer(self, recipient: str, amount: float) -> None:
        """
        Transfer funds to another account of the same bank.

        A transfer to the account itself is accepted and changes nothing.
        The bank's total balance is not updated since the money stays
        within the bank.

        Args:
            recipient: The name of the receiving account
            amount: The amount to transfer (must be positive)

        Raises:
            InvalidAmountError: If the amount is invalid
            InsufficientBalanceError: If the account has insufficient balance
            InvalidNameError: If the recipient name is not a string
            MissingAccountError: If the recipient does not exist within the bank
        """
        validate_amount(amount)
        self._ensure_available(amount, "transfer")

        recipient_name = normalize_name(recipient)
        if recipient_name == self._name:
            return

        # Resolve before touching any balance
        recipient_account = self._ledger.get_account_by_name(recipient_name)
        self._balance -= amount
        recipient_account._receive_transfer(amount)

    def _ensure_available(self, amount: float, action: str) -> None:
        if self._balance < amount:
            raise InsufficientBalanceError(
                f"Insufficient balance: {self._balance} available, "
                f"{amount} requested to {action}"
            )

    def _receive_transfer(self, amount: float) -> None:
        # Only reached from transfer(), which has already validated the amount
        self._balance += amount
