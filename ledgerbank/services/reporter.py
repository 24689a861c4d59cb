"""Read-only view over a ledger."""

from ledgerbank.services.ledger import Ledger


class Reporter:
    """Represents the manager of a bank."""

    def __init__(self, ledger: Ledger):
        self._ledger = ledger

    def get_total_bank_balance(self) -> float:
        """Check the total balance of the bank across all the accounts."""
        return self._ledger.get_total_balance()
