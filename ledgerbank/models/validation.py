"""Input validation shared by accounts and the ledger."""

import math
from numbers import Real

from ledgerbank.models.exceptions import InvalidAmountError, InvalidNameError


def validate_amount(amount: float) -> None:
    """
    Check that an amount can be moved in or out of an account.

    Args:
        amount: The caller-supplied amount

    Raises:
        InvalidAmountError: If the amount is not a finite number greater than zero
    """
    # bool is a Real subclass; True is not an amount
    if isinstance(amount, bool) or not isinstance(amount, Real):
        raise InvalidAmountError(f"Amount must be a number, got {amount!r}")
    if not math.isfinite(amount):
        raise InvalidAmountError(f"Amount must be finite, got {amount}")
    if amount <= 0:
        raise InvalidAmountError(
            f"Invalid amount: {amount}. Amount must be greater than zero."
        )


def normalize_name(name: str) -> str:
    """Strip surrounding whitespace from an account name."""
    if not isinstance(name, str):
        raise InvalidNameError(f"Account name must be a string, got {name!r}")
    return name.strip()
