"""Custom exceptions for the banking system."""


class BankError(Exception):
    """Base exception for all banking-related errors."""
    pass


class InvalidAmountError(BankError):
    """Raised when an invalid amount is provided (e.g., zero or negative amount)."""
    pass


class InvalidNameError(BankError):
    """Raised when an account name is empty or not a string."""
    pass


class NameAlreadyExistsError(BankError):
    """Raised when attempting to create an account whose name is already taken."""
    pass


class InsufficientBalanceError(BankError):
    """Raised when an account has insufficient balance for a transaction."""
    pass


class MissingAccountError(BankError):
    """Raised when an account cannot be found within the bank."""
    pass
