"""Custom exception hierarchy for atm-ledger."""


class AtmError(Exception):
    """Base exception for all atm-ledger errors."""


class InvalidArgumentError(AtmError, ValueError):
    """Raised when an operation receives malformed or disallowed input."""


class DuplicateAccountError(InvalidArgumentError):
    """Raised when a credential is already registered."""


class InvalidCredentialError(InvalidArgumentError):
    """Raised when no account matches the given credential."""


class InvalidAmountError(InvalidArgumentError):
    """Raised when a cash amount is negative or not a finite number."""


class RuntimeFailureError(AtmError, RuntimeError):
    """Raised when a valid request cannot be satisfied in the current state."""


class InsufficientFundsError(RuntimeFailureError):
    """Raised when a withdrawal exceeds the account balance."""


class ConfigurationError(AtmError):
    """Raised when configuration is invalid or missing."""
