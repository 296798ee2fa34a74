"""Custom exception hierarchy for realty-ledger."""


class LedgerError(Exception):
    """Base exception for all realty-ledger errors."""


class InvalidArgumentError(LedgerError, ValueError):
    """Raised when an operation receives a missing or out-of-range argument.

    Always raised before any mutation, so the ledger is left unchanged.
    """


class ConfigurationError(LedgerError):
    """Raised when configuration is invalid or missing."""
