"""In-memory ledger for rental real-estate holdings."""

from realty_ledger.exceptions import ConfigurationError, InvalidArgumentError, LedgerError
from realty_ledger.models import Property, PropertyStatus
from realty_ledger.store import PortfolioLedger

__all__ = [
    "ConfigurationError",
    "InvalidArgumentError",
    "LedgerError",
    "PortfolioLedger",
    "Property",
    "PropertyStatus",
]
