"""Domain models for the property ledger."""

from realty_ledger.models.enums import PropertyStatus
from realty_ledger.models.property import Property

__all__ = ["Property", "PropertyStatus"]
