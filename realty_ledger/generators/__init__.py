"""Sample data generators."""

from realty_ledger.generators.property import PropertyGenerator

__all__ = ["PropertyGenerator"]
