"""In-memory store for property records."""

from realty_ledger.store.ledger import PortfolioLedger

__all__ = ["PortfolioLedger"]
