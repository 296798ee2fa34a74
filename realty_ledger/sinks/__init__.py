"""Output sinks for ledger summaries and snapshots."""

from realty_ledger.sinks.console import ConsoleSink
from realty_ledger.sinks.serialization import serialize_value, to_dict

__all__ = ["ConsoleSink", "serialize_value", "to_dict"]
