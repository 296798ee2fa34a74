"""Shared serialization utilities for sinks."""

from dataclasses import fields, is_dataclass
from decimal import Decimal
from typing import Any


def to_dict(obj: Any) -> dict[str, Any]:
    """Convert a flat dataclass or a mapping to a JSON-ready dict."""
    if is_dataclass(obj):
        items = ((f.name, getattr(obj, f.name)) for f in fields(obj))
    else:
        items = obj.items()
    return {name: serialize_value(value) for name, value in items}


def serialize_value(value: Any) -> Any:
    """Render Decimals as strings; other values pass through."""
    if isinstance(value, Decimal):
        return str(value)
    return value
