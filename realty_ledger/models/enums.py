"""Enumeration types for property records."""

from enum import Enum


class PropertyStatus(str, Enum):
    """Common status labels.

    Status is stored as free text; these values are conventions, not an
    enforced lifecycle.
    """

    ACTIVE = "Active"
    VACANT = "Vacant"
    UNDER_CONTRACT = "Under Contract"
    REHAB = "Rehab"
    SOLD = "Sold"
