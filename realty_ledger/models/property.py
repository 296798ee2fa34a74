"""Property model for rental real estate holdings."""

from dataclasses import dataclass
from decimal import Decimal

from realty_ledger.exceptions import InvalidArgumentError
from realty_ledger.models.enums import PropertyStatus
from realty_ledger.money import (
    HUNDRED,
    ZERO,
    exact,
    format_money,
    ratio,
    round_money,
    to_money,
    to_non_negative_money,
)

MONEY_FIELDS = ("purchase", "rehab", "current_value", "rent_monthly")
ACCUMULATOR_FIELDS = ("ytd_income", "ytd_expense")


@dataclass(frozen=True)
class Property:
    """One real-estate asset and its year-to-date financials.

    Records are immutable; the ledger applies updates by replacing a record
    with a modified copy. Every monetary field is normalized to two decimals
    (half-up) on construction, so ``dataclasses.replace`` re-normalizes too.

    Metrics are recomputed from current fields on every call.
    """

    property_id: int
    address: str
    city: str
    purchase: Decimal
    rehab: Decimal
    current_value: Decimal
    rent_monthly: Decimal
    status: str = PropertyStatus.ACTIVE.value
    ytd_income: Decimal = ZERO
    ytd_expense: Decimal = ZERO

    def __post_init__(self) -> None:
        if not self.address:
            raise InvalidArgumentError("address is required")
        if not self.city:
            raise InvalidArgumentError("city is required")
        for name in MONEY_FIELDS:
            object.__setattr__(self, name, to_money(getattr(self, name), name))
        for name in ACCUMULATOR_FIELDS:
            object.__setattr__(self, name, to_non_negative_money(getattr(self, name), name))
        if not self.status:
            object.__setattr__(self, "status", PropertyStatus.ACTIVE.value)
        elif isinstance(self.status, PropertyStatus):
            object.__setattr__(self, "status", self.status.value)

    def annual_noi(self) -> Decimal:
        """Annual rent plus recorded income minus recorded expenses."""
        with exact():
            return round_money(self.rent_monthly * 12 + self.ytd_income - self.ytd_expense)

    def cap_rate_percent(self) -> Decimal:
        """Annual NOI as a percentage of purchase price.

        Returns ``0.00`` when the purchase price is zero.
        """
        if not self.purchase:
            return ZERO
        rate = ratio(self.annual_noi(), self.purchase)
        with exact():
            return round_money(rate * HUNDRED)

    def equity(self) -> Decimal:
        """Current value minus cost basis (purchase + rehab); may be negative."""
        with exact():
            return round_money(self.current_value - (self.purchase + self.rehab))

    def describe(self) -> str:
        """Single summary line for this property."""
        return (
            f"#{self.property_id} {self.address}, {self.city} [{self.status}] "
            f"price=${format_money(self.purchase)} "
            f"value=${format_money(self.current_value)} "
            f"rent/mo=${format_money(self.rent_monthly)} "
            f"NOI/yr=${format_money(self.annual_noi())} "
            f"cap={format_money(self.cap_rate_percent())}%"
        )
