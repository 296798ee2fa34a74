"""In-memory portfolio ledger with validated mutations."""

import dataclasses
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, TextIO

from realty_ledger.exceptions import InvalidArgumentError
from realty_ledger.logging import get_logger, log_fields
from realty_ledger.models import Property
from realty_ledger.money import (
    ZERO,
    MoneyLike,
    exact,
    round_money,
    to_money,
    to_non_negative_money,
)
from realty_ledger.sinks.console import ConsoleSink
from realty_ledger.sinks.serialization import to_dict

logger = get_logger(__name__)


@dataclass
class PortfolioLedger:
    """Ordered collection of properties plus the id counter.

    Insertion order is display order. Ids start at 1 and are never reused.
    Mutators validate their arguments before looking up the property, so a
    rejected call never changes state. An unknown id is not an error: the
    mutator returns ``False``.
    """

    _properties: list[Property] = field(default_factory=list, init=False)
    _next_id: int = field(default=1, init=False)

    def __len__(self) -> int:
        return len(self._properties)

    def add_property(
        self,
        address: str,
        city: str,
        purchase: MoneyLike,
        rehab: MoneyLike,
        initial_value: MoneyLike,
        rent_monthly: MoneyLike,
        status: str | None = None,
    ) -> int:
        """Add a property and return its new id.

        Parameters
        ----------
        address, city : str
            Required, non-empty.
        purchase, rehab, initial_value, rent_monthly : Decimal | int | float | str
            Required amounts, rounded half-up to cents. Sign is not checked.
        status : str | None
            Free-text label, ``"Active"`` when omitted or empty.

        Raises
        ------
        InvalidArgumentError
            If a text field is empty or an amount is missing.
        """
        if not address:
            raise InvalidArgumentError("address is required")
        if not city:
            raise InvalidArgumentError("city is required")

        prop = Property(
            property_id=self._next_id,
            address=address,
            city=city,
            purchase=to_money(purchase, "purchase"),
            rehab=to_money(rehab, "rehab"),
            current_value=to_money(initial_value, "initial_value"),
            rent_monthly=to_money(rent_monthly, "rent_monthly"),
            status=status or "",
        )
        self._properties.append(prop)
        self._next_id += 1
        logger.info(
            "Added property #%d %s, %s",
            prop.property_id,
            prop.address,
            prop.city,
            extra=log_fields(property_id=prop.property_id, purchase=str(prop.purchase)),
        )
        return prop.property_id

    def update_rent(self, property_id: int, new_rent_monthly: MoneyLike) -> bool:
        """Replace the monthly rent. Returns ``False`` for an unknown id."""
        rent = to_non_negative_money(new_rent_monthly, "new_rent_monthly")
        return self._replace(property_id, rent_monthly=rent)

    def update_current_value(self, property_id: int, new_value: MoneyLike) -> bool:
        """Replace the current market value. Returns ``False`` for an unknown id."""
        value = to_non_negative_money(new_value, "new_value")
        return self._replace(property_id, current_value=value)

    def record_income(self, property_id: int, date: Any, note: Any, amount: MoneyLike) -> bool:
        """Add ``amount`` to year-to-date income.

        ``date`` and ``note`` are accepted for the caller's bookkeeping but
        not stored; only the running total is kept.
        """
        value = to_non_negative_money(amount, "amount")
        logger.debug(
            "Income %s for #%s (date=%r, note=%r)",
            value,
            property_id,
            date,
            note,
            extra=log_fields(property_id=property_id, amount=str(value)),
        )
        return self._accumulate(property_id, "ytd_income", value)

    def record_expense(self, property_id: int, date: Any, note: Any, amount: MoneyLike) -> bool:
        """Add ``amount`` to year-to-date expenses. See :meth:`record_income`."""
        value = to_non_negative_money(amount, "amount")
        logger.debug(
            "Expense %s for #%s (date=%r, note=%r)",
            value,
            property_id,
            date,
            note,
            extra=log_fields(property_id=property_id, amount=str(value)),
        )
        return self._accumulate(property_id, "ytd_expense", value)

    # Query methods
    def get_property(self, property_id: int) -> Property | None:
        """Return the record for ``property_id`` or None."""
        return self._find(property_id)

    def properties(self) -> tuple[Property, ...]:
        """All records in insertion order."""
        return tuple(self._properties)

    def portfolio_noi_annual(self) -> Decimal:
        """Sum of annual NOI over all properties."""
        with exact():
            return round_money(sum((p.annual_noi() for p in self._properties), ZERO))

    def portfolio_equity(self) -> Decimal:
        """Sum of equity over all properties."""
        with exact():
            return round_money(sum((p.equity() for p in self._properties), ZERO))

    def snapshot(self) -> list[dict[str, Any]]:
        """Plain-dict copy of every record, for comparisons and logging."""
        return [to_dict(p) for p in self._properties]

    def summary(self) -> dict[str, Any]:
        """Return property count and portfolio totals."""
        return to_dict(
            {
                "properties": len(self._properties),
                "portfolio_noi_annual": self.portfolio_noi_annual(),
                "portfolio_equity": self.portfolio_equity(),
            }
        )

    def summary_lines(self) -> list[str]:
        """The textual summary as a list of lines."""
        return ConsoleSink.render(self)

    def print_summary(self, stream: TextIO | None = None) -> None:
        """Print the textual summary to ``stream`` (stdout by default)."""
        ConsoleSink(stream).write_summary(self)

    def _find(self, property_id: int) -> Property | None:
        idx = self._index_of(property_id)
        return None if idx is None else self._properties[idx]

    def _index_of(self, property_id: int) -> int | None:
        for idx, prop in enumerate(self._properties):
            if prop.property_id == property_id:
                return idx
        return None

    def _replace(self, property_id: int, **changes: Decimal) -> bool:
        idx = self._index_of(property_id)
        if idx is None:
            logger.debug("Property #%s not found", property_id, extra=log_fields(property_id=property_id))
            return False
        self._properties[idx] = dataclasses.replace(self._properties[idx], **changes)
        logger.debug(
            "Updated property #%d: %s",
            property_id,
            ", ".join(changes),
            extra=log_fields(property_id=property_id, **{name: str(v) for name, v in changes.items()}),
        )
        return True

    def _accumulate(self, property_id: int, field_name: str, amount: Decimal) -> bool:
        prop = self._find(property_id)
        if prop is None:
            logger.debug("Property #%s not found", property_id, extra=log_fields(property_id=property_id))
            return False
        with exact():
            total = round_money(getattr(prop, field_name) + amount)
        return self._replace(property_id, **{field_name: total})
