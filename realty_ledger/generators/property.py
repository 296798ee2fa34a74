"""Sample property and activity generator."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Iterator

from realty_ledger.generators.base import BaseGenerator
from realty_ledger.logging import get_logger, log_fields
from realty_ledger.models.enums import PropertyStatus

if TYPE_CHECKING:
    from realty_ledger.store.ledger import PortfolioLedger

logger = get_logger(__name__)


class PropertyGenerator(BaseGenerator):
    """Generate synthetic rental properties and their monthly activity."""

    STATUSES = list(PropertyStatus)
    STATUS_WEIGHTS = [0.75, 0.08, 0.05, 0.07, 0.05]

    PURCHASE_RANGE = (80_000, 900_000)
    REHAB_SHARE = (0.0, 0.15)
    APPRECIATION = (0.90, 1.30)
    # Monthly rent as a share of purchase price (the "1% rule" band)
    RENT_SHARE = (0.005, 0.011)

    INCOME_NOTES = ["Late fee", "Laundry", "Parking", "Pet fee", "Application fee"]
    EXPENSE_NOTES = {
        "Property tax": (150, 900),
        "Insurance": (60, 250),
        "Repairs": (50, 1500),
        "Landscaping": (40, 200),
        "Management fee": (80, 400),
    }

    def generate(self) -> dict[str, Any]:
        """Generate keyword arguments for ``PortfolioLedger.add_property``.

        Returns
        -------
        dict[str, Any]
            address, city, purchase, rehab, initial_value, rent_monthly, status.
        """
        purchase = round(self.rng.uniform(*self.PURCHASE_RANGE) / 500) * 500
        rehab = purchase * self.rng.uniform(*self.REHAB_SHARE)
        initial_value = (purchase + rehab) * self.rng.uniform(*self.APPRECIATION)
        rent = purchase * self.rng.uniform(*self.RENT_SHARE)
        status = self.rng.choices(self.STATUSES, weights=self.STATUS_WEIGHTS, k=1)[0]

        return {
            "address": self.fake.street_address(),
            "city": self.fake.city(),
            "purchase": Decimal(purchase),
            "rehab": _money(rehab),
            "initial_value": _money(initial_value),
            "rent_monthly": _money(rent),
            "status": status.value,
        }

    def generate_batch(self, count: int) -> Iterator[dict[str, Any]]:
        """Generate multiple property argument sets.

        Parameters
        ----------
        count : int
            Number of properties to generate.

        Yields
        ------
        dict[str, Any]
            Keyword arguments for ``add_property``.
        """
        for _ in range(count):
            yield self.generate()

    def populate(self, ledger: PortfolioLedger, count: int) -> list[int]:
        """Add ``count`` generated properties to ``ledger`` and return their ids."""
        ids = [ledger.add_property(**kwargs) for kwargs in self.generate_batch(count)]
        logger.info("Generated %d properties", len(ids))
        return ids

    def generate_activity(
        self,
        ledger: PortfolioLedger,
        property_id: int,
        months: int = 12,
        year: int | None = None,
    ) -> int:
        """Record generated income and expenses for one property.

        Each month gets at most one ancillary income event and one or two
        expenses, dated within that month.

        Parameters
        ----------
        ledger : PortfolioLedger
            Ledger holding the property.
        property_id : int
            Target property.
        months : int
            Number of months, starting in January (capped at 12).
        year : int | None
            Calendar year for event dates (default: current year).

        Returns
        -------
        int
            Number of events recorded; 0 if the property does not exist.
        """
        year = year or date.today().year
        recorded = 0

        for month in range(1, min(months, 12) + 1):
            if self.rng.random() < 0.4:
                note = self.rng.choice(self.INCOME_NOTES)
                amount = _money(self.rng.uniform(25, 250))
                if ledger.record_income(property_id, self._day_in(year, month), note, amount):
                    recorded += 1

            for note in self.rng.sample(list(self.EXPENSE_NOTES), k=self.rng.randint(1, 2)):
                low, high = self.EXPENSE_NOTES[note]
                amount = _money(self.rng.uniform(low, high))
                if ledger.record_expense(property_id, self._day_in(year, month), note, amount):
                    recorded += 1

        logger.debug(
            "Recorded %d events for property #%s",
            recorded,
            property_id,
            extra=log_fields(property_id=property_id, events=recorded),
        )
        return recorded

    def _day_in(self, year: int, month: int) -> date:
        return date(year, month, self.rng.randint(1, 28))


def _money(value: float) -> Decimal:
    return Decimal(str(round(value, 2)))
