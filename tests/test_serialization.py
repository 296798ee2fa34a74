"""Tests for shared serialization utilities."""

from decimal import Decimal

from realty_ledger.models import Property
from realty_ledger.sinks.serialization import serialize_value, to_dict
from realty_ledger.store import PortfolioLedger


class TestToDict:
    """Tests for to_dict function."""

    def test_property(self) -> None:
        prop = Property(1, "1 Elm St", "Shelbyville", Decimal("10"), Decimal("0"), Decimal("12"), Decimal("1"))
        result = to_dict(prop)

        assert result["purchase"] == "10.00"
        assert result["status"] == "Active"
        assert result["ytd_expense"] == "0.00"

    def test_keeps_field_order(self) -> None:
        prop = Property(1, "1 Elm St", "Shelbyville", 10, 0, 12, 1)
        assert list(to_dict(prop)) == [
            "property_id",
            "address",
            "city",
            "purchase",
            "rehab",
            "current_value",
            "rent_monthly",
            "status",
            "ytd_income",
            "ytd_expense",
        ]

    def test_mapping(self) -> None:
        result = to_dict({"properties": 2, "portfolio_equity": Decimal("-5.00")})
        assert result == {"properties": 2, "portfolio_equity": "-5.00"}

    def test_ledger_summary(self, populated_ledger: PortfolioLedger) -> None:
        summary = populated_ledger.summary()

        assert summary["properties"] == 2
        assert isinstance(summary["portfolio_noi_annual"], str)
        assert isinstance(summary["portfolio_equity"], str)


class TestSerializeValue:
    """Tests for serialize_value function."""

    def test_decimal(self) -> None:
        assert serialize_value(Decimal("99.99")) == "99.99"

    def test_passthrough(self) -> None:
        assert serialize_value(7) == 7
        assert serialize_value("Vacant") == "Vacant"
        assert serialize_value(None) is None
