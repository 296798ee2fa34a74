"""Console sink for the portfolio summary."""

import sys
from typing import TYPE_CHECKING, TextIO

from realty_ledger.money import format_money

if TYPE_CHECKING:
    from realty_ledger.store.ledger import PortfolioLedger


class ConsoleSink:
    """Write the flat textual portfolio summary to a stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        """Initialize console sink.

        Parameters
        ----------
        stream : TextIO | None
            Target stream. Defaults to ``sys.stdout`` resolved at write time,
            so output captured by test harnesses is honoured.
        """
        self.stream = stream
        self._lines_written = 0

    @staticmethod
    def render(ledger: "PortfolioLedger") -> list[str]:
        """Build the summary lines: count, one line per property, totals."""
        records = ledger.properties()
        lines = [f"Properties: {len(records)}"]
        lines.extend(prop.describe() for prop in records)
        lines.append(f"Portfolio NOI/yr=${format_money(ledger.portfolio_noi_annual())}")
        lines.append(f"Portfolio equity=${format_money(ledger.portfolio_equity())}")
        return lines

    def write_summary(self, ledger: "PortfolioLedger") -> None:
        """Print the summary for ``ledger``."""
        out = self.stream or sys.stdout
        for line in self.render(ledger):
            print(line, file=out)
            self._lines_written += 1

    @property
    def lines_written(self) -> int:
        return self._lines_written
