"""Markdown ledger financial adapter.

Implements FinancialService by appending each recorded order to a
daily markdown ledger file (YYYY-MM-DD.md). Useful for keeping a
human-readable audit trail of completed sales.
"""

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

from tuxmart.core.models import Order
from tuxmart.core.ports import FinancialService

logger = logging.getLogger(__name__)


class MarkdownLedgerAdapter(FinancialService):
    """Appends recorded orders to markdown ledger files organized by date."""

    def __init__(
        self,
        ledger_dir: str,
        clock: Callable[[], datetime] = lambda: datetime.now(UTC),
    ):
        """Initialize markdown ledger adapter.

        Args:
            ledger_dir: Directory holding one ledger file per day.
            clock: Source of the entry timestamp.

        Raises:
            ValueError: If ledger_dir is a filesystem root.
            OSError: If the ledger directory cannot be created.
        """
        self.ledger_dir = Path(ledger_dir).resolve()
        self.clock = clock

        if self.ledger_dir.parent == self.ledger_dir:
            raise ValueError(f"ledger_dir cannot be a filesystem root: {ledger_dir}")

        try:
            self.ledger_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OSError(f"Failed to create ledger directory {ledger_dir}: {e}") from e

    def ledger_path(self, when: datetime) -> Path:
        """Ledger file that entries recorded at `when` are appended to."""
        return self.ledger_dir / f"{when.strftime('%Y-%m-%d')}.md"

    def create_order(self, order: Order) -> None:
        """Append the order to today's ledger file."""
        recorded_at = self.clock()
        path = self.ledger_path(recorded_at)
        entry = self._format_entry(order, recorded_at)

        try:
            with path.open("a", encoding="utf-8") as f:
                f.write(entry)
        except OSError as e:
            logger.error(f"Failed to write ledger entry to {path}: {e}", exc_info=True)
            raise

        logger.info(f"Recorded order {order.order_number} in {path}")

    @staticmethod
    def _format_entry(order: Order, recorded_at: datetime) -> str:
        """Format one ledger entry as a markdown section with a table."""
        lines = [
            f"## Order {order.order_number}",
            "",
            f"- **Recorded:** {recorded_at.isoformat()}",
            f"- **Buyer:** {order.buyer.name or order.buyer.party_id}",
            f"- **Seller:** {order.seller.name or order.seller.party_id}",
            "",
            "| SKU | Description | Quantity | Unit Price | Extended Price |",
            "|-----|-------------|----------|------------|----------------|",
        ]
        for item in order.line_items:
            lines.append(
                f"| {_table_cell(item.sku)} | {_table_cell(item.product.description)} "
                f"| {item.quantity} "
                f"| {item.unit_price} | {item.extended_price} |"
            )
        lines.extend(["", f"**Grand Total:** {order.grand_total}", "", ""])
        return "\n".join(lines)


def _table_cell(text: str) -> str:
    """Make text safe for a single markdown table cell.

    Runs of whitespace, including newlines, collapse to one space and
    pipes are escaped so the row keeps its column count.
    """
    return " ".join(text.split()).replace("|", "\\|")
