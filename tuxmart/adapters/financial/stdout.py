"""Stdout financial adapter.

Implements FinancialService by printing each recorded order to the
terminal as a human-readable journal entry.
"""

import logging

from tuxmart.core.models import Order
from tuxmart.core.ports import FinancialService

logger = logging.getLogger(__name__)


class StdoutFinancialAdapter(FinancialService):
    """Prints recorded orders to stdout with human-readable formatting."""

    def __init__(self, verbose: bool = False):
        """Initialize stdout financial adapter.

        Args:
            verbose: If True, include the line item breakdown in output.
        """
        self.verbose = verbose

    def create_order(self, order: Order) -> None:
        """Record an order by printing a journal entry."""
        print(self._format_header(order))
        if self.verbose:
            print(self._format_line_items(order))
        print(self._format_footer(order))
        logger.info(f"Recorded order {order.order_number} ({order.grand_total})")

    @staticmethod
    def _format_header(order: Order) -> str:
        """Format the journal entry header."""
        lines = [
            "=" * 80,
            f"ORDER {order.order_number}",
            "=" * 80,
            f"Buyer: {order.buyer.name or order.buyer.party_id}",
            f"Seller: {order.seller.name or order.seller.party_id}",
            f"Line Items: {len(order.line_items)}",
        ]
        return "\n".join(lines)

    @staticmethod
    def _format_line_items(order: Order) -> str:
        """Format the line item breakdown."""
        lines = ["", "-" * 80]
        for i, item in enumerate(order.line_items, 1):
            lines.append(
                f"  {i}. {item.sku} {item.product.description} "
                f"{item.quantity} x {item.unit_price} = {item.extended_price}"
            )
        lines.append("-" * 80)
        return "\n".join(lines)

    @staticmethod
    def _format_footer(order: Order) -> str:
        """Format the journal entry footer."""
        return "\n".join([f"Grand Total: {order.grand_total}", "=" * 80])
