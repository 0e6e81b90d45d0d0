"""Port interfaces for the TuxMart store.

These abstract base classes define the boundaries between core
domain logic and external collaborators. Implementations live in
the adapters/ package; in-memory fakes for tests live in
tests/fakes/.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - PaymentService: Secure payment from the buyer
   - InventoryService: Deduct sold stock
   - FinancialService: Record the completed order

2. **Driving Ports** (adapters/external systems call into core)
   - SalePort: Entry point for executing a sale
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from .models import Order, Product


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class PaymentService(ABC):
    """Port for securing payment from a buyer.

    No representation is made about the payment type: an adapter may
    charge a card, accept cash, or establish that the buyer has credit.
    """

    @abstractmethod
    def secure_payment(self, amount: Decimal) -> bool:
        """Secure payment for an amount.

        Args:
            amount: Exact amount to secure (the order's grand total).

        Returns:
            True if and only if payment was secured for the exact amount.
            False means the payment was declined.

        Raises:
            Exception: If the payment backend is unavailable. A decline
                is not an error and must be reported by returning False.
        """


class InventoryService(ABC):
    """Port for adjusting stock levels after a sale."""

    @abstractmethod
    def deduct_stock(self, product: Product, quantity: Decimal) -> Decimal:
        """Deduct a quantity of a product from stock.

        Args:
            product: Product whose stock is reduced.
            quantity: Quantity sold.

        Returns:
            The resulting stock level for the product.

        Raises:
            Exception: If the deduction cannot be made (unknown product,
                insufficient stock, backend unavailable).
        """


class FinancialService(ABC):
    """Port for recording completed orders in the financial system."""

    @abstractmethod
    def create_order(self, order: Order) -> None:
        """Record an order as a financial transaction.

        Args:
            order: The order whose payment has been secured.

        Raises:
            Exception: If the transaction cannot be recorded.
        """


# ============================================================================
# DRIVING PORTS (Adapters/external systems call into core)
# ============================================================================


class SalePort(ABC):
    """Port for executing a sale.

    Driving port: the command-line entry point and tests invoke this
    method to run the sale workflow.

    Implementations of this port live in the core (sale_processor.py).
    """

    @abstractmethod
    def make_sale(self, order: Order) -> None:
        """Conduct the business of a sale for a fully built order.

        Args:
            order: Order with all line items already added.

        Raises:
            Exception: Any failure raised by a collaborator while
                recording the order or deducting stock.
        """
