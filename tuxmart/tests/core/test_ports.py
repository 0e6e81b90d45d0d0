"""Unit tests for port interface contracts.

Tests verify that port abstract base classes are properly defined
and that implementations must satisfy the interface contract.
"""

from decimal import Decimal

import pytest

from tuxmart.core.models import Order, Party, Product
from tuxmart.core.ports import (
    FinancialService,
    InventoryService,
    PaymentService,
    SalePort,
)

# ============================================================================
# Test Port Abstraction
# ============================================================================


class TestPortAbstraction:
    """Ports cannot be instantiated directly."""

    @pytest.mark.parametrize(
        "port", [PaymentService, InventoryService, FinancialService, SalePort]
    )
    def test_port_is_abstract(self, port: type) -> None:
        with pytest.raises(TypeError):
            port()

    def test_partial_implementation_is_rejected(self) -> None:
        """A subclass that skips the abstract method stays abstract."""

        class IncompleteInventory(InventoryService):
            def restock(self, product: Product, quantity: Decimal) -> None:
                pass

        with pytest.raises(TypeError):
            IncompleteInventory()  # type: ignore[abstract]


# ============================================================================
# Test Concrete Implementations
# ============================================================================


class StubPaymentService(PaymentService):
    """Stub implementation of PaymentService for testing."""

    def secure_payment(self, amount: Decimal) -> bool:
        return amount <= Decimal(100)


class StubInventoryService(InventoryService):
    """Stub implementation of InventoryService for testing."""

    def deduct_stock(self, product: Product, quantity: Decimal) -> Decimal:
        return Decimal(10) - quantity


class StubFinancialService(FinancialService):
    """Stub implementation of FinancialService for testing."""

    def __init__(self) -> None:
        self.orders: list[Order] = []

    def create_order(self, order: Order) -> None:
        self.orders.append(order)


class TestPortImplementation:
    """Concrete subclasses satisfy the port contracts."""

    def test_payment_service_returns_bool(self) -> None:
        service = StubPaymentService()
        assert service.secure_payment(Decimal(42)) is True
        assert service.secure_payment(Decimal(101)) is False

    def test_inventory_service_returns_resulting_level(self) -> None:
        service = StubInventoryService()
        assert service.deduct_stock(Product(sku="La"), Decimal(4)) == Decimal(6)

    def test_financial_service_returns_none(self) -> None:
        service = StubFinancialService()
        order = Order(order_number="TM-1", buyer=Party("b"), seller=Party("s"))

        assert service.create_order(order) is None
        assert service.orders == [order]
