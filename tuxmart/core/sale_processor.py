"""Sale orchestration for the TuxMart store.

This module coordinates a single sale by calling out to the payment,
financial and inventory ports in turn.
"""

from .models import Order
from .ports import FinancialService, InventoryService, PaymentService, SalePort


class SaleProcessor(SalePort):
    """Orchestrates a sale across the three collaborator ports.

    Collaborators are passed to the constructor, so a test substitutes
    fakes or mocks simply by constructing the processor with them.
    Uses ports but contains no adapter-specific logic, and keeps no
    state between sales.
    """

    def __init__(
        self,
        payment_service: PaymentService,
        inventory_service: InventoryService,
        financial_service: FinancialService,
    ):
        for name, collaborator in (
            ("payment_service", payment_service),
            ("inventory_service", inventory_service),
            ("financial_service", financial_service),
        ):
            if collaborator is None:
                raise ValueError(f"{name} is required")

        self._payment_service = payment_service
        self._inventory_service = inventory_service
        self._financial_service = financial_service

    @property
    def payment_service(self) -> PaymentService:
        return self._payment_service

    @property
    def inventory_service(self) -> InventoryService:
        return self._inventory_service

    @property
    def financial_service(self) -> FinancialService:
        return self._financial_service

    def make_sale(self, order: Order) -> None:
        """Secure payment, record the order, then deduct stock.

        Steps:
        1. Secure payment for the grand total (card, cash or credit)
        2. Record the event in the financial system
        3. Subtract each line item's quantity from inventory

        A declined payment ends the sale silently with no further calls.
        Nothing is rolled back: if recording or a deduction raises, the
        exception propagates and earlier steps stay in effect.
        """
        if not self._payment_service.secure_payment(order.grand_total):
            return

        self._financial_service.create_order(order)
        for item in order.line_items:
            self._inventory_service.deduct_stock(item.product, item.quantity)
