"""Payment adapter that approves every payment.

Useful for demos and smoke runs where payment is not the concern.
"""

import logging
from decimal import Decimal

from tuxmart.core.ports import PaymentService

logger = logging.getLogger(__name__)


class AlwaysApprovePaymentAdapter(PaymentService):
    """Secures every payment and remembers the amounts."""

    def __init__(self) -> None:
        self.approved_amounts: list[Decimal] = []

    def secure_payment(self, amount: Decimal) -> bool:
        self.approved_amounts.append(amount)
        logger.info(f"Approved payment of {amount}")
        return True
