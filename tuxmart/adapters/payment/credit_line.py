"""Credit line payment adapter.

Implements PaymentService by drawing sales against a fixed credit limit.
Each approved payment reserves its amount, so later sales see only the
credit that remains.
"""

import logging
from decimal import Decimal

from tuxmart.core.models import Number, to_decimal
from tuxmart.core.ports import PaymentService

logger = logging.getLogger(__name__)


class CreditLinePaymentAdapter(PaymentService):
    """Approves payments while the buyer's credit line covers them."""

    def __init__(self, credit_limit: Number):
        """Initialize credit line payment adapter.

        Args:
            credit_limit: Total credit available across all payments.

        Raises:
            ValueError: If credit_limit is negative or not a number.
        """
        limit = to_decimal(credit_limit, "credit_limit")
        if limit < 0:
            raise ValueError(f"credit_limit must be non-negative, got {limit}")
        self.credit_limit = limit
        self._used = Decimal("0")

    @property
    def available_credit(self) -> Decimal:
        """Credit not yet drawn by approved payments."""
        return self.credit_limit - self._used

    def secure_payment(self, amount: Decimal) -> bool:
        """Draw the amount against the credit line if it fits."""
        if amount < 0:
            logger.warning(f"Declined payment of negative amount {amount}")
            return False

        if amount > self.available_credit:
            logger.info(
                f"Declined payment of {amount}: only {self.available_credit} "
                f"credit available"
            )
            return False

        self._used += amount
        logger.info(
            f"Secured payment of {amount}, {self.available_credit} credit remaining"
        )
        return True
