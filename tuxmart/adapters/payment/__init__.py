"""Payment adapters for securing payment from buyers."""

from .always_approve import AlwaysApprovePaymentAdapter
from .credit_line import CreditLinePaymentAdapter

__all__ = ["AlwaysApprovePaymentAdapter", "CreditLinePaymentAdapter"]
