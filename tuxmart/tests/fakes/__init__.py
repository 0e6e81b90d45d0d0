"""Fake implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without real collaborators:

- FakePaymentService: Scripted approve/decline answers
- FakeInventoryService: Captured stock deductions, optional failure
- FakeFinancialService: Captured recorded orders for assertion
"""

from .financial import FakeFinancialService
from .inventory import FakeInventoryService
from .payment import FakePaymentService

__all__ = [
    "FakeFinancialService",
    "FakeInventoryService",
    "FakePaymentService",
]
