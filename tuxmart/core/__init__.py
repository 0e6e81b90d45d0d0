"""Core domain logic for the TuxMart store.

This package contains zero external dependencies and represents
the pure business logic of the application. All collaborator
implementations are handled by the adapters package.
"""

from .models import LineItem, Order, Party, Product
from .sale_processor import SaleProcessor

__all__ = [
    "LineItem",
    "Order",
    "Party",
    "Product",
    "SaleProcessor",
]
