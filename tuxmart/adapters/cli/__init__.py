"""Command-line support: reading order documents from disk."""

from .order_file import OrderDocument, load_order

__all__ = ["OrderDocument", "load_order"]
