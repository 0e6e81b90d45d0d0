"""Inventory adapters for keeping stock levels."""

from .memory import InMemoryInventoryAdapter, load_stock_file

__all__ = ["InMemoryInventoryAdapter", "load_stock_file"]
