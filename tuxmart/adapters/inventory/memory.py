"""In-memory inventory adapter.

Implements InventoryService with a per-SKU stock table held in memory.
Stock can be seeded from a JSON file mapping SKU to quantity.
"""

import logging
from collections.abc import Mapping
from decimal import Decimal
from pathlib import Path
from typing import Annotated

from pydantic import Field, TypeAdapter, ValidationError

from tuxmart.core.models import Number, Product, to_decimal
from tuxmart.core.ports import InventoryService

logger = logging.getLogger(__name__)

StockDocument = TypeAdapter(dict[str, Annotated[Decimal, Field(allow_inf_nan=False)]])


def load_stock_file(path: str | Path) -> dict[str, Decimal]:
    """Read starting stock levels from a JSON file.

    The file holds a single object mapping SKU to quantity, e.g.
    ``{"La": 10, "Ti": "2.5"}``. The document is validated with
    pydantic, which parses quantities straight into finite Decimals.

    Args:
        path: Path to the JSON stock file.

    Returns:
        Mapping of SKU to stock level.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the file is not a JSON object mapping SKU to a
            finite quantity.
    """
    stock_path = Path(path)
    try:
        text = stock_path.read_text(encoding="utf-8")
    except OSError as e:
        raise OSError(f"Failed to read stock file {stock_path}: {e}") from e

    try:
        return StockDocument.validate_json(text)
    except ValidationError as e:
        raise ValueError(f"Stock file {stock_path} is invalid: {e}") from e


class InMemoryInventoryAdapter(InventoryService):
    """Keeps stock levels per SKU in a dictionary."""

    def __init__(
        self,
        stock: Mapping[str, Number] | None = None,
        allow_backorder: bool = False,
    ):
        """Initialize in-memory inventory adapter.

        Args:
            stock: Starting stock level per SKU.
            allow_backorder: If True, deductions may take stock below zero.
        """
        self.allow_backorder = allow_backorder
        self._stock: dict[str, Decimal] = {
            sku: to_decimal(qty, f"stock for {sku}")
            for sku, qty in (stock or {}).items()
        }

    def stock_level(self, sku: str) -> Decimal | None:
        """Current stock for a SKU, or None if the SKU is not stocked."""
        return self._stock.get(sku)

    def add_stock(self, sku: str, quantity: Number) -> Decimal:
        """Receive stock for a SKU and return the new level."""
        level = self._stock.get(sku, Decimal("0")) + to_decimal(quantity, "quantity")
        self._stock[sku] = level
        return level

    def deduct_stock(self, product: Product, quantity: Decimal) -> Decimal:
        """Deduct stock for the product's SKU.

        Raises:
            ValueError: If the SKU is not stocked, or the deduction would
                take stock below zero and backorders are not allowed.
        """
        current = self._stock.get(product.sku)
        if current is None:
            raise ValueError(f"Unknown product SKU: {product.sku}")

        remaining = current - quantity
        if remaining < 0 and not self.allow_backorder:
            raise ValueError(
                f"Insufficient stock for {product.sku}: "
                f"requested {quantity}, available {current}"
            )

        self._stock[product.sku] = remaining
        logger.info(f"Deducted {quantity} of {product.sku}, {remaining} remaining")
        if remaining < 0:
            logger.warning(f"{product.sku} is backordered by {-remaining}")
        return remaining
