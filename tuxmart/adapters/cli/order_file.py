"""Order documents for the command-line entry point.

An order is described on disk as JSON:

    {
        "order_number": "A-1001",
        "buyer": {"party_id": "tux", "name": "Tux"},
        "seller": {"party_id": "mart"},
        "line_items": [
            {"sku": "La", "description": "A note to follow So",
             "quantity": 4, "unit_price": "5"}
        ]
    }

The document is validated with pydantic and then converted into the
core Order model, which applies the domain invariants.
"""

import logging
from decimal import Decimal
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from tuxmart.core.models import LineItem, Order, Party, Product

logger = logging.getLogger(__name__)


class PartyDocument(BaseModel):
    """Buyer or seller as written in an order document."""

    model_config = ConfigDict(extra="forbid")

    party_id: str = Field(min_length=1)
    name: str = ""

    def to_party(self) -> Party:
        return Party(party_id=self.party_id, name=self.name)


class LineItemDocument(BaseModel):
    """A single line as written in an order document."""

    model_config = ConfigDict(extra="forbid")

    sku: str = Field(min_length=1)
    description: str = ""
    quantity: Decimal = Field(allow_inf_nan=False)
    unit_price: Decimal = Field(allow_inf_nan=False)
    extended_price: Annotated[Decimal, Field(allow_inf_nan=False)] | None = None


class OrderDocument(BaseModel):
    """Top-level order document."""

    model_config = ConfigDict(extra="forbid")

    order_number: str = Field(min_length=1)
    buyer: PartyDocument
    seller: PartyDocument
    line_items: list[LineItemDocument] = Field(default_factory=list)

    def to_order(self) -> Order:
        """Build the core Order, sharing one Product per SKU.

        Raises:
            ValueError: If a line violates the line item invariants
                (e.g. a supplied extended_price that does not match).
        """
        order = Order(
            order_number=self.order_number,
            buyer=self.buyer.to_party(),
            seller=self.seller.to_party(),
        )
        products: dict[str, Product] = {}
        for line in self.line_items:
            product = products.setdefault(
                line.sku, Product(sku=line.sku, description=line.description)
            )
            order.add_line_item(
                LineItem(
                    product=product,
                    quantity=line.quantity,
                    unit_price=line.unit_price,
                    extended_price=line.extended_price,
                )
            )
        return order


def load_order(path: str | Path) -> Order:
    """Read and validate an order document from a JSON file.

    Args:
        path: Path to the order JSON file.

    Returns:
        The fully built Order.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the document is malformed (pydantic's
            ValidationError is a ValueError) or violates a domain invariant.
    """
    order_path = Path(path)
    try:
        text = order_path.read_text(encoding="utf-8")
    except OSError as e:
        raise OSError(f"Failed to read order file {order_path}: {e}") from e

    document = OrderDocument.model_validate_json(text)
    order = document.to_order()
    logger.debug(
        f"Loaded order {order.order_number} with {len(order.line_items)} line items "
        f"from {order_path}"
    )
    return order
