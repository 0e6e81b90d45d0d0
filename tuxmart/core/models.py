"""Domain models for the TuxMart store.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain. Money and
quantities are carried as Decimal throughout.
"""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import TypeAlias

Number: TypeAlias = Decimal | int | str


def to_decimal(value: Number, name: str) -> Decimal:
    """Coerce an int, str or Decimal into a Decimal.

    Floats are refused because their binary representation would leak
    rounding noise into prices. NaN and infinities are refused because
    they cannot be compared or summed into a total.

    Raises:
        ValueError: If the value is a float, a bool, non-finite, or not
            a number.
    """
    if isinstance(value, (bool, float)):
        raise ValueError(
            f"{name} must be a Decimal, int or str, got {type(value).__name__}"
        )
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(value)
        except (InvalidOperation, TypeError) as e:
            raise ValueError(f"{name} is not a valid number: {value!r}") from e
    if not result.is_finite():
        raise ValueError(f"{name} must be a finite number, got {value!r}")
    return result


@dataclass(frozen=True)
class Product:
    """A sellable item, identified by its stock keeping unit."""

    sku: str
    description: str = ""

    def __post_init__(self) -> None:
        """Validate product invariants on creation."""
        if not self.sku or not self.sku.strip():
            raise ValueError("sku must be a non-empty string")


@dataclass(frozen=True)
class Party:
    """Opaque identity of a buyer or seller."""

    party_id: str
    name: str = ""

    def __post_init__(self) -> None:
        """Validate party invariants on creation."""
        if not self.party_id or not self.party_id.strip():
            raise ValueError("party_id must be a non-empty string")


@dataclass(frozen=True)
class LineItem:
    """A product with a quantity and pricing on an order.

    extended_price is derived from unit_price * quantity. A caller may
    still supply it (e.g. when mirroring an external document), in which
    case it must agree with the computed value.

    Quantities are not range-checked: the store does not validate order
    contents, so zero or negative quantities pass through unchanged.
    """

    product: Product
    quantity: Decimal
    unit_price: Decimal
    extended_price: Decimal | None = None

    def __post_init__(self) -> None:
        """Normalize numbers and compute or validate the extended price."""
        quantity = to_decimal(self.quantity, "quantity")
        unit_price = to_decimal(self.unit_price, "unit_price")
        computed = unit_price * quantity

        if self.extended_price is not None:
            supplied = to_decimal(self.extended_price, "extended_price")
            if supplied != computed:
                raise ValueError(
                    f"extended_price {supplied} does not match "
                    f"unit_price * quantity ({unit_price} * {quantity} = {computed})"
                )

        object.__setattr__(self, "quantity", quantity)
        object.__setattr__(self, "unit_price", unit_price)
        object.__setattr__(self, "extended_price", computed)

    @property
    def sku(self) -> str:
        """SKU of the product on this line."""
        return self.product.sku


@dataclass
class Order:
    """An order placed by a buyer with a seller.

    Line items are append-only: add_line_item() is the only way to grow
    the order and nothing removes or replaces an item once added. The
    grand total is always derived from the current line items.

    Note: This dataclass is intentionally mutable so an order can be
    assembled item by item before it is handed to the sale workflow.
    """

    order_number: str
    buyer: Party
    seller: Party
    _line_items: list[LineItem] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate order invariants on creation."""
        if not self.order_number or not self.order_number.strip():
            raise ValueError("order_number must be a non-empty string")

    def add_line_item(self, item: LineItem) -> None:
        """Append a line item to the order."""
        if not isinstance(item, LineItem):
            raise ValueError(
                f"expected a LineItem, got {type(item).__name__}"
            )
        self._line_items.append(item)

    @property
    def line_items(self) -> tuple[LineItem, ...]:
        """Line items in the order they were added."""
        return tuple(self._line_items)

    @property
    def grand_total(self) -> Decimal:
        """Sum of the extended prices of all line items."""
        return sum(
            (item.extended_price for item in self._line_items),
            Decimal("0"),
        )
