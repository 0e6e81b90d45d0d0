"""Tests for reading order documents."""

import json
from decimal import Decimal
from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError

from tuxmart.adapters.cli import OrderDocument, load_order


@pytest.fixture
def document() -> dict[str, Any]:
    return {
        "order_number": "TM-0001",
        "buyer": {"party_id": "buyer-1", "name": "Tux"},
        "seller": {"party_id": "seller-1"},
        "line_items": [
            {"sku": "La", "description": "A note", "quantity": 4, "unit_price": "5"},
            {"sku": "Ti", "description": "A drink", "quantity": 2, "unit_price": 11,
             "extended_price": "22"},
        ],
    }


def write_json(path: Path, data: Any) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestOrderDocument:
    def test_to_order_builds_domain_order(self, document: dict[str, Any]) -> None:
        order = OrderDocument.model_validate(document).to_order()

        assert order.order_number == "TM-0001"
        assert order.buyer.name == "Tux"
        assert order.seller.party_id == "seller-1"
        assert [item.sku for item in order.line_items] == ["La", "Ti"]
        assert order.grand_total == Decimal(42)

    def test_repeated_sku_shares_product(self, document: dict[str, Any]) -> None:
        document["line_items"].append(
            {"sku": "La", "description": "A note", "quantity": 1, "unit_price": 5}
        )

        order = OrderDocument.model_validate(document).to_order()

        assert order.line_items[0].product is order.line_items[2].product

    def test_unknown_fields_are_rejected(self, document: dict[str, Any]) -> None:
        document["coupon"] = "FREE"

        with pytest.raises(ValidationError):
            OrderDocument.model_validate(document)

    def test_missing_buyer_is_rejected(self, document: dict[str, Any]) -> None:
        del document["buyer"]

        with pytest.raises(ValidationError):
            OrderDocument.model_validate(document)

    @pytest.mark.parametrize("quantity", ["NaN", "Infinity"])
    def test_non_finite_quantity_is_rejected(
        self, document: dict[str, Any], quantity: str
    ) -> None:
        document["line_items"][0]["quantity"] = quantity

        with pytest.raises(ValidationError):
            OrderDocument.model_validate(document)

    def test_mismatched_extended_price_is_rejected(self, document: dict[str, Any]) -> None:
        document["line_items"][1]["extended_price"] = "23"

        with pytest.raises(ValueError, match="does not match"):
            OrderDocument.model_validate(document).to_order()


class TestLoadOrder:
    def test_loads_order_from_file(self, tmp_path: Path, document: dict[str, Any]) -> None:
        order = load_order(write_json(tmp_path / "order.json", document))

        assert order.grand_total == Decimal(42)
        assert order.line_items[0].quantity == Decimal(4)

    def test_missing_file_raises_oserror(self, tmp_path: Path) -> None:
        with pytest.raises(OSError, match="Failed to read order file"):
            load_order(tmp_path / "nope.json")

    def test_malformed_json_is_a_value_error(self, tmp_path: Path) -> None:
        path = tmp_path / "order.json"
        path.write_text("{", encoding="utf-8")

        with pytest.raises(ValueError):
            load_order(path)
