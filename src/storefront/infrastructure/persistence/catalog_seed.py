"""Initial catalog contents: built-in defaults or a JSON seed file.

A seed file is a JSON list of objects::

    [{"id": 1, "name": "Laptop", "price": "999.99",
      "quantity": 10, "category": "Electronics"}]

Prices are given as strings so they reach Decimal without passing
through a float.
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money

DEFAULT_PRODUCTS: list[dict] = [
    {"id": 1, "name": "Laptop", "price": "999.99", "quantity": 10, "category": "Electronics"},
    {"id": 2, "name": "Mouse", "price": "29.99", "quantity": 50, "category": "Electronics"},
    {"id": 3, "name": "Keyboard", "price": "79.99", "quantity": 25, "category": "Electronics"},
    {"id": 4, "name": "Monitor", "price": "299.99", "quantity": 15, "category": "Electronics"},
]


def default_products() -> list[Product]:
    return [_to_domain(raw) for raw in DEFAULT_PRODUCTS]


def load_products(file_path: Path) -> list[Product]:
    try:
        # parse_float keeps stray unquoted prices exact as well
        raw = json.loads(file_path.read_text(encoding="utf-8"), parse_float=Decimal)
    except (OSError, ValueError) as exc:
        raise ValidationError(f"Cannot read catalog seed {file_path}: {exc}") from exc
    if not isinstance(raw, list):
        raise ValidationError(f"Catalog seed {file_path} must contain a JSON list")
    return [_to_domain(item) for item in raw]


def _to_domain(raw: dict) -> Product:
    try:
        return Product(
            id=int(raw["id"]),
            name=raw["name"],
            price=Money.of(raw["price"]),
            available_quantity=int(raw["quantity"]),
            category=raw.get("category", ""),
        )
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise ValidationError(f"Invalid catalog entry {raw!r}: {exc}") from exc
