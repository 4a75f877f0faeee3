"""Product entity.

Products are owned by the Catalog. Everything outside the Catalog only
ever sees frozen snapshots; the stock level changes solely through
``Catalog.reserve`` and ``Catalog.release``.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A point-in-time view of a catalog product."""

    id: int
    name: str
    price: Money
    available_quantity: int
    category: str

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if self.available_quantity < 0:
            raise ValidationError(
                f"Available quantity for {self.name} cannot be negative"
            )

    def with_quantity(self, available_quantity: int) -> Product:
        return Product(
            id=self.id,
            name=self.name,
            price=self.price,
            available_quantity=available_quantity,
            category=self.category,
        )
