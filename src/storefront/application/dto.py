"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the API/CLI and application layers without
exposing domain internals to the outside world. Amounts stay Decimal;
formatting is the caller's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from storefront.domain.model.order import Order
from storefront.domain.model.product import Product


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for (product id + quantity)."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class OrderLineDTO:
    product_id: int
    quantity: int
    unit_price: Decimal
    line_total: Decimal


@dataclass(frozen=True)
class OrderDTO:
    id: int
    customer_id: str
    status: str
    lines: list[OrderLineDTO]
    subtotal: Decimal
    total: Decimal
    discount_code: str | None
    created_at: datetime

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,
            customer_id=order.customer_id,
            status=order.status.value,
            lines=[
                OrderLineDTO(
                    product_id=line.product_id,
                    quantity=line.quantity.value,
                    unit_price=line.unit_price.amount,
                    line_total=line.line_total.amount,
                )
                for line in order.lines
            ],
            subtotal=order.subtotal.amount,
            total=order.total.amount,
            discount_code=order.discount_code,
            created_at=order.created_at,
        )


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    price: Decimal
    available_quantity: int
    category: str

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            price=product.price.amount,
            available_quantity=product.available_quantity,
            category=product.category,
        )
