"""Pydantic request and response models for the HTTP API (camelCase on the wire)."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from storefront.application.dto import OrderDTO, ProductDTO


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Requests ─────────────────────────────────────────────────────────────────


class OrderItemIn(CamelModel):
    product_id: int
    quantity: int = Field(..., gt=0)


class CreateOrderIn(CamelModel):
    customer_id: str = Field(..., min_length=1)
    items: list[OrderItemIn] = Field(..., min_length=1)
    discount_code: Optional[str] = None


# ── Responses ────────────────────────────────────────────────────────────────


class ProductOut(CamelModel):
    id: int
    name: str
    price: Decimal
    inventory: int
    category: str

    @staticmethod
    def from_dto(dto: ProductDTO) -> ProductOut:
        return ProductOut(
            id=dto.id,
            name=dto.name,
            price=dto.price,
            inventory=dto.available_quantity,
            category=dto.category,
        )


class OrderLineOut(CamelModel):
    product_id: int
    quantity: int
    unit_price: Decimal
    line_total: Decimal


class OrderOut(CamelModel):
    id: int
    customer_id: str
    items: list[OrderLineOut]
    subtotal: Decimal
    total_amount: Decimal
    status: str
    created_at: datetime
    discount_code: Optional[str] = None

    @staticmethod
    def from_dto(dto: OrderDTO) -> OrderOut:
        return OrderOut(
            id=dto.id,
            customer_id=dto.customer_id,
            items=[
                OrderLineOut(
                    product_id=line.product_id,
                    quantity=line.quantity,
                    unit_price=line.unit_price,
                    line_total=line.line_total,
                )
                for line in dto.lines
            ],
            subtotal=dto.subtotal,
            total_amount=dto.total,
            status=dto.status,
            created_at=dto.created_at,
            discount_code=dto.discount_code,
        )
