"""Order aggregate.

The Order is an aggregate root that owns its lines. Lines are immutable
and carry the unit price captured when their inventory was reserved, so
later catalog price changes never rewrite order history.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "PENDING"


@dataclass(frozen=True)
class OrderLine:
    """A reserved (product, quantity) pair with its price snapshot."""

    product_id: int
    quantity: Quantity
    unit_price: Money  # locked at reservation time

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MAX_LINE_ITEMS = 50


def validate_order_request(customer_id: str, line_count: int) -> None:
    """Reject an order request whose shape can never produce a valid order."""
    if not isinstance(customer_id, str) or not customer_id.strip():
        raise ValidationError("Customer id is required")

    if line_count == 0:
        raise ValidationError("Order must contain at least one item")

    if line_count > MAX_LINE_ITEMS:
        raise ValidationError(f"Maximum {MAX_LINE_ITEMS} items per order")


@dataclass
class Order:
    """Aggregate root for placed orders.

    Use ``Order.create()`` for new orders. ``subtotal`` and ``total`` are
    supplied by the caller after pricing; ``total`` must already account
    for ``discount_code``.
    """

    id: int
    customer_id: str
    lines: list[OrderLine]
    subtotal: Money
    total: Money
    discount_code: str | None = None
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        order_id: int,
        customer_id: str,
        lines: list[OrderLine],
        subtotal: Money,
        total: Money,
        discount_code: str | None = None,
    ) -> Order:
        """Create a new order, enforcing all invariants."""
        validate_order_request(customer_id, len(lines))
        if total > subtotal:
            raise ValidationError(f"Order total {total} exceeds subtotal {subtotal}")
        return Order(
            id=order_id,
            customer_id=customer_id.strip(),
            lines=list(lines),
            subtotal=subtotal,
            total=total,
            discount_code=discount_code,
        )
