"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the API and CLI layers can catch them uniformly and report a structured
rejection instead of crashing.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""

    kind = "domain_error"

    def details(self) -> dict:
        """Extra machine-readable fields describing the failure."""
        return {}


class ValidationError(DomainException):
    """A request was malformed or a business rule was violated."""

    kind = "invalid_request"


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    kind = "not_found"


class ProductNotFoundError(EntityNotFoundError):

    kind = "product_not_found"

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product not found: {product_id}")
        self.product_id = product_id

    def details(self) -> dict:
        return {"productId": self.product_id}


class OrderNotFoundError(EntityNotFoundError):

    kind = "order_not_found"

    def __init__(self, order_id: int) -> None:
        super().__init__(f"Order #{order_id} not found")
        self.order_id = order_id

    def details(self) -> dict:
        return {"orderId": self.order_id}


class InsufficientInventoryError(DomainException):
    """Requested quantity exceeds what is available at reservation time."""

    kind = "insufficient_inventory"

    def __init__(self, product_id: int, requested: int, available: int) -> None:
        super().__init__(
            f"Insufficient inventory for product {product_id} "
            f"(need {requested}, have {available} available)"
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available

    def details(self) -> dict:
        return {
            "productId": self.product_id,
            "requested": self.requested,
            "available": self.available,
        }
