"""Domain service: Catalog.

The Catalog is the single owner of product records and their stock
levels. Stock only changes through ``reserve`` and ``release``; both run
under a lock dedicated to the product, so the availability check and the
decrement form one indivisible step. Orders for different products never
contend with each other.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Iterable

import structlog

from storefront.domain.exceptions import (
    InsufficientInventoryError,
    ProductNotFoundError,
    ValidationError,
)
from storefront.domain.model.product import Product

logger = structlog.get_logger(__name__)


class Catalog:

    def __init__(self, products: Iterable[Product], reserve_delay: float = 0.0) -> None:
        """
        Args:
            products: Initial product set. Ids must be unique.
            reserve_delay: Simulated storage latency, in seconds, spent
                inside each reservation's critical section.
        """
        self._products: dict[int, Product] = {}
        for product in products:
            if product.id in self._products:
                raise ValidationError(f"Duplicate product id {product.id}")
            self._products[product.id] = product
        # The key set is fixed after construction, so the lock map is never mutated.
        self._locks = {product_id: threading.Lock() for product_id in self._products}
        self._reserve_delay = reserve_delay

    # --- Queries --------------------------------------------------------------

    def lookup(self, product_id: int) -> Product:
        """Return a snapshot of the product."""
        try:
            return self._products[product_id]
        except KeyError:
            raise ProductNotFoundError(product_id) from None

    def list_products(self) -> list[Product]:
        return list(self._products.values())

    # --- Inventory mutations --------------------------------------------------

    def reserve(self, product_id: int, quantity: int) -> Product:
        """Take ``quantity`` units out of stock.

        Returns the product snapshot as of the reservation, whose price
        is the one the order should capture.

        Raises InsufficientInventoryError without touching stock if
        fewer than ``quantity`` units are available.
        """
        self._check_quantity(quantity)
        with self._lock_for(product_id):
            product = self._products[product_id]
            if self._reserve_delay:
                time.sleep(self._reserve_delay)
            if quantity > product.available_quantity:
                raise InsufficientInventoryError(
                    product_id, quantity, product.available_quantity
                )
            product = product.with_quantity(product.available_quantity - quantity)
            self._products[product_id] = product

        logger.debug(
            "inventory_reserved",
            product_id=product_id,
            quantity=quantity,
            available=product.available_quantity,
        )
        return product

    def release(self, product_id: int, quantity: int) -> Product:
        """Return ``quantity`` previously reserved units to stock."""
        self._check_quantity(quantity)
        with self._lock_for(product_id):
            product = self._products[product_id]
            product = product.with_quantity(product.available_quantity + quantity)
            self._products[product_id] = product

        logger.debug(
            "inventory_released",
            product_id=product_id,
            quantity=quantity,
            available=product.available_quantity,
        )
        return product

    # --- Internal helpers -----------------------------------------------------

    def _lock_for(self, product_id: int) -> threading.Lock:
        try:
            return self._locks[product_id]
        except KeyError:
            raise ProductNotFoundError(product_id) from None

    @staticmethod
    def _check_quantity(quantity: int) -> None:
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(quantity).__name__}"
            )
        if quantity <= 0:
            raise ValidationError("Quantity must be positive")
