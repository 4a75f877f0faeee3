"""Process-local, thread-safe implementation of OrderRepository."""

from __future__ import annotations

import dataclasses
import threading

from storefront.domain.model.order import Order
from storefront.domain.repository.order_repository import OrderRepository


class InMemoryOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._store: dict[int, Order] = {}
        self._last_id = 0

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        with self._lock:
            self._last_id += 1
            return self._last_id

    def get_by_id(self, order_id: int) -> Order | None:
        with self._lock:
            order = self._store.get(order_id)
        return self._copy(order) if order is not None else None

    def list_all(self) -> list[Order]:
        with self._lock:
            orders = sorted(self._store.values(), key=lambda o: o.id)
        return [self._copy(order) for order in orders]

    def save(self, order: Order) -> None:
        with self._lock:
            self._store[order.id] = self._copy(order)

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _copy(order: Order) -> Order:
        # Lines are frozen; only the list itself needs copying.
        return dataclasses.replace(order, lines=list(order.lines))
