"""Abstract repository for Order aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Implementations must be safe to call from several
threads at once: ``next_id`` never hands out the same id twice and
concurrent ``save`` calls never lose an order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Reserve and return the next unique order ID."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return a snapshot of every stored order."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new order."""
