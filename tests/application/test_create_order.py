"""Integration tests for the CreateOrder use case.

Runs against the real in-memory catalog and order store; no I/O.
"""

from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

import pytest

from storefront.application.create_order import CreateOrderHandler
from storefront.application.dto import OrderItemSpec
from storefront.domain.exceptions import (
    InsufficientInventoryError,
    ProductNotFoundError,
    ValidationError,
)
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.service.catalog import Catalog
from storefront.domain.service.pricing_engine import PricingEngine
from storefront.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)


def _setup(
    reserve_delay: float = 0.0,
) -> tuple[CreateOrderHandler, InMemoryOrderRepository, Catalog]:
    """Build handler over a small catalog: Laptop x10, Mouse x50, Keyboard x25."""
    catalog = Catalog(
        [
            Product(1, "Laptop", Money.of("999.99"), 10, "Electronics"),
            Product(2, "Mouse", Money.of("29.99"), 50, "Electronics"),
            Product(3, "Keyboard", Money.of("79.99"), 25, "Electronics"),
        ],
        reserve_delay=reserve_delay,
    )
    order_repo = InMemoryOrderRepository()
    handler = CreateOrderHandler(order_repo, catalog, PricingEngine())
    return handler, order_repo, catalog


class TestCreateOrderHappyPath:

    def test_single_line_without_discount(self):
        handler, _, catalog = _setup()
        dto = handler.handle("c1", [OrderItemSpec(1, 2)])

        assert len(dto.lines) == 1
        line = dto.lines[0]
        assert (line.product_id, line.quantity, line.unit_price) == (1, 2, Decimal("999.99"))
        assert dto.total == Decimal("1999.98")
        assert dto.status == "PENDING"
        assert dto.discount_code is None
        assert catalog.lookup(1).available_quantity == 8

    def test_discount_applied_before_total(self):
        handler, order_repo, _ = _setup()
        dto = handler.handle("c1", [OrderItemSpec(1, 2)], discount_code="SAVE10")

        assert dto.total == Decimal("1799.98")
        assert dto.subtotal == Decimal("1999.98")
        assert dto.discount_code == "SAVE10"
        stored = order_repo.get_by_id(dto.id)
        assert stored.subtotal == Money.of("1999.98")
        assert stored.total == Money.of("1799.98")
        assert stored.discount_code == "SAVE10"

    def test_unknown_discount_code_is_ignored(self):
        handler, _, _ = _setup()
        dto = handler.handle("c1", [OrderItemSpec(2, 1)], discount_code="FREESTUFF")
        assert dto.total == Decimal("29.99")
        assert dto.discount_code == "FREESTUFF"

    def test_empty_discount_code_treated_as_absent(self):
        handler, _, _ = _setup()
        dto = handler.handle("c1", [OrderItemSpec(2, 1)], discount_code="")
        assert dto.discount_code is None

    def test_lines_follow_request_order(self):
        handler, _, _ = _setup()
        dto = handler.handle("c1", [OrderItemSpec(3, 1), OrderItemSpec(1, 1), OrderItemSpec(2, 4)])
        assert [line.product_id for line in dto.lines] == [3, 1, 2]
        assert dto.total == Decimal("79.99") + Decimal("999.99") + Decimal("119.96")

    def test_sequential_ids(self):
        handler, _, _ = _setup()
        dto1 = handler.handle("c1", [OrderItemSpec(2, 1)])
        dto2 = handler.handle("c2", [OrderItemSpec(2, 1)])
        assert dto2.id == dto1.id + 1


class TestCreateOrderRollback:

    def test_unknown_product_releases_earlier_lines(self):
        handler, order_repo, catalog = _setup()
        with pytest.raises(ProductNotFoundError):
            handler.handle("c1", [OrderItemSpec(1, 2), OrderItemSpec(99, 1)])

        assert catalog.lookup(1).available_quantity == 10
        assert order_repo.list_all() == []

    def test_insufficient_inventory_releases_earlier_lines(self):
        handler, order_repo, catalog = _setup()
        with pytest.raises(InsufficientInventoryError) as exc_info:
            handler.handle("c1", [
                OrderItemSpec(2, 5),
                OrderItemSpec(3, 5),
                OrderItemSpec(1, 11),
            ])

        assert exc_info.value.product_id == 1
        assert exc_info.value.requested == 11
        assert exc_info.value.available == 10
        assert catalog.lookup(2).available_quantity == 50
        assert catalog.lookup(3).available_quantity == 25
        assert catalog.lookup(1).available_quantity == 10
        assert order_repo.list_all() == []

    def test_same_product_twice_in_one_order(self):
        handler, _, catalog = _setup()
        with pytest.raises(InsufficientInventoryError):
            handler.handle("c1", [OrderItemSpec(1, 6), OrderItemSpec(1, 6)])
        assert catalog.lookup(1).available_quantity == 10


class TestCreateOrderValidation:

    def test_blank_customer_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError, match="Customer id is required"):
            handler.handle(" ", [OrderItemSpec(1, 1)])

    def test_no_items_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError, match="at least one item"):
            handler.handle("c1", [])

    def test_non_positive_quantity_rejected_before_reserving(self):
        handler, _, catalog = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            handler.handle("c1", [OrderItemSpec(1, 2), OrderItemSpec(2, 0)])
        assert catalog.lookup(1).available_quantity == 10


class TestCreateOrderConcurrency:

    def test_racing_orders_never_oversell(self):
        handler, order_repo, catalog = _setup(reserve_delay=0.002)

        def place(i: int) -> bool:
            try:
                handler.handle(f"c{i}", [OrderItemSpec(2, 1), OrderItemSpec(1, 3)])
            except InsufficientInventoryError:
                return False
            return True

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(place, range(8)))

        orders = order_repo.list_all()
        assert results.count(True) == 3 == len(orders)
        assert catalog.lookup(1).available_quantity == 1
        # Mouse reservations of rejected orders were rolled back.
        assert catalog.lookup(2).available_quantity == 50 - 3
        assert len({o.id for o in orders}) == 3


class _UnavailableOrderRepository(InMemoryOrderRepository):

    def save(self, order) -> None:
        raise RuntimeError("order store unavailable")


class TestCreateOrderRollbackAfterReservation:

    def test_failed_save_releases_every_line(self):
        _, _, catalog = _setup()
        handler = CreateOrderHandler(_UnavailableOrderRepository(), catalog, PricingEngine())

        with pytest.raises(RuntimeError, match="order store unavailable"):
            handler.handle("c1", [OrderItemSpec(1, 2), OrderItemSpec(2, 3)], discount_code="SAVE10")

        assert catalog.lookup(1).available_quantity == 10
        assert catalog.lookup(2).available_quantity == 50
