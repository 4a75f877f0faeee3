"""Application service: Create Order use case.

Orchestrates the Catalog (inventory reservation), the Pricing Engine and
the order store. Either every line is reserved and the order is stored,
or every reservation taken so far is released and the error propagates.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import OrderDTO, OrderItemSpec
from storefront.domain.exceptions import DomainException
from storefront.domain.model.order import Order, OrderLine, validate_order_request
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.catalog import Catalog
from storefront.domain.service.pricing_engine import PricingEngine

logger = structlog.get_logger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        catalog: Catalog,
        pricing: PricingEngine,
    ) -> None:
        self._order_repo = order_repo
        self._catalog = catalog
        self._pricing = pricing

    def handle(
        self,
        customer_id: str,
        item_specs: list[OrderItemSpec],
        discount_code: str | None = None,
    ) -> OrderDTO:
        """Place an order.

        Steps:
        1. Validate the request shape before touching inventory.
        2. Reserve each line in request order, capturing the price.
        3. Attach the discount code, then price the final lines.
        4. Persist and return a DTO.
        """
        validate_order_request(customer_id, len(item_specs))
        quantities = [Quantity(spec.quantity) for spec in item_specs]
        discount_code = discount_code or None

        order_id = self._order_repo.next_id()
        log = logger.bind(order_id=order_id, customer_id=customer_id)

        lines = self._reserve_lines(item_specs, quantities, log)

        if discount_code and not self._pricing.is_known_code(discount_code):
            log.info("unknown_discount_code", discount_code=discount_code)

        try:
            total = self._pricing.price(lines, discount_code)
            order = Order.create(
                order_id=order_id,
                customer_id=customer_id,
                lines=lines,
                subtotal=self._pricing.compute_subtotal(lines),
                total=total,
                discount_code=discount_code,
            )
            self._order_repo.save(order)
        except Exception as exc:
            self._rollback(lines)
            log.warning("order_rejected", reason=type(exc).__name__, error=str(exc))
            raise

        log.info(
            "order_created",
            lines=len(order.lines),
            total=str(order.total.amount),
            discount_code=discount_code,
        )
        return OrderDTO.from_order(order)

    def _reserve_lines(
        self,
        item_specs: list[OrderItemSpec],
        quantities: list[Quantity],
        log,
    ) -> list[OrderLine]:
        lines: list[OrderLine] = []
        try:
            for spec, quantity in zip(item_specs, quantities):
                product = self._catalog.reserve(spec.product_id, quantity.value)
                lines.append(
                    OrderLine(
                        product_id=product.id,
                        quantity=quantity,
                        unit_price=product.price,  # <-- price snapshot
                    )
                )
        except Exception as exc:
            self._rollback(lines)
            reason = exc.kind if isinstance(exc, DomainException) else type(exc).__name__
            log.info("order_rejected", reason=reason, error=str(exc))
            raise
        return lines

    def _rollback(self, lines: list[OrderLine]) -> None:
        for line in reversed(lines):
            self._catalog.release(line.product_id, line.quantity.value)
