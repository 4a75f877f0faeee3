"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from storefront.application.create_order import CreateOrderHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.show_order import ListOrdersHandler, ShowOrderHandler
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.catalog import Catalog
from storefront.domain.service.pricing_engine import PricingEngine
from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.catalog_seed import (
    default_products,
    load_products,
)
from storefront.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Storefront:
    """Every handler of one running storefront, sharing one catalog and order store."""

    catalog: Catalog
    order_repo: OrderRepository
    create_order: CreateOrderHandler
    show_order: ShowOrderHandler
    list_orders: ListOrdersHandler
    list_products: ListProductsHandler


def catalog(settings: Settings) -> Catalog:
    if settings.catalog_file is not None:
        products = load_products(settings.catalog_file)
        logger.info("catalog_loaded", source=str(settings.catalog_file), products=len(products))
    else:
        products = default_products()
    return Catalog(products, reserve_delay=settings.reserve_delay)


def build_storefront(settings: Settings | None = None) -> Storefront:
    settings = settings or Settings.from_env()
    shop_catalog = catalog(settings)
    order_repo = InMemoryOrderRepository()
    return Storefront(
        catalog=shop_catalog,
        order_repo=order_repo,
        create_order=CreateOrderHandler(order_repo, shop_catalog, PricingEngine()),
        show_order=ShowOrderHandler(order_repo),
        list_orders=ListOrdersHandler(order_repo),
        list_products=ListProductsHandler(shop_catalog),
    )
