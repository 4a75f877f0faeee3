"""HTTP boundary: FastAPI routes over the application handlers.

Handlers are plain ``def`` functions so FastAPI runs them on its worker
thread pool; concurrent requests really do race over the catalog.
"""

from __future__ import annotations

from http import HTTPStatus

import structlog
from fastapi import APIRouter, FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.application.dto import OrderItemSpec
from storefront.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    InsufficientInventoryError,
    ValidationError,
)
from storefront.infrastructure.api.schemas import CreateOrderIn, OrderOut, ProductOut
from storefront.infrastructure.bootstrap import Storefront, build_storefront

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api", tags=["Storefront"])


def _storefront(request: Request) -> Storefront:
    return request.app.state.storefront


def _status_for(exc: DomainException) -> HTTPStatus:
    if isinstance(exc, EntityNotFoundError):
        return HTTPStatus.NOT_FOUND
    if isinstance(exc, InsufficientInventoryError):
        return HTTPStatus.CONFLICT
    if isinstance(exc, ValidationError):
        return HTTPStatus.UNPROCESSABLE_ENTITY
    return HTTPStatus.BAD_REQUEST


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    status_code = _status_for(exc)
    logger.info(
        "request_rejected",
        method=request.method,
        path=request.url.path,
        status=status_code.value,
        reason=exc.kind,
    )
    return JSONResponse(
        status_code=status_code.value,
        content={"error": exc.kind, "message": str(exc), **exc.details()},
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies share the domain error shape, with pydantic's field errors attached."""
    logger.info(
        "request_rejected",
        method=request.method,
        path=request.url.path,
        status=HTTPStatus.UNPROCESSABLE_ENTITY.value,
        reason=ValidationError.kind,
    )
    return JSONResponse(
        status_code=HTTPStatus.UNPROCESSABLE_ENTITY.value,
        content={
            "error": ValidationError.kind,
            "message": "Request body failed validation",
            "errors": jsonable_encoder(exc.errors()),
        },
    )


@router.get("/products", response_model=list[ProductOut])
def list_products(request: Request):
    dtos = _storefront(request).list_products.handle()
    return [ProductOut.from_dto(dto) for dto in dtos]


@router.post("/orders", response_model=OrderOut, status_code=status.HTTP_201_CREATED)
def create_order(body: CreateOrderIn, request: Request):
    dto = _storefront(request).create_order.handle(
        customer_id=body.customer_id,
        item_specs=[OrderItemSpec(i.product_id, i.quantity) for i in body.items],
        discount_code=body.discount_code,
    )
    return OrderOut.from_dto(dto)


@router.get("/orders", response_model=list[OrderOut])
def list_orders(request: Request):
    return [OrderOut.from_dto(dto) for dto in _storefront(request).list_orders.handle()]


@router.get("/orders/{order_id}", response_model=OrderOut)
def get_order(order_id: int, request: Request):
    return OrderOut.from_dto(_storefront(request).show_order.handle(order_id))


def create_app(storefront: Storefront | None = None) -> FastAPI:
    app = FastAPI(title="Storefront")
    app.state.storefront = storefront or build_storefront()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.include_router(router)
    return app
