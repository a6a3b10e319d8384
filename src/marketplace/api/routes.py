"""FastAPI endpoints for the marketplace: catalogue, checkout and delivery estimates."""

import json

import structlog
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from marketplace.api.dependencies import get_app_config, get_routing_provider
from marketplace.api.schemas import (
    CheckoutResponse,
    ErrorResponse,
    EstimateResponse,
    OrderResponse,
    PickupPointResponse,
    ProductResponse,
    SeedResponse,
)
from marketplace.catalogue.listing import list_products
from marketplace.catalogue.seeding import SeedCatalogue
from marketplace.config import AppConfig
from marketplace.delivery.estimate import EstimateOutcome, estimate
from marketplace.delivery.pickup_points import points_for_campus
from marketplace.delivery.routing.port import RoutingProvider
from marketplace.ordering.checkout import place_order_command
from marketplace.ordering.normalization import normalize_payload
from marketplace.ordering.order import Order
from marketplace.ordering.pricing import PricingError

logger = structlog.get_logger(__name__)

catalogue_router = APIRouter(prefix="/api", tags=["catalogue"])
checkout_router = APIRouter(prefix="/api", tags=["checkout"])
delivery_router = APIRouter(prefix="/api", tags=["delivery"])

EMPTY_CART_HINT = "Check Content-Type: application/json and request body shape"


# --- Catalogue endpoints ---


@catalogue_router.get("/seed", response_model=SeedResponse, response_model_exclude_none=True)
async def seed_catalogue() -> SeedResponse:
    result = current_domain.process(SeedCatalogue(), asynchronous=False)
    return SeedResponse(**result)


@catalogue_router.get("/products", response_model=list[ProductResponse])
async def get_products(
    campus: str | None = None,
    category: str | None = None,
    price_min: str | None = Query(None, alias="priceMin"),
    price_max: str | None = Query(None, alias="priceMax"),
    config: AppConfig = Depends(get_app_config),
) -> list[ProductResponse]:
    products = list_products(
        campus=campus,
        category=category,
        price_min=price_min,
        price_max=price_max,
        limit=config.product_page_size,
    )
    return [ProductResponse(**product.to_dict()) for product in products]


# --- Checkout endpoints ---


def _reject_constant(name):
    raise ValueError(f"Invalid JSON constant: {name}")


async def _read_payload(request: Request):
    """Parse the body as strict JSON when possible, otherwise keep the raw text."""
    raw = await request.body()
    if not raw.strip():
        return None
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError:
        return raw.decode("utf-8", errors="replace")


@checkout_router.post(
    "/cart/checkout",
    response_model=CheckoutResponse,
    responses={
        422: {"description": "No items received, or the cart cannot be priced"},
        500: {"description": "Checkout failed"},
    },
)
async def checkout(request: Request, config: AppConfig = Depends(get_app_config)):
    payload = await _read_payload(request)
    logger.debug("Checkout payload received", content_type=request.headers.get("content-type"), payload=payload)

    checkout_request = normalize_payload(
        payload,
        default_campus=config.default_campus,
        default_pickup=config.default_pickup,
    )
    if checkout_request.is_empty:
        logger.info("Checkout rejected: no items", shape=checkout_request.shape.value)
        return JSONResponse(
            status_code=422,
            content={"error": "No items received", "hint": EMPTY_CART_HINT, "received": payload},
        )

    try:
        order_id = current_domain.process(place_order_command(checkout_request), asynchronous=False)
    except PricingError as exc:
        logger.info("Checkout rejected: cannot price cart", reason=str(exc))
        return JSONResponse(status_code=422, content={"error": "Checkout rejected", "message": str(exc)})
    except Exception as exc:
        logger.exception("Checkout server error", payload=payload)
        return JSONResponse(status_code=500, content={"error": "Checkout failed", "message": str(exc)})

    return CheckoutResponse(order_id=order_id)


@checkout_router.get("/orders/{order_id}", response_model=OrderResponse, responses={404: {"model": ErrorResponse}})
async def get_order(order_id: str):
    try:
        order = current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError:
        return JSONResponse(status_code=404, content={"error": "Order not found"})
    return OrderResponse(**order.to_dict())


# --- Delivery endpoints ---


@delivery_router.get("/estimate", response_model=EstimateResponse, responses={400: {"model": ErrorResponse}})
async def get_estimate(
    origin: str | None = Query(None, alias="from"),
    destination: str | None = Query(None, alias="to"),
    provider: RoutingProvider = Depends(get_routing_provider),
):
    result = await estimate(origin, destination, provider)
    if result.outcome is EstimateOutcome.CLIENT_ERROR:
        return JSONResponse(status_code=400, content=result.to_response())
    return JSONResponse(status_code=200, content=result.to_response())


@delivery_router.get("/pickup-points", response_model=list[PickupPointResponse])
async def get_pickup_points(campus: str | None = None) -> list[PickupPointResponse]:
    return [
        PickupPointResponse(label=point.label, campus=point.campus, coordinates=point.coordinates)
        for point in points_for_campus(campus)
    ]
