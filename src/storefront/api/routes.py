"""FastAPI routes for the Storefront — products and orders.

Order routes call the fulfillment engine directly: placement, shipment and
cancellation are serialized inside the engine, so there is no command layer
in between.
"""

from fastapi import APIRouter, HTTPException
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from storefront.api.schemas import (
    CancelOrderRequest,
    CreateProductRequest,
    OrderResponse,
    PlaceOrderRequest,
    ProductResponse,
    SetStockRequest,
    TransitionResponse,
)
from storefront.catalogue.product import Product
from storefront.errors import InsufficientStock, InvalidRequest, NotFound, PaymentDeclined
from storefront.fulfillment import get_engine
from storefront.fulfillment.results import LineRequest, Outcome
from storefront.ordering.order import Order

orders_router = APIRouter(prefix="/orders", tags=["orders"])
products_router = APIRouter(prefix="/products", tags=["products"])

# Unsuccessful transitions and the status code each one maps to.
_TRANSITION_FAILURE_STATUS = {
    Outcome.NOT_FOUND: 404,
    Outcome.INVALID_STATE: 409,
    Outcome.PERSISTENCE_FAILED: 500,
}


def _transition_response(result) -> TransitionResponse:
    status_code = _TRANSITION_FAILURE_STATUS.get(result.outcome)
    if status_code is not None:
        detail = f"Order {result.order_id}: {result.outcome.value}"
        if result.status:
            detail += f" (status {result.status})"
        raise HTTPException(status_code=status_code, detail=detail)
    return TransitionResponse.from_result(result)


# --- Order endpoints ---


@orders_router.post("", status_code=201, response_model=OrderResponse)
async def place_order(body: PlaceOrderRequest) -> OrderResponse:
    lines = [LineRequest(product_id=line.product_id, quantity=line.quantity) for line in body.lines]
    try:
        order = get_engine().place_order(
            body.customer_id,
            lines,
            low_stock_threshold=body.low_stock_threshold,
        )
    except InvalidRequest as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except NotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except InsufficientStock as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    except PaymentDeclined as exc:
        raise HTTPException(status_code=402, detail=str(exc)) from exc
    return OrderResponse.from_order(order)


@orders_router.get("", response_model=list[OrderResponse])
async def list_orders(customer_id: str) -> list[OrderResponse]:
    orders = current_domain.repository_for(Order).list_for_customer(customer_id)
    return [OrderResponse.from_order(order) for order in orders]


@orders_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: int) -> OrderResponse:
    try:
        order = current_domain.repository_for(Order).require(order_id)
    except NotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return OrderResponse.from_order(order)


@orders_router.put("/{order_id}/ship", response_model=TransitionResponse)
async def ship_order(order_id: int) -> TransitionResponse:
    return _transition_response(get_engine().ship_order(order_id))


@orders_router.put("/{order_id}/cancel", response_model=TransitionResponse)
async def cancel_order(order_id: int, body: CancelOrderRequest | None = None) -> TransitionResponse:
    reason = body.reason if body is not None else None
    return _transition_response(get_engine().cancel_order(order_id, reason))


# --- Product endpoints ---


@products_router.get("", response_model=list[ProductResponse])
async def list_products() -> list[ProductResponse]:
    products = current_domain.repository_for(Product).list_all()
    return [ProductResponse.from_product(p) for p in sorted(products, key=lambda p: p.product_id)]


@products_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: int) -> ProductResponse:
    product = current_domain.repository_for(Product).lookup(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail=f"Product with ID {product_id} not found.")
    return ProductResponse.from_product(product)


@products_router.post("", status_code=201, response_model=ProductResponse)
async def create_product(body: CreateProductRequest) -> ProductResponse:
    repo = current_domain.repository_for(Product)
    if body.product_id is not None and repo.lookup(body.product_id) is not None:
        raise HTTPException(status_code=409, detail=f"Product with ID {body.product_id} already exists.")

    try:
        product = repo.add_product(
            name=body.name,
            price=body.price,
            category=body.category,
            stock=body.stock,
            product_id=body.product_id,
        )
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=exc.messages) from exc
    return ProductResponse.from_product(product)


@products_router.put("/{product_id}/stock", response_model=ProductResponse)
async def set_stock(product_id: int, body: SetStockRequest) -> ProductResponse:
    try:
        product = get_engine().restock(product_id, body.stock)
    except NotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return ProductResponse.from_product(product)
