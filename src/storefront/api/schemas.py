"""Pydantic request/response schemas for the Storefront API.

These are external contracts — separate from the Protean aggregates they
are built from.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Product Schemas
# ---------------------------------------------------------------------------
class CreateProductRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    price: float = Field(ge=0)
    category: str | None = None
    stock: int = Field(ge=0, default=0)
    product_id: int | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Laptop Pro",
                    "price": 1200.00,
                    "category": "Electronics",
                    "stock": 50,
                }
            ]
        }
    }


class SetStockRequest(BaseModel):
    stock: int = Field(ge=0)


class ProductResponse(BaseModel):
    product_id: int
    name: str
    price: float
    category: str | None = None
    stock: int

    @classmethod
    def from_product(cls, product) -> "ProductResponse":
        return cls(
            product_id=product.product_id,
            name=product.name,
            price=product.price,
            category=product.category,
            stock=product.stock,
        )


# ---------------------------------------------------------------------------
# Order Schemas
# ---------------------------------------------------------------------------
class OrderLineSchema(BaseModel):
    product_id: int
    quantity: int


class PlaceOrderRequest(BaseModel):
    customer_id: str
    lines: list[OrderLineSchema]
    low_stock_threshold: int | None = Field(ge=0, default=None)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer_id": "cust-001",
                    "lines": [{"product_id": 1, "quantity": 2}],
                }
            ]
        }
    }


class CancelOrderRequest(BaseModel):
    reason: str | None = None


class OrderLineResponse(BaseModel):
    product_id: int
    quantity: int
    unit_price: float


class OrderResponse(BaseModel):
    order_id: int
    customer_id: str
    created_at: datetime
    status: str
    total_amount: float
    lines: list[OrderLineResponse]

    @classmethod
    def from_order(cls, order) -> "OrderResponse":
        return cls(
            order_id=order.order_id,
            customer_id=str(order.customer_id),
            created_at=order.created_at,
            status=order.status,
            total_amount=order.total_amount,
            lines=[
                OrderLineResponse(
                    product_id=line.product_id,
                    quantity=line.quantity,
                    unit_price=line.unit_price,
                )
                for line in order.ordered_lines()
            ],
        )


class TransitionResponse(BaseModel):
    order_id: int
    success: bool
    outcome: str
    status: str | None = None
    reason: str | None = None
    skipped_products: list[int] = []

    @classmethod
    def from_result(cls, result) -> "TransitionResponse":
        return cls(
            order_id=result.order_id,
            success=result.success,
            outcome=result.outcome.value,
            status=result.status,
            reason=result.reason,
            skipped_products=list(result.skipped),
        )
