"""Storefront FastAPI application.

Web server that places, ships and cancels orders synchronously via HTTP.
Each request is wrapped in the storefront domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

import uuid

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay; STOREFRONT_* variables tune the
# fulfillment engine (see storefront.config).
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.utils.globals import current_domain
from storefront.catalogue.product import Product
from storefront.catalogue.seed import seed_catalogue
from storefront.config import FulfillmentSettings
from storefront.domain import storefront
from storefront.utils.logging import add_context, clear_context

storefront.init()

if FulfillmentSettings.from_env().seed_catalogue:
    with storefront.domain_context():
        seed_catalogue(current_domain.repository_for(Product))

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Storefront API",
    description="Order fulfillment — catalogue, orders, shipment and cancellation",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the storefront domain context and bind a request id for logging."""
    add_context(request_id=request.headers.get("x-request-id", uuid.uuid4().hex), path=request.url.path)
    try:
        with storefront.domain_context():
            response = await call_next(request)
        return response
    finally:
        clear_context()


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from storefront.api import orders_router, products_router  # noqa: E402

app.include_router(orders_router)
app.include_router(products_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {
                "storefront": {"name": storefront.name},
            },
        }
    )
