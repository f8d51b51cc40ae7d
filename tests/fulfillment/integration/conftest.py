import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient
from storefront.api.routes import orders_router, products_router
from storefront.domain import storefront


@pytest.fixture()
def client():
    app = FastAPI()

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        with storefront.domain_context():
            return await call_next(request)

    app.include_router(orders_router)
    app.include_router(products_router)
    return TestClient(app)
