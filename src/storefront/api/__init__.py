"""Storefront API package."""

from storefront.api.routes import orders_router, products_router

__all__ = ["orders_router", "products_router"]
