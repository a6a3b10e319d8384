"""Marketplace API package."""

from marketplace.api.routes import catalogue_router, checkout_router, delivery_router

__all__ = ["catalogue_router", "checkout_router", "delivery_router"]
