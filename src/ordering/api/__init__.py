"""Ordering domain API package."""

from ordering.api.routes import address_router, cart_router, router

__all__ = ["router", "cart_router", "address_router"]
