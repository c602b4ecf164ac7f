"""Catalogue domain API package."""

from catalogue.api.routes import attribute_router, brand_router, product_router, review_router, wishlist_router

__all__ = ["product_router", "review_router", "brand_router", "attribute_router", "wishlist_router"]
