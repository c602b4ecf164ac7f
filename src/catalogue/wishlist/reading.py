"""Wishlist read helper."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from catalogue.product.product import Product
from catalogue.product.reading import present
from catalogue.wishlist.management import wishlist_for


def wishlist_detail(user_id, locale=None) -> dict:
    """Saved products, newest product first, skipping any since deleted."""
    wishlist = wishlist_for(user_id)
    repo = current_domain.repository_for(Product)
    products = []
    for product_id in wishlist.product_ids() if wishlist else []:
        try:
            products.append(repo.get(product_id))
        except ObjectNotFoundError:
            continue

    products.sort(key=lambda product: product.created_at, reverse=True)
    return {
        "user_id": str(user_id),
        "products": [present(product, locale) for product in products],
        "total_items_in_wishlist": len(products),
    }
