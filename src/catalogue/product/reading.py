"""Product read helpers.

Product payloads carry the rating statistics and the brand, resolved to
the requested locale.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from catalogue.brand.brand import Brand
from catalogue.localization.locale import repository_fetcher, resolve
from catalogue.product.product import Product
from shared.pagination import paginate


def _brand(brand_id, locale):
    if not brand_id:
        return None
    fetch = repository_fetcher(Brand)
    try:
        brand = fetch(brand_id)
    except ObjectNotFoundError:
        return None
    return resolve(brand, locale, fetch).to_dict()


def present(product: Product, locale=None) -> dict:
    return {
        "id": str(product.id),
        "name": product.name,
        "description": product.description,
        "price": product.price,
        "product_type": product.product_type,
        "stock": product.stock,
        "in_stock": product.in_stock,
        "average_rating": product.average_rating,
        "review_count": product.review_count,
        "brand_id": str(product.brand_id) if product.brand_id else None,
        "brand": _brand(product.brand_id, locale),
        "created_at": product.created_at,
        "updated_at": product.updated_at,
    }


def product_detail(product_id, locale=None) -> dict:
    product = current_domain.repository_for(Product).get(str(product_id))
    return present(product, locale)


def list_products(product_type=None, locale=None, page=None, limit=None):
    query = current_domain.repository_for(Product)._dao.query
    if product_type:
        query = query.filter(product_type=product_type)
    products, meta = paginate(query.order_by("-created_at"), page, limit)
    return [present(product, locale) for product in products], meta
