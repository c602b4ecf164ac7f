"""Read helpers for reviews: lookups that hide soft-deleted reviews and
attach a short product summary to each review."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from catalogue.product.product import Product
from catalogue.review.review import Review
from shared.pagination import paginate


def get_live_review(review_id) -> Review:
    review = current_domain.repository_for(Review).get(str(review_id))
    if review.is_deleted:
        raise ObjectNotFoundError("Review not found.")
    return review


def _product_summary(product_id, cache):
    if product_id not in cache:
        try:
            cache[product_id] = current_domain.repository_for(Product).get(product_id).to_summary()
        except ObjectNotFoundError:
            cache[product_id] = None
    return cache[product_id]


def present(reviews) -> list[dict]:
    cache = {}
    return [review.to_dict_with_product(_product_summary(str(review.product_id), cache)) for review in reviews]


def review_detail(review_id) -> dict:
    return present([get_live_review(review_id)])[0]


def list_reviews(product_id=None, user_id=None, page=None, limit=None):
    """Live reviews, newest first, optionally filtered by product and/or user."""
    criteria = {"is_deleted": False}
    if product_id:
        criteria["product_id"] = str(product_id)
    if user_id:
        criteria["user_id"] = str(user_id)

    query = current_domain.repository_for(Review)._dao.query.filter(**criteria).order_by("-created_at")
    reviews, meta = paginate(query, page, limit)
    return present(reviews), meta
