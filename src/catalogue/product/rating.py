"""Rating aggregation for products.

A product's ``average_rating`` and ``review_count`` are a pure function of
its live (not soft-deleted) reviews. ``summarize`` computes them;
``recalculate`` loads the reviews, computes the summary and writes both
fields back onto the product in one update.

Two concurrent review writes on the same product each recompute from what
they read, so the last write wins.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from catalogue.product.product import Product
from catalogue.review.review import Review
from shared.pagination import fetch_all

logger = structlog.get_logger(__name__)

_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class RatingSummary:
    average_rating: float
    review_count: int

    def to_dict(self) -> dict:
        return {"average_rating": self.average_rating, "review_count": self.review_count}


def summarize(ratings) -> RatingSummary:
    """Mean of ``ratings`` rounded half-up to two decimals, or zero for no ratings."""
    ratings = list(ratings)
    if not ratings:
        return RatingSummary(average_rating=0.0, review_count=0)
    mean = Decimal(sum(ratings)) / len(ratings)
    return RatingSummary(
        average_rating=float(mean.quantize(_CENTS, rounding=ROUND_HALF_UP)),
        review_count=len(ratings),
    )


def live_ratings(product_id: str) -> list[int]:
    query = current_domain.repository_for(Review)._dao.query.filter(
        product_id=str(product_id),
        is_deleted=False,
    )
    return [review.rating.score for review in fetch_all(query)]


def recalculate(product_id: str) -> RatingSummary | None:
    """Recompute and persist the rating fields of ``product_id``.

    Returns ``None`` without raising when the product no longer exists.
    """
    repo = current_domain.repository_for(Product)
    try:
        product = repo.get(str(product_id))
    except ObjectNotFoundError:
        logger.warning("Skipping rating recompute for missing product", product_id=str(product_id))
        return None

    summary = summarize(live_ratings(product_id))
    product.record_rating(summary)
    repo.add(product)

    logger.info(
        "Product rating recalculated",
        product_id=str(product_id),
        average_rating=summary.average_rating,
        review_count=summary.review_count,
    )
    return summary
