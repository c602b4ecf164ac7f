"""Keeps product rating fields in step with the product's reviews.

Runs synchronously when the review change is committed, so the product
reflects the new rating before the mutating request returns.
"""

import structlog
from protean.utils.mixins import handle

from catalogue.domain import catalogue
from catalogue.product.product import Product
from catalogue.product.rating import recalculate
from catalogue.review.events import ReviewDeleted, ReviewEdited, ReviewSubmitted

logger = structlog.get_logger(__name__)


@catalogue.event_handler(part_of=Product, stream_category="catalogue::review")
class ReviewRatingEventHandler:
    @handle(ReviewSubmitted)
    def on_review_submitted(self, event: ReviewSubmitted) -> None:
        recalculate(event.product_id)

    @handle(ReviewEdited)
    def on_review_edited(self, event: ReviewEdited) -> None:
        recalculate(event.product_id)

    @handle(ReviewDeleted)
    def on_review_deleted(self, event: ReviewDeleted) -> None:
        logger.debug("Review deleted", review_id=str(event.review_id), product_id=str(event.product_id))
        recalculate(event.product_id)
