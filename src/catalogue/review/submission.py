"""SubmitReview — a user reviews a product.

The one-live-review-per-user-per-product rule spans Review instances, so it
is checked here with a repository query rather than as an invariant.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier, Integer, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from catalogue.domain import catalogue
from catalogue.product.product import Product
from catalogue.review.review import Review


@catalogue.command(part_of="Review")
class SubmitReview:
    product_id = Identifier(required=True)
    user_id = Identifier(required=True)
    rating = Integer(required=True)
    comment = Text()


@catalogue.command_handler(part_of=Review)
class SubmitReviewHandler:
    @handle(SubmitReview)
    def submit_review(self, command):
        try:
            current_domain.repository_for(Product).get(str(command.product_id))
        except ObjectNotFoundError:
            raise ValidationError({"product_id": ["No product found with the given ID."]}) from None

        repo = current_domain.repository_for(Review)
        existing = repo._dao.query.filter(
            user_id=str(command.user_id),
            product_id=str(command.product_id),
            is_deleted=False,
        ).all()
        if existing.items:
            raise ValidationError({"review": ["You have already reviewed this product."]})

        review = Review.submit(
            product_id=command.product_id,
            user_id=command.user_id,
            rating=command.rating,
            comment=command.comment,
        )
        repo.add(review)
        return str(review.id)
