"""DeleteReview — the author withdraws a review.

The review is soft-deleted so that the deletion event still reaches the
rating aggregator.
"""

from protean.fields import Identifier
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from catalogue.domain import catalogue
from catalogue.review.review import Review
from catalogue.review.reading import get_live_review


@catalogue.command(part_of="Review")
class DeleteReview:
    review_id = Identifier(required=True)
    user_id = Identifier(required=True)


@catalogue.command_handler(part_of=Review)
class DeleteReviewHandler:
    @handle(DeleteReview)
    def delete_review(self, command):
        review = get_live_review(command.review_id)
        review.delete(command.user_id)
        current_domain.repository_for(Review).add(review)
        return str(review.id)
