"""EditReview — the author changes the rating or comment of a review."""

from protean.fields import Boolean, Identifier, Integer, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from catalogue.domain import catalogue
from catalogue.review.review import Review
from catalogue.review.reading import get_live_review


@catalogue.command(part_of="Review")
class EditReview:
    review_id = Identifier(required=True)
    user_id = Identifier(required=True)  # Must match the author
    rating = Integer()
    comment = Text()
    clear_comment = Boolean(default=False)  # Remove the comment instead of leaving it as is


@catalogue.command_handler(part_of=Review)
class EditReviewHandler:
    @handle(EditReview)
    def edit_review(self, command):
        review = get_live_review(command.review_id)

        kwargs = {}
        if command.rating is not None:
            kwargs["rating"] = command.rating
        if command.comment is not None:
            kwargs["comment"] = command.comment
        elif command.clear_comment:
            kwargs["comment"] = None

        review.edit(command.user_id, **kwargs)
        current_domain.repository_for(Review).add(review)
        return str(review.id)
