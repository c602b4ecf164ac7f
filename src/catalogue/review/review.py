"""Review aggregate.

One user may hold at most one live review per product; that rule spans
aggregates and is enforced by the submission handler. Deletion is soft:
a deleted review stays in the store with ``is_deleted`` set and is ignored
by reads, the uniqueness check and rating aggregation.
"""

from datetime import UTC, datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier, Integer, Text, ValueObject

from catalogue.domain import catalogue
from catalogue.review.events import ReviewDeleted, ReviewEdited, ReviewSubmitted
from shared.errors import AccessDenied

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET = object()


@catalogue.value_object(part_of="Review")
class Rating:
    """A star rating from 1 to 5."""

    score = Integer(required=True)

    @invariant.post
    def score_must_be_in_range(self):
        if self.score is not None and (self.score < 1 or self.score > 5):
            raise ValidationError({"rating": ["Rating must be between 1 and 5"]})


@catalogue.aggregate
class Review:
    product_id = Identifier(required=True)
    user_id = Identifier(required=True)
    rating = ValueObject(Rating, required=True)
    comment = Text()

    is_deleted = Boolean(default=False)
    deleted_at = DateTime()

    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def submit(cls, product_id, user_id, rating, comment=None):
        now = datetime.now(UTC)
        review = cls(
            product_id=product_id,
            user_id=user_id,
            rating=Rating(score=rating),
            comment=comment,
            is_deleted=False,
            created_at=now,
            updated_at=now,
        )
        review.raise_(
            ReviewSubmitted(
                review_id=str(review.id),
                product_id=str(product_id),
                user_id=str(user_id),
                rating=rating,
                comment=comment,
                submitted_at=now,
            )
        )
        return review

    def _assert_live(self):
        if self.is_deleted:
            raise ValidationError({"review": ["Review has been deleted"]})

    def _assert_author(self, user_id, action):
        if str(self.user_id) != str(user_id):
            raise AccessDenied(f"You can only {action} your own reviews.")

    def edit(self, user_id, rating=_UNSET, comment=_UNSET):
        """Change the rating and/or comment. Only the author may edit."""
        self._assert_live()
        self._assert_author(user_id, "update")

        now = datetime.now(UTC)
        with atomic_change(self):
            if rating is not _UNSET:
                self.rating = Rating(score=rating)
            if comment is not _UNSET:
                self.comment = comment
            self.updated_at = now

        self.raise_(
            ReviewEdited(
                review_id=str(self.id),
                product_id=str(self.product_id),
                rating=self.rating.score,
                comment=self.comment,
                edited_at=now,
            )
        )

    def delete(self, user_id):
        self._assert_live()
        self._assert_author(user_id, "delete")

        now = datetime.now(UTC)
        with atomic_change(self):
            self.is_deleted = True
            self.deleted_at = now
            self.updated_at = now

        self.raise_(
            ReviewDeleted(
                review_id=str(self.id),
                product_id=str(self.product_id),
                user_id=str(self.user_id),
                deleted_at=now,
            )
        )

    def to_dict_with_product(self, product_summary):
        return {
            "id": str(self.id),
            "rating": self.rating.score,
            "comment": self.comment,
            "user_id": str(self.user_id),
            "product_id": str(self.product_id),
            "product": product_summary,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
