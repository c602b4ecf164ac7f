"""Domain events for the Review aggregate.

Every event carries ``product_id`` so that the product's rating fields can
be recomputed without loading the review.
"""

from protean.fields import DateTime, Identifier, Integer, Text

from catalogue.domain import catalogue


@catalogue.event(part_of="Review")
class ReviewSubmitted:
    """A user reviewed a product."""

    __version__ = 1

    review_id = Identifier(required=True)
    product_id = Identifier(required=True)
    user_id = Identifier(required=True)
    rating = Integer(required=True)
    comment = Text()
    submitted_at = DateTime(required=True)


@catalogue.event(part_of="Review")
class ReviewEdited:
    """The author changed the rating or comment of their review."""

    __version__ = 1

    review_id = Identifier(required=True)
    product_id = Identifier(required=True)
    rating = Integer(required=True)
    comment = Text()
    edited_at = DateTime(required=True)


@catalogue.event(part_of="Review")
class ReviewDeleted:
    """The author deleted their review."""

    __version__ = 1

    review_id = Identifier(required=True)
    product_id = Identifier(required=True)
    user_id = Identifier(required=True)
    deleted_at = DateTime(required=True)
