"""Domain events for the Wishlist aggregate."""

from protean.fields import DateTime, Identifier, Integer

from catalogue.domain import catalogue


@catalogue.event(part_of="Wishlist")
class ProductWishlisted:
    __version__ = 1

    user_id: Identifier(required=True)
    product_id: Identifier(required=True)
    added_at: DateTime(required=True)


@catalogue.event(part_of="Wishlist")
class ProductUnwishlisted:
    __version__ = 1

    user_id: Identifier(required=True)
    product_id: Identifier(required=True)
    removed_at: DateTime(required=True)


@catalogue.event(part_of="Wishlist")
class WishlistCleared:
    __version__ = 1

    user_id: Identifier(required=True)
    item_count: Integer(required=True)
    cleared_at: DateTime(required=True)
