"""Domain events for the Cart aggregate."""

from protean.fields import DateTime, Identifier, Integer

from ordering.domain import ordering


@ordering.event(part_of="Cart")
class CartItemAdded:
    """A product was put in the cart, or its quantity was set again."""

    __version__ = 1

    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    added_at = DateTime(required=True)


@ordering.event(part_of="Cart")
class CartItemRemoved:
    """A product left the cart, or its quantity went down by one."""

    __version__ = 1

    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    remaining_quantity = Integer(required=True)
    removed_at = DateTime(required=True)


@ordering.event(part_of="Cart")
class CartCleared:
    __version__ = 1

    user_id = Identifier(required=True)
    item_count = Integer(required=True)
    cleared_at = DateTime(required=True)
