"""Cart aggregate — one per user, holding the products picked for the next order.

The cart only references products. Prices and availability come from the
StockItem snapshot whenever the cart is shown or turned into an order.
"""

from datetime import UTC, datetime

from protean.exceptions import ObjectNotFoundError
from protean.fields import DateTime, HasMany, Identifier, Integer, String

from ordering.cart.events import CartCleared, CartItemAdded, CartItemRemoved
from ordering.domain import ordering


@ordering.entity(part_of="Cart")
class CartItem:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()


@ordering.aggregate
class Cart:
    user_id = String(identifier=True, max_length=255)
    items = HasMany(CartItem)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def open(cls, user_id):
        now = datetime.now(UTC)
        return cls(user_id=str(user_id), created_at=now, updated_at=now)

    def _line(self, product_id):
        return next((item for item in self.items if str(item.product_id) == str(product_id)), None)

    def add_product(self, product_id, quantity=1):
        """Put ``quantity`` units of a product in the cart.

        Adding a product that is already there sets its quantity rather
        than adding to it.
        """
        now = datetime.now(UTC)
        line = self._line(product_id)
        if line:
            line.quantity = quantity
        else:
            line = CartItem(product_id=str(product_id), quantity=quantity, added_at=now)
            self.add_items(line)
        self.updated_at = now

        self.raise_(
            CartItemAdded(
                user_id=self.user_id,
                product_id=str(product_id),
                quantity=quantity,
                added_at=now,
            )
        )
        return line

    def remove_product(self, product_id, decrement=False):
        """Drop a product from the cart, or one unit of it with ``decrement``.

        Returns the line when units remain, ``None`` once it is gone.
        """
        line = self._line(product_id)
        if line is None:
            raise ObjectNotFoundError("Product not found in cart for this user.")

        now = datetime.now(UTC)
        if decrement and line.quantity > 1:
            line.quantity -= 1
            remaining = line
        else:
            self.remove_items(line)
            remaining = None
        self.updated_at = now

        self.raise_(
            CartItemRemoved(
                user_id=self.user_id,
                product_id=str(product_id),
                remaining_quantity=remaining.quantity if remaining else 0,
                removed_at=now,
            )
        )
        return remaining

    def clear(self):
        """Empty the cart and return how many lines were removed."""
        count = len(self.items)
        if not count:
            return 0

        now = datetime.now(UTC)
        for line in list(self.items):
            self.remove_items(line)
        self.updated_at = now

        self.raise_(CartCleared(user_id=self.user_id, item_count=count, cleared_at=now))
        return count

    def lines(self):
        return [(str(item.product_id), item.quantity) for item in self.items]
