"""Wishlist aggregate — the products one user has saved for later."""

from datetime import UTC, datetime

from protean.fields import DateTime, HasMany, Identifier, String

from catalogue.domain import catalogue
from catalogue.wishlist.events import ProductUnwishlisted, ProductWishlisted, WishlistCleared


@catalogue.entity(part_of="Wishlist")
class WishlistItem:
    product_id: Identifier(required=True)
    added_at: DateTime()


@catalogue.aggregate
class Wishlist:
    user_id: String(identifier=True, max_length=255)
    items: HasMany(WishlistItem)
    updated_at: DateTime()

    @classmethod
    def open(cls, user_id):
        return cls(user_id=str(user_id), updated_at=datetime.now(UTC))

    def contains(self, product_id):
        return any(str(item.product_id) == str(product_id) for item in self.items)

    def add_product(self, product_id):
        """Save a product. Returns ``False`` when it was already saved."""
        if self.contains(product_id):
            return False

        now = datetime.now(UTC)
        self.add_items(WishlistItem(product_id=str(product_id), added_at=now))
        self.updated_at = now
        self.raise_(ProductWishlisted(user_id=self.user_id, product_id=str(product_id), added_at=now))
        return True

    def remove_product(self, product_id):
        """Drop a product. Returns ``False`` when it was not saved."""
        item = next((item for item in self.items if str(item.product_id) == str(product_id)), None)
        if item is None:
            return False

        now = datetime.now(UTC)
        self.remove_items(item)
        self.updated_at = now
        self.raise_(ProductUnwishlisted(user_id=self.user_id, product_id=str(product_id), removed_at=now))
        return True

    def clear(self):
        count = len(self.items)
        if not count:
            return 0

        now = datetime.now(UTC)
        for item in list(self.items):
            self.remove_items(item)
        self.updated_at = now
        self.raise_(WishlistCleared(user_id=self.user_id, item_count=count, cleared_at=now))
        return count

    def product_ids(self):
        return [str(item.product_id) for item in self.items]
