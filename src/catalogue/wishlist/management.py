"""Wishlist commands and handler."""

from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from catalogue.domain import catalogue
from catalogue.product.product import Product
from catalogue.wishlist.wishlist import Wishlist


@catalogue.command(part_of="Wishlist")
class AddToWishlist:
    user_id: Identifier(required=True)
    product_id: Identifier(required=True)


@catalogue.command(part_of="Wishlist")
class RemoveFromWishlist:
    user_id: Identifier(required=True)
    product_id: Identifier(required=True)


@catalogue.command(part_of="Wishlist")
class ClearWishlist:
    user_id: Identifier(required=True)


def wishlist_for(user_id, create=False):
    repo = current_domain.repository_for(Wishlist)
    try:
        return repo.get(str(user_id))
    except ObjectNotFoundError:
        if not create:
            return None
        return Wishlist.open(user_id)


@catalogue.command_handler(part_of=Wishlist)
class WishlistHandler:
    @handle(AddToWishlist)
    def add_to_wishlist(self, command):
        try:
            current_domain.repository_for(Product).get(str(command.product_id))
        except ObjectNotFoundError:
            raise ObjectNotFoundError("Product not found.") from None

        wishlist = wishlist_for(command.user_id, create=True)
        added = wishlist.add_product(command.product_id)
        if added:
            current_domain.repository_for(Wishlist).add(wishlist)
        return added

    @handle(RemoveFromWishlist)
    def remove_from_wishlist(self, command):
        wishlist = wishlist_for(command.user_id)
        if wishlist is None or not wishlist.remove_product(command.product_id):
            return False
        current_domain.repository_for(Wishlist).add(wishlist)
        return True

    @handle(ClearWishlist)
    def clear_wishlist(self, command):
        wishlist = wishlist_for(command.user_id)
        count = wishlist.clear() if wishlist else 0
        if count:
            current_domain.repository_for(Wishlist).add(wishlist)
        return count
