"""Cart item commands — add, remove and clear."""

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.fields import Boolean, Identifier, Integer
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from ordering.cart.cart import Cart
from ordering.domain import ordering
from ordering.stock.stock import StockItem

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Cart")
class AddToCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(default=1, min_value=1)


@ordering.command(part_of="Cart")
class RemoveFromCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    decrement = Boolean(default=False)


@ordering.command(part_of="Cart")
class ClearCart:
    user_id = Identifier(required=True)


def cart_for(user_id, create=False):
    """Load the user's cart; with ``create`` a missing cart is opened."""
    repo = current_domain.repository_for(Cart)
    try:
        return repo.get(str(user_id))
    except ObjectNotFoundError:
        if not create:
            return None
        return Cart.open(user_id)


@ordering.command_handler(part_of=Cart)
class CartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        try:
            current_domain.repository_for(StockItem).get(str(command.product_id))
        except ObjectNotFoundError:
            raise ObjectNotFoundError("Product not found.") from None

        cart = cart_for(command.user_id, create=True)
        line = cart.add_product(command.product_id, command.quantity or 1)
        current_domain.repository_for(Cart).add(cart)
        return {"product_id": str(line.product_id), "quantity": line.quantity}

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        cart = cart_for(command.user_id)
        if cart is None:
            raise ObjectNotFoundError("Product not found in cart for this user.")

        line = cart.remove_product(command.product_id, decrement=bool(command.decrement))
        current_domain.repository_for(Cart).add(cart)
        if line is None:
            return None
        return {"product_id": str(line.product_id), "quantity": line.quantity}

    @handle(ClearCart)
    def clear_cart(self, command):
        cart = cart_for(command.user_id)
        if cart is None:
            return 0

        count = cart.clear()
        if count:
            current_domain.repository_for(Cart).add(cart)
        else:
            logger.debug("Cart already empty", user_id=str(command.user_id))
        return count
