"""Empties a user's cart once an order has been placed from it."""

import structlog
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from ordering.cart.cart import Cart
from ordering.cart.items import cart_for
from ordering.domain import ordering
from ordering.order.events import OrderPlaced

logger = structlog.get_logger(__name__)


@ordering.event_handler(part_of=Cart, stream_category="ordering::order")
class CartCheckoutEventHandler:
    @handle(OrderPlaced)
    def on_order_placed(self, event: OrderPlaced) -> None:
        if not event.from_cart:
            return

        cart = cart_for(event.user_id)
        if cart is None:
            return

        count = cart.clear()
        if count:
            current_domain.repository_for(Cart).add(cart)
            logger.info("Cart cleared after checkout", user_id=str(event.user_id), order_id=str(event.order_id))
