"""Order placement — commands and handler.

Both commands price the lines from the stock snapshot and reserve the
units before the order is stored. ``PlaceOrderFromCart`` takes its lines
from the user's cart; the cart is emptied once the order is placed.
"""

import json

from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from ordering.address.reading import shipping_address_from_book
from ordering.cart.items import cart_for
from ordering.domain import ordering
from ordering.order.order import Order
from ordering.order.pricing import price_and_reserve
from ordering.stock.stock import StockItem


@ordering.command(part_of="Order")
class PlaceOrder:
    user_id = Identifier(required=True)
    items = Text(required=True)  # JSON: [{product_id, quantity}]
    shipping_address = Text(required=True)  # JSON: address dict
    payment_method = String(required=True, max_length=50)
    order_number = String(max_length=100)


@ordering.command(part_of="Order")
class PlaceOrderFromCart:
    user_id = Identifier(required=True)
    shipping_address = Text()  # JSON: address dict
    address_id = Identifier()  # A saved address, used when no address is given
    payment_method = String(required=True, max_length=50)
    order_number = String(max_length=100)


def _loaded(value):
    return json.loads(value) if isinstance(value, str) else value


@ordering.command_handler(part_of=Order)
class PlaceOrderHandler:
    def _place(self, command, lines, shipping_address, from_cart=False):
        items, reserved = price_and_reserve(lines)
        order = Order.place(
            user_id=command.user_id,
            items=items,
            shipping_address=shipping_address,
            payment_method=command.payment_method,
            order_number=command.order_number,
            from_cart=from_cart,
        )

        stock_repo = current_domain.repository_for(StockItem)
        for stock in reserved:
            stock_repo.add(stock)
        current_domain.repository_for(Order).add(order)
        return str(order.id)

    @handle(PlaceOrder)
    def place_order(self, command):
        lines = [(item["product_id"], int(item["quantity"])) for item in _loaded(command.items)]
        return self._place(command, lines, _loaded(command.shipping_address))

    @handle(PlaceOrderFromCart)
    def place_order_from_cart(self, command):
        cart = cart_for(command.user_id)
        if cart is None or not cart.items:
            raise ValidationError({"cart": ["Your cart is empty. Cannot create an order."]})

        if command.shipping_address:
            shipping_address = _loaded(command.shipping_address)
        elif command.address_id:
            shipping_address = shipping_address_from_book(command.user_id, command.address_id)
        else:
            raise ValidationError({"shipping_address": ["Missing required field: shipping_address"]})

        return self._place(command, cart.lines(), shipping_address, from_cart=True)
