"""Shared BDD fixtures for the Ordering domain."""

from ordering.order.order import Order
from pytest_bdd import given


@given("a pending order", target_fixture="order")
def pending_order():
    order = Order.place(
        user_id="42",
        items=[{"product_id": "prod-bdd", "quantity": 1, "unit_price": 75.0}],
        shipping_address={"street": "1 Lake View", "city": "Kochi", "postal_code": "682001", "country": "IN"},
        payment_method="card",
    )
    order._events.clear()
    return order
