"""Tests for the Order aggregate: placement and the status timestamp lifecycle."""

import json
import re

import pytest
from ordering.order.events import OrderPlaced, OrderStatusChanged
from ordering.order.order import Order, OrderStatus, PaymentStatus
from protean.exceptions import ValidationError

ADDRESS = {"street": "12 MG Road", "city": "Bengaluru", "postal_code": "560001", "country": "IN"}


def _place_order(**overrides):
    defaults = {
        "user_id": "42",
        "items": [
            {"product_id": "prod-1", "title": "Aviator", "quantity": 2, "unit_price": 49.5},
            {"product_id": "prod-2", "quantity": 1, "unit_price": 20.0},
        ],
        "shipping_address": ADDRESS,
        "payment_method": "card",
    }
    defaults.update(overrides)
    order = Order.place(**defaults)
    return order


class TestPlaceOrder:
    def test_new_order_is_pending(self):
        order = _place_order()
        assert order.status == OrderStatus.PENDING.value
        assert order.payment_status == PaymentStatus.PENDING.value
        assert order.ordered_at is not None
        assert order.shipped_at is None

    def test_total_is_sum_of_lines(self):
        assert _place_order().total_amount == 119.0

    def test_order_number_generated(self):
        order = _place_order()
        assert re.fullmatch(r"ORD-\d{13}-42", order.order_number)

    def test_order_number_kept_when_given(self):
        assert _place_order(order_number="ORD-CUSTOM").order_number == "ORD-CUSTOM"

    def test_placed_event(self):
        order = _place_order()
        event = order._events[-1]
        assert isinstance(event, OrderPlaced)
        assert event.item_count == 2
        assert event.total_amount == 119.0
        assert json.loads(event.items) == [
            {"product_id": "prod-1", "quantity": 2},
            {"product_id": "prod-2", "quantity": 1},
        ]
        assert event.from_cart is False

    def test_total_rounds_half_up_to_cents(self):
        order = _place_order(items=[{"product_id": "prod-1", "quantity": 1, "unit_price": 1.005}])
        assert order.total_amount == 1.01

    def test_empty_order_rejected(self):
        with pytest.raises(ValidationError):
            _place_order(items=[])

    def test_zero_quantity_rejected(self):
        with pytest.raises(ValidationError):
            _place_order(items=[{"product_id": "prod-1", "quantity": 0, "unit_price": 10.0}])


class TestStatusTimestamps:
    def test_shipping_stamps_shipped_at(self):
        order = _place_order()
        assert order.change_status("shipped", tracking_id="TRK-1") is True
        assert order.shipped_at is not None
        assert order.tracking_id == "TRK-1"
        assert order.delivered_at is None

    def test_delivery_stamps_delivered_at_and_keeps_shipped_at(self):
        order = _place_order()
        order.change_status("shipped")
        shipped_at = order.shipped_at

        order.change_status("delivered")

        assert order.delivered_at is not None
        assert order.shipped_at == shipped_at

    def test_cancellation_stamps_cancelled_at(self):
        order = _place_order()
        order.change_status("confirmed")
        order.change_status("cancelled")
        assert order.cancelled_at is not None
        assert order.shipped_at is None

    def test_same_status_is_a_no_op(self):
        order = _place_order()
        order.change_status("shipped")
        shipped_at = order.shipped_at
        order._events.clear()

        assert order.change_status("shipped") is False
        assert order.shipped_at == shipped_at
        assert order._events == []

    def test_change_event_records_both_statuses(self):
        order = _place_order()
        order.change_status("confirmed")
        event = order._events[-1]
        assert isinstance(event, OrderStatusChanged)
        assert (event.previous_status, event.new_status) == ("pending", "confirmed")


class TestTransitions:
    @pytest.mark.parametrize(
        "path",
        [
            ["confirmed", "shipped", "delivered"],
            ["shipped", "delivered"],
            ["cancelled"],
            ["shipped", "cancelled"],
            ["shipped", "delivered", "pending"],
            ["cancelled", "confirmed"],
            ["delivered"],
        ],
    )
    def test_any_status_can_follow_any_other(self, path):
        order = _place_order()
        for status in path:
            order.change_status(status)
        assert order.status == path[-1]

    def test_revisiting_a_status_keeps_its_first_timestamp(self):
        order = _place_order()
        order.change_status("shipped")
        shipped_at = order.shipped_at

        order.change_status("pending")
        order.change_status("shipped")

        assert order.shipped_at == shipped_at

    def test_cancelling_a_delivered_order_keeps_delivery_time(self):
        order = _place_order()
        order.change_status("delivered")
        delivered_at = order.delivered_at

        order.change_status("cancelled")

        assert order.cancelled_at is not None
        assert order.delivered_at == delivered_at

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            _place_order().change_status("lost")
