"""Cross-domain event contracts for Ordering domain events.

Consumed by the Catalogue domain to take ordered units off the shelf, and
by the Messaging domain to notify customers about their orders. They are
registered as external events via domain.register_external_event() with
matching __type__ strings so Protean's stream deserialization works
correctly.

The source-of-truth events are in src/ordering/order/events.py.
"""

from protean.core.event import BaseEvent
from protean.fields import Boolean, DateTime, Float, Identifier, Integer, String, Text


class OrderPlaced(BaseEvent):
    """A user placed a new order."""

    __version__ = 1

    order_id = Identifier(required=True)
    order_number = String(required=True)
    user_id = Identifier(required=True)
    items = Text(required=True)  # JSON: [{product_id, quantity}]
    item_count = Integer(required=True)
    total_amount = Float(required=True)
    payment_method = String(required=True)
    from_cart = Boolean(default=False)
    ordered_at = DateTime(required=True)


class OrderStatusChanged(BaseEvent):
    """The order moved to a new status."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    tracking_id = String()
    changed_at = DateTime(required=True)
