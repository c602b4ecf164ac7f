"""Inbound cross-domain event handler — Messaging reacts to Ordering events.

Sends the customer an order-status notification when an order is placed
and whenever its status changes.
"""

import structlog
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from messaging.domain import messaging
from messaging.notification.notification import Notification, NotificationType
from shared.events.ordering import OrderPlaced, OrderStatusChanged

logger = structlog.get_logger(__name__)

messaging.register_external_event(OrderPlaced, "Ordering.OrderPlaced.v1")
messaging.register_external_event(OrderStatusChanged, "Ordering.OrderStatusChanged.v1")


def _notify(user_id, title, message, order_id):
    notification = Notification.send(
        user_id=user_id,
        title=title,
        message=message,
        notification_type=NotificationType.ORDER_STATUS.value,
        related_order_id=order_id,
    )
    current_domain.repository_for(Notification).add(notification)
    logger.info("Order notification sent", user_id=str(user_id), order_id=str(order_id))


@messaging.event_handler(part_of=Notification, stream_category="ordering::order")
class OrderingEventsHandler:
    @handle(OrderPlaced)
    def on_order_placed(self, event: OrderPlaced) -> None:
        _notify(
            event.user_id,
            "Order placed",
            f"Your order {event.order_number} has been placed. Total: {event.total_amount:.2f}.",
            event.order_id,
        )

    @handle(OrderStatusChanged)
    def on_order_status_changed(self, event: OrderStatusChanged) -> None:
        message = f"Your order is now {event.new_status}."
        if event.tracking_id:
            message = f"{message} Tracking ID: {event.tracking_id}."
        _notify(event.user_id, "Order update", message, event.order_id)
