"""Order aggregate.

Statuses: pending, confirmed, shipped, delivered, cancelled. Any status may
be set from any other; only unknown statuses are rejected.

``shipped_at``, ``delivered_at`` and ``cancelled_at`` are stamped the first
time the order enters the matching status and are never overwritten.
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, ValueObject

from ordering.domain import ordering
from ordering.order.events import OrderPlaced, OrderStatusChanged
from ordering.order.pricing import total_of


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentStatus(Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"


# Status → timestamp field stamped on first entry
_MILESTONES = {
    OrderStatus.SHIPPED: "shipped_at",
    OrderStatus.DELIVERED: "delivered_at",
    OrderStatus.CANCELLED: "cancelled_at",
}


@ordering.value_object(part_of="Order")
class ShippingAddress:
    """Where the order is delivered, captured as it was at checkout."""

    full_name = String(max_length=255)
    phone = String(max_length=20)
    street = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(max_length=100)
    postal_code = String(required=True, max_length=20)
    country = String(required=True, max_length=100)


@ordering.entity(part_of="Order")
class OrderItem:
    product_id = Identifier(required=True)
    title = String(max_length=255)
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(required=True, min_value=0.0)


@ordering.aggregate
class Order:
    order_number = String(required=True, max_length=100)
    user_id = Identifier(required=True)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    items = HasMany(OrderItem)
    total_amount = Float(default=0.0)
    shipping_address = ValueObject(ShippingAddress)
    payment_method = String(required=True, max_length=50)
    payment_status = String(choices=PaymentStatus, default=PaymentStatus.PENDING.value)
    tracking_id = String(max_length=255)

    ordered_at = DateTime()
    shipped_at = DateTime()
    delivered_at = DateTime()
    cancelled_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def must_have_at_least_one_item(self):
        if not self.items:
            raise ValidationError({"items": ["An order must contain at least one item"]})

    @classmethod
    def place(cls, user_id, items, shipping_address, payment_method, order_number=None, from_cart=False):
        """Place a new order.

        Args:
            items: Priced lines, dicts with product_id, quantity, unit_price
                and an optional title.
            shipping_address: Dict matching ``ShippingAddress``.
            order_number: Defaults to ``ORD-{epoch millis}-{user_id}``.
            from_cart: The lines were taken from the user's cart, which is
                emptied once the order is stored.
        """
        if not items:
            raise ValidationError({"items": ["An order must contain at least one item"]})

        now = datetime.now(UTC)
        order_items = [
            OrderItem(
                product_id=item["product_id"],
                title=item.get("title"),
                quantity=item["quantity"],
                unit_price=item["unit_price"],
            )
            for item in items
        ]
        total = total_of((item.unit_price, item.quantity) for item in order_items)

        order = cls(
            order_number=order_number or f"ORD-{int(now.timestamp() * 1000)}-{user_id}",
            user_id=user_id,
            status=OrderStatus.PENDING.value,
            items=order_items,
            total_amount=total,
            shipping_address=ShippingAddress(**shipping_address),
            payment_method=payment_method,
            payment_status=PaymentStatus.PENDING.value,
            ordered_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                order_number=order.order_number,
                user_id=str(user_id),
                items=json.dumps(
                    [{"product_id": str(item.product_id), "quantity": item.quantity} for item in order_items]
                ),
                item_count=len(order_items),
                total_amount=order.total_amount,
                payment_method=payment_method,
                from_cart=from_cart,
                ordered_at=now,
            )
        )
        return order

    def change_status(self, status, tracking_id=None):
        """Move the order to ``status``.

        Returns ``False`` and records nothing when the order already has
        that status.
        """
        try:
            target = OrderStatus(status)
        except ValueError:
            raise ValidationError({"status": [f"Unknown order status '{status}'"]}) from None

        current = OrderStatus(self.status)
        if target == current:
            return False

        now = datetime.now(UTC)
        with atomic_change(self):
            self.status = target.value
            milestone = _MILESTONES.get(target)
            if milestone and getattr(self, milestone) is None:
                setattr(self, milestone, now)
            if tracking_id:
                self.tracking_id = tracking_id
            self.updated_at = now

        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                user_id=str(self.user_id),
                previous_status=current.value,
                new_status=target.value,
                tracking_id=self.tracking_id,
                changed_at=now,
            )
        )
        return True

    def to_dict(self):
        address = self.shipping_address
        return {
            "id": str(self.id),
            "order_number": self.order_number,
            "user_id": str(self.user_id),
            "status": self.status,
            "items": [
                {
                    "product_id": str(item.product_id),
                    "title": item.title,
                    "quantity": item.quantity,
                    "unit_price": item.unit_price,
                }
                for item in self.items
            ],
            "total_amount": self.total_amount,
            "shipping_address": address.to_dict() if address else None,
            "payment_method": self.payment_method,
            "payment_status": self.payment_status,
            "tracking_id": self.tracking_id,
            "ordered_at": self.ordered_at,
            "shipped_at": self.shipped_at,
            "delivered_at": self.delivered_at,
            "cancelled_at": self.cancelled_at,
        }
