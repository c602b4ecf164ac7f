"""Ordering's view of the catalogue: price and available units per product.

Kept in step with Catalogue through its product events, and the only
source of prices and availability when an order is placed or a cart is
shown. Placing an order reserves units here straight away, so two orders
in a row cannot both claim the last unit while Catalogue catches up.
"""

from datetime import UTC, datetime

from protean import atomic_change
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Integer, String

from ordering.domain import ordering


@ordering.aggregate
class StockItem:
    product_id = String(identifier=True, max_length=255)
    name = String(max_length=255)
    unit_price = Float(default=0.0, min_value=0.0)
    available = Integer(default=0, min_value=0)
    updated_at = DateTime()

    @classmethod
    def track(cls, product_id, name, unit_price, available=0):
        return cls(
            product_id=str(product_id),
            name=name,
            unit_price=unit_price,
            available=available or 0,
            updated_at=datetime.now(UTC),
        )

    def sync(self, name=None, unit_price=None, available=None):
        """Overwrite the snapshot with the catalogue's latest values.

        ``None`` leaves a field as it is.
        """
        with atomic_change(self):
            if name is not None:
                self.name = name
            if unit_price is not None:
                self.unit_price = unit_price
            if available is not None:
                self.available = available
            self.updated_at = datetime.now(UTC)

    def reserve(self, quantity):
        if quantity > self.available:
            raise ValidationError(
                {
                    "items": [
                        f'Product "{self.name}" is out of stock or insufficient quantity '
                        f"(Available: {self.available}, Requested: {quantity})."
                    ]
                }
            )
        self.available -= quantity
        self.updated_at = datetime.now(UTC)
