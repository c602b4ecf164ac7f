"""Cross-domain event contracts for Catalogue domain events.

Ordering keeps a stock snapshot of every product from these events, so it
can price orders and enforce availability without reading Catalogue's
tables. They are registered as external events via
domain.register_external_event() with matching __type__ strings so
Protean's stream deserialization works correctly.

The source-of-truth events are in src/catalogue/product/events.py.
"""

from protean.core.event import BaseEvent
from protean.fields import DateTime, Float, Identifier, Integer, String, Text


class ProductCreated(BaseEvent):
    """A new product was added to the catalogue."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True)
    product_type = String(required=True)
    price = Float(required=True)
    brand_id = Identifier()
    stock = Integer()
    created_at = DateTime(required=True)


class ProductDetailsUpdated(BaseEvent):
    """Descriptive fields, price or stock of a product changed."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True)
    description = Text()
    price = Float(required=True)
    product_type = String(required=True)
    brand_id = Identifier()
    stock = Integer()
    updated_at = DateTime(required=True)


class ProductStockWithdrawn(BaseEvent):
    """Units of a product left the shelf because an order was placed."""

    __version__ = 1

    product_id = Identifier(required=True)
    order_id = Identifier(required=True)
    quantity = Integer(required=True)
    stock = Integer(required=True)
    withdrawn_at = DateTime(required=True)
