"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from catalogue.domain import catalogue


@catalogue.event(part_of="Product")
class ProductCreated:
    """A new product was added to the catalogue."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    product_type: String(required=True)
    price: Float(required=True)
    brand_id: Identifier()
    stock: Integer()
    created_at: DateTime(required=True)


@catalogue.event(part_of="Product")
class ProductDetailsUpdated:
    """Descriptive fields, price or stock of a product changed."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    description: Text()
    price: Float(required=True)
    product_type: String(required=True)
    brand_id: Identifier()
    stock: Integer()
    updated_at: DateTime(required=True)


@catalogue.event(part_of="Product")
class ProductRatingRecalculated:
    """The derived rating fields were recomputed from the live reviews."""

    __version__ = 1

    product_id: Identifier(required=True)
    average_rating: Float(required=True)
    review_count: Integer(required=True)
    recalculated_at: DateTime(required=True)


@catalogue.event(part_of="Product")
class ProductStockWithdrawn:
    """Units of a product left the shelf because an order was placed."""

    __version__ = 1

    product_id: Identifier(required=True)
    order_id: Identifier(required=True)
    quantity: Integer(required=True)
    stock: Integer(required=True)
    withdrawn_at: DateTime(required=True)
