"""Product aggregate.

A product is one reviewable catalogue item: eyeglasses, sunglasses,
contact lenses or an accessory. ``average_rating`` and ``review_count``
are derived from the product's live reviews and only change through
``record_rating``; clients never write them directly.
"""

from datetime import UTC, datetime
from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from catalogue.domain import catalogue
from catalogue.product.events import (
    ProductCreated,
    ProductDetailsUpdated,
    ProductRatingRecalculated,
    ProductStockWithdrawn,
)

_UNSET = object()


class ProductType(Enum):
    EYEGLASSES = "Eyeglasses"
    SUNGLASSES = "Sunglasses"
    CONTACT_LENS = "ContactLens"
    ACCESSORY = "Accessory"


@catalogue.aggregate
class Product:
    name: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True, min_value=0.0)
    product_type: String(choices=ProductType, required=True)
    brand_id: Identifier()
    stock: Integer(default=0, min_value=0)

    # Derived from reviews
    average_rating: Float(default=0.0)
    review_count: Integer(default=0)

    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def name_must_not_be_blank(self):
        if self.name is not None and not self.name.strip():
            raise ValidationError({"name": ["Product name cannot be empty"]})

    @invariant.post
    def average_rating_within_star_range(self):
        if self.average_rating is not None and not 0 <= self.average_rating <= 5:
            raise ValidationError({"average_rating": ["Average rating must be between 0 and 5"]})

    @invariant.post
    def review_count_cannot_be_negative(self):
        if self.review_count is not None and self.review_count < 0:
            raise ValidationError({"review_count": ["Review count cannot be negative"]})

    @classmethod
    def create(cls, name, price, product_type, description=None, brand_id=None, stock=0):
        now = datetime.now(UTC)
        product = cls(
            name=name,
            description=description,
            price=price,
            product_type=product_type,
            brand_id=brand_id,
            stock=stock or 0,
            average_rating=0.0,
            review_count=0,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductCreated(
                product_id=str(product.id),
                name=name,
                product_type=product.product_type,
                price=price,
                brand_id=str(brand_id) if brand_id else None,
                stock=product.stock,
                created_at=now,
            )
        )
        return product

    def update_details(
        self,
        name=_UNSET,
        description=_UNSET,
        price=_UNSET,
        product_type=_UNSET,
        brand_id=_UNSET,
        stock=_UNSET,
    ):
        now = datetime.now(UTC)

        with atomic_change(self):
            if name is not _UNSET:
                self.name = name
            if description is not _UNSET:
                self.description = description
            if price is not _UNSET:
                self.price = price
            if product_type is not _UNSET:
                self.product_type = product_type
            if brand_id is not _UNSET:
                self.brand_id = brand_id
            if stock is not _UNSET:
                self.stock = stock
            self.updated_at = now

        self.raise_(
            ProductDetailsUpdated(
                product_id=str(self.id),
                name=self.name,
                description=self.description,
                price=self.price,
                product_type=self.product_type,
                brand_id=str(self.brand_id) if self.brand_id else None,
                stock=self.stock,
                updated_at=now,
            )
        )

    def record_rating(self, summary):
        """Overwrite both derived rating fields from a ``RatingSummary``."""
        now = datetime.now(UTC)

        with atomic_change(self):
            self.average_rating = summary.average_rating
            self.review_count = summary.review_count
            self.updated_at = now

        self.raise_(
            ProductRatingRecalculated(
                product_id=str(self.id),
                average_rating=summary.average_rating,
                review_count=summary.review_count,
                recalculated_at=now,
            )
        )

    @property
    def in_stock(self):
        return (self.stock or 0) > 0

    def withdraw_stock(self, quantity, order_id):
        """Take ``quantity`` units off the shelf for ``order_id``.

        Stock never goes below zero; returns the number of units actually
        withdrawn.
        """
        withdrawn = min(quantity, self.stock or 0)
        now = datetime.now(UTC)

        with atomic_change(self):
            self.stock = (self.stock or 0) - withdrawn
            self.updated_at = now

        self.raise_(
            ProductStockWithdrawn(
                product_id=str(self.id),
                order_id=str(order_id),
                quantity=withdrawn,
                stock=self.stock,
                withdrawn_at=now,
            )
        )
        return withdrawn

    def to_summary(self):
        return {"id": str(self.id), "name": self.name, "price": self.price}
