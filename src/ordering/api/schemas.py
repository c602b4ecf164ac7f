"""Pydantic request schemas for the Ordering API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class OrderItemSchema(BaseModel):
    product_id: str
    quantity: int = Field(..., ge=1)


class ShippingAddressSchema(BaseModel):
    full_name: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=20)
    street: str = Field(..., max_length=255)
    city: str = Field(..., max_length=100)
    state: str | None = Field(None, max_length=100)
    postal_code: str = Field(..., max_length=20)
    country: str = Field(..., max_length=100)


class PlaceOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "user_id": "42",
                    "items": [{"product_id": "prod-001", "quantity": 1}],
                    "shipping_address": {
                        "full_name": "Asha Rao",
                        "street": "12 MG Road",
                        "city": "Bengaluru",
                        "state": "KA",
                        "postal_code": "560001",
                        "country": "IN",
                    },
                    "payment_method": "cod",
                }
            ]
        }
    }

    user_id: str
    items: list[OrderItemSchema] = Field(..., min_length=1)
    shipping_address: ShippingAddressSchema
    payment_method: str = Field(..., max_length=50)
    order_number: str | None = Field(None, max_length=100)


class UpdateOrderStatusRequest(BaseModel):
    status: str = Field(..., max_length=20)
    tracking_id: str | None = Field(None, max_length=255)


class PlaceOrderFromCartRequest(BaseModel):
    """Check out the user's cart, shipping to the given or a saved address."""

    user_id: str
    shipping_address: ShippingAddressSchema | None = None
    address_id: str | None = None
    payment_method: str = Field(..., max_length=50)
    order_number: str | None = Field(None, max_length=100)


class AddToCartRequest(BaseModel):
    user_id: str
    product_id: str
    quantity: int = Field(1, ge=1)


class ClearCartRequest(BaseModel):
    user_id: str


class AddAddressRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "user_id": "42",
                    "label": "Home",
                    "full_name": "Asha Rao",
                    "phone": "+91 98450 00000",
                    "street": "12 MG Road",
                    "city": "Bengaluru",
                    "state": "KA",
                    "postal_code": "560001",
                    "country": "IN",
                    "is_default": False,
                }
            ]
        }
    }

    user_id: str
    label: str | None = Field(None, max_length=50)
    full_name: str = Field(..., max_length=255)
    phone: str = Field(..., max_length=20)
    street: str = Field(..., max_length=255)
    city: str = Field(..., max_length=100)
    state: str | None = Field(None, max_length=100)
    postal_code: str = Field(..., max_length=20)
    country: str = Field(..., max_length=100)
    is_default: bool = False


class UpdateAddressRequest(BaseModel):
    user_id: str
    label: str | None = Field(None, max_length=50)
    full_name: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=20)
    street: str | None = Field(None, max_length=255)
    city: str | None = Field(None, max_length=100)
    state: str | None = Field(None, max_length=100)
    postal_code: str | None = Field(None, max_length=20)
    country: str | None = Field(None, max_length=100)
    is_default: bool | None = None


class SetDefaultAddressRequest(BaseModel):
    user_id: str
