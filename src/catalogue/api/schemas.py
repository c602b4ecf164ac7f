"""Pydantic request schemas for the Catalogue API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Product Request Schemas ---


class CreateProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Aviator Classic",
                    "description": "Gold metal frame with green polarized lenses.",
                    "price": 149.0,
                    "product_type": "Sunglasses",
                    "brand_id": "b6c1a3f0-0000-4000-8000-000000000001",
                    "stock": 25,
                }
            ]
        }
    }

    name: str = Field(..., max_length=255)
    description: str | None = None
    price: float = Field(..., ge=0)
    product_type: str = Field(..., max_length=20)
    brand_id: str | None = None
    stock: int = Field(0, ge=0)


class UpdateProductDetailsRequest(BaseModel):
    name: str | None = Field(None, max_length=255)
    description: str | None = None
    price: float | None = Field(None, ge=0)
    product_type: str | None = Field(None, max_length=20)
    brand_id: str | None = None
    stock: int | None = Field(None, ge=0)


# --- Review Request Schemas ---


class SubmitReviewRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "product_id": "prod-001",
                    "user_id": "42",
                    "rating": 5,
                    "comment": "Light and comfortable, great lenses.",
                }
            ]
        }
    }

    product_id: str
    user_id: str
    rating: int
    comment: str | None = None


class EditReviewRequest(BaseModel):
    user_id: str
    rating: int | None = None
    comment: str | None = None


# --- Localized Attribute Request Schemas ---


class CreateBrandRequest(BaseModel):
    name: str = Field(..., max_length=150)
    description: str | None = None
    logo_url: str | None = Field(None, max_length=500)
    locale: str | None = Field(None, max_length=10)


class TranslateBrandRequest(BaseModel):
    locale: str = Field(..., max_length=10)
    name: str = Field(..., max_length=150)
    description: str | None = None
    logo_url: str | None = Field(None, max_length=500)


class CreateAttributeRequest(BaseModel):
    kind: str = Field(..., max_length=20)
    name: str = Field(..., max_length=150)
    description: str | None = None
    locale: str | None = Field(None, max_length=10)


class TranslateAttributeRequest(BaseModel):
    locale: str = Field(..., max_length=10)
    name: str = Field(..., max_length=150)
    description: str | None = None


# --- Wishlist Request Schemas ---


class AddToWishlistRequest(BaseModel):
    user_id: str
    product_id: str
