"""FastAPI endpoints for the Catalogue domain.

Writes go through domain commands; reads use the read helpers next to each
aggregate. Every endpoint answers with the standard response envelope.
"""

from fastapi import APIRouter
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from catalogue.api.schemas import (
    AddToWishlistRequest,
    CreateAttributeRequest,
    CreateBrandRequest,
    CreateProductRequest,
    EditReviewRequest,
    SubmitReviewRequest,
    TranslateAttributeRequest,
    TranslateBrandRequest,
    UpdateProductDetailsRequest,
)
from catalogue.attribute.attribute import Attribute, AttributeKind
from catalogue.attribute.management import CreateAttribute, TranslateAttribute
from catalogue.brand.brand import Brand
from catalogue.brand.management import CreateBrand, TranslateBrand
from catalogue.localization.locale import DEFAULT_LOCALE, repository_fetcher, resolve
from catalogue.product.creation import CreateProduct
from catalogue.product.details import UpdateProductDetails
from catalogue.product.reading import list_products, product_detail
from catalogue.review.editing import EditReview
from catalogue.review.reading import list_reviews, review_detail
from catalogue.review.removal import DeleteReview
from catalogue.review.submission import SubmitReview
from catalogue.wishlist.management import AddToWishlist, ClearWishlist, RemoveFromWishlist
from catalogue.wishlist.reading import wishlist_detail
from shared.api import respond
from shared.pagination import fetch_all

product_router = APIRouter(prefix="/products", tags=["products"])
review_router = APIRouter(prefix="/reviews", tags=["reviews"])
brand_router = APIRouter(prefix="/brands", tags=["brands"])
attribute_router = APIRouter(prefix="/attributes", tags=["attributes"])
wishlist_router = APIRouter(prefix="/wishlist", tags=["wishlist"])


# --- Product endpoints ---


@product_router.post("", status_code=201)
async def create_product(body: CreateProductRequest):
    command = CreateProduct(**body.model_dump())
    product_id = current_domain.process(command, asynchronous=False)
    return respond("Product created successfully.", product_detail(product_id), status_code=201)


@product_router.put("/{product_id}")
async def update_product_details(product_id: str, body: UpdateProductDetailsRequest):
    command = UpdateProductDetails(product_id=product_id, **body.model_dump(exclude_none=True))
    current_domain.process(command, asynchronous=False)
    return respond("Product updated successfully.", product_detail(product_id))


@product_router.get("")
async def get_products(
    product_type: str | None = None,
    locale: str | None = None,
    page: int | None = None,
    limit: int | None = None,
):
    products, meta = list_products(product_type=product_type, locale=locale, page=page, limit=limit)
    return respond("Products retrieved successfully.", products, meta=meta)


@product_router.get("/{product_id}")
async def get_product(product_id: str, locale: str | None = None):
    return respond("Product retrieved successfully.", product_detail(product_id, locale))


# --- Review endpoints ---


@review_router.post("", status_code=201)
async def submit_review(body: SubmitReviewRequest):
    command = SubmitReview(**body.model_dump())
    review_id = current_domain.process(command, asynchronous=False)
    return respond("Review created successfully.", review_detail(review_id), status_code=201)


@review_router.get("")
async def get_reviews(
    product_id: str | None = None,
    user_id: str | None = None,
    page: int | None = None,
    limit: int | None = None,
):
    reviews, meta = list_reviews(product_id=product_id, user_id=user_id, page=page, limit=limit)
    return respond("Reviews retrieved successfully.", reviews, meta=meta)


@review_router.get("/{review_id}")
async def get_review(review_id: str):
    return respond("Review retrieved successfully.", review_detail(review_id))


@review_router.put("/{review_id}")
async def edit_review(review_id: str, body: EditReviewRequest):
    changes = body.model_dump(exclude_unset=True)
    # An explicit null clears the comment; an omitted comment is left alone
    clear_comment = "comment" in changes and changes["comment"] is None
    command = EditReview(
        review_id=review_id,
        clear_comment=clear_comment,
        **{field: value for field, value in changes.items() if value is not None},
    )
    current_domain.process(command, asynchronous=False)
    return respond("Review updated successfully.", review_detail(review_id))


@review_router.delete("/{review_id}")
async def delete_review(review_id: str, user_id: str):
    current_domain.process(DeleteReview(review_id=review_id, user_id=user_id), asynchronous=False)
    return respond("Review deleted successfully.")


# --- Brand endpoints ---


@brand_router.post("", status_code=201)
async def create_brand(body: CreateBrandRequest):
    brand_id = current_domain.process(CreateBrand(**body.model_dump(exclude_none=True)), asynchronous=False)
    brand = current_domain.repository_for(Brand).get(brand_id)
    return respond("Brand created successfully.", brand.to_dict(), status_code=201)


@brand_router.post("/{brand_id}/translations", status_code=201)
async def translate_brand(brand_id: str, body: TranslateBrandRequest):
    command = TranslateBrand(brand_id=brand_id, **body.model_dump(exclude_none=True))
    translation_id = current_domain.process(command, asynchronous=False)
    brand = current_domain.repository_for(Brand).get(translation_id)
    return respond("Brand translation created successfully.", brand.to_dict(), status_code=201)


@brand_router.get("")
async def get_brands(locale: str = DEFAULT_LOCALE):
    query = current_domain.repository_for(Brand)._dao.query.filter(locale=locale).order_by("name")
    brands = fetch_all(query)
    if not brands:
        raise ObjectNotFoundError("No brands found for the specified locale.")
    return respond("Brands retrieved successfully.", [brand.to_dict() for brand in brands])


@brand_router.get("/{brand_id}")
async def get_brand(brand_id: str, locale: str | None = None):
    fetch = repository_fetcher(Brand)
    brand = resolve(fetch(brand_id), locale, fetch)
    return respond("Brand retrieved successfully.", brand.to_dict())


# --- Attribute endpoints ---


def _kind(value: str) -> str:
    try:
        return AttributeKind(value).value
    except ValueError:
        raise ValidationError({"kind": [f"Unknown attribute kind '{value}'."]}) from None


@attribute_router.post("", status_code=201)
async def create_attribute(body: CreateAttributeRequest):
    payload = body.model_dump(exclude_none=True)
    payload["kind"] = _kind(body.kind)
    attribute_id = current_domain.process(CreateAttribute(**payload), asynchronous=False)
    attribute = current_domain.repository_for(Attribute).get(attribute_id)
    return respond("Attribute created successfully.", attribute.to_dict(), status_code=201)


@attribute_router.post("/{attribute_id}/translations", status_code=201)
async def translate_attribute(attribute_id: str, body: TranslateAttributeRequest):
    command = TranslateAttribute(attribute_id=attribute_id, **body.model_dump(exclude_none=True))
    translation_id = current_domain.process(command, asynchronous=False)
    attribute = current_domain.repository_for(Attribute).get(translation_id)
    return respond("Attribute translation created successfully.", attribute.to_dict(), status_code=201)


@attribute_router.get("/{kind}")
async def get_attributes(kind: str, locale: str = DEFAULT_LOCALE):
    query = current_domain.repository_for(Attribute)._dao.query.filter(kind=_kind(kind), locale=locale)
    attributes = fetch_all(query.order_by("name"))
    if not attributes:
        raise ObjectNotFoundError(f"No {kind} records found for the specified locale.")
    return respond("Attributes retrieved successfully.", [attribute.to_dict() for attribute in attributes])


@attribute_router.get("/{kind}/{attribute_id}")
async def get_attribute(kind: str, attribute_id: str, locale: str | None = None):
    fetch = repository_fetcher(Attribute)
    attribute = fetch(attribute_id)
    if attribute.kind != _kind(kind):
        raise ObjectNotFoundError(f"No {kind} found with the given ID.")
    return respond("Attribute retrieved successfully.", resolve(attribute, locale, fetch).to_dict())


# --- Wishlist endpoints ---


@wishlist_router.get("")
async def get_wishlist(user_id: str, locale: str | None = None):
    wishlist = wishlist_detail(user_id, locale)
    if not wishlist["products"]:
        return respond("Your wishlist is empty.", wishlist)
    return respond("Wishlist retrieved successfully.", wishlist)


@wishlist_router.post("")
async def add_to_wishlist(body: AddToWishlistRequest):
    if not current_domain.process(AddToWishlist(**body.model_dump()), asynchronous=False):
        return respond("Product is already in your wishlist.", wishlist_detail(body.user_id))
    return respond("Product added to wishlist.", wishlist_detail(body.user_id))


@wishlist_router.delete("/{product_id}")
async def remove_from_wishlist(product_id: str, user_id: str):
    command = RemoveFromWishlist(user_id=user_id, product_id=product_id)
    if not current_domain.process(command, asynchronous=False):
        return respond("Product is not in your wishlist.", wishlist_detail(user_id))
    return respond("Product removed from wishlist.", wishlist_detail(user_id))


@wishlist_router.delete("")
async def clear_wishlist(user_id: str):
    if not current_domain.process(ClearWishlist(user_id=user_id), asynchronous=False):
        return respond("Your wishlist is already empty.")
    return respond("Your wishlist has been cleared.")
