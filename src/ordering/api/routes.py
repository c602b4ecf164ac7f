"""FastAPI routes for the Ordering domain — orders, cart and addresses."""

import json

from fastapi import APIRouter
from protean.utils.globals import current_domain

from ordering.address.management import AddAddress, RemoveAddress, SetDefaultAddress, UpdateAddress
from ordering.address.reading import address_detail, list_addresses
from ordering.api.schemas import (
    AddAddressRequest,
    AddToCartRequest,
    ClearCartRequest,
    PlaceOrderFromCartRequest,
    PlaceOrderRequest,
    SetDefaultAddressRequest,
    UpdateAddressRequest,
    UpdateOrderStatusRequest,
)
from ordering.cart.items import AddToCart, ClearCart, RemoveFromCart
from ordering.cart.reading import cart_detail
from ordering.order.placement import PlaceOrder, PlaceOrderFromCart
from ordering.order.reading import list_orders, order_detail
from ordering.order.status import UpdateOrderStatus
from shared.api import respond

router = APIRouter(prefix="/orders", tags=["orders"])
cart_router = APIRouter(prefix="/cart", tags=["cart"])
address_router = APIRouter(prefix="/addresses", tags=["addresses"])


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
@router.post("", status_code=201)
async def place_order(body: PlaceOrderRequest):
    command = PlaceOrder(
        user_id=body.user_id,
        items=json.dumps([item.model_dump() for item in body.items]),
        shipping_address=json.dumps(body.shipping_address.model_dump(exclude_none=True)),
        payment_method=body.payment_method,
        order_number=body.order_number,
    )
    order_id = current_domain.process(command, asynchronous=False)
    return respond("Order placed successfully.", order_detail(order_id), status_code=201)


@router.post("/checkout", status_code=201)
async def place_order_from_cart(body: PlaceOrderFromCartRequest):
    address = body.shipping_address
    command = PlaceOrderFromCart(
        user_id=body.user_id,
        shipping_address=json.dumps(address.model_dump(exclude_none=True)) if address else None,
        address_id=body.address_id,
        payment_method=body.payment_method,
        order_number=body.order_number,
    )
    order_id = current_domain.process(command, asynchronous=False)
    return respond(
        "Order created successfully from your cart and cart cleared.", order_detail(order_id), status_code=201
    )


@router.get("")
async def get_orders(user_id: str | None = None, page: int | None = None, limit: int | None = None):
    orders, meta = list_orders(user_id=user_id, page=page, limit=limit)
    return respond("Orders retrieved successfully.", orders, meta=meta)


@router.get("/{order_id}")
async def get_order(order_id: str):
    return respond("Order retrieved successfully.", order_detail(order_id))


@router.put("/{order_id}/status")
async def update_order_status(order_id: str, body: UpdateOrderStatusRequest):
    command = UpdateOrderStatus(order_id=order_id, status=body.status, tracking_id=body.tracking_id)
    current_domain.process(command, asynchronous=False)
    return respond("Order status updated successfully.", order_detail(order_id))


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
@cart_router.get("")
async def get_my_cart(user_id: str):
    cart = cart_detail(user_id)
    if cart is None:
        return respond("User does not have a cart yet.")
    return respond("Cart retrieved successfully", cart)


@cart_router.post("/items")
async def add_to_cart(body: AddToCartRequest):
    line = current_domain.process(AddToCart(**body.model_dump()), asynchronous=False)
    return respond("Product added to cart.", line)


@cart_router.delete("/items/{product_id}")
async def remove_from_cart(product_id: str, user_id: str, decrement: bool = False):
    command = RemoveFromCart(user_id=user_id, product_id=product_id, decrement=decrement)
    line = current_domain.process(command, asynchronous=False)
    if line is None:
        return respond("Product removed from cart.")
    return respond("Product quantity decreased in cart.", line)


@cart_router.post("/clear")
async def clear_cart(body: ClearCartRequest):
    if not current_domain.process(ClearCart(user_id=body.user_id), asynchronous=False):
        return respond("Cart is already empty for this user.")
    return respond("Cart cleared successfully.")


# ---------------------------------------------------------------------------
# Addresses
# ---------------------------------------------------------------------------
@address_router.post("", status_code=201)
async def add_address(body: AddAddressRequest):
    address_id = current_domain.process(AddAddress(**body.model_dump(exclude_none=True)), asynchronous=False)
    return respond("Address created successfully.", address_detail(body.user_id, address_id), status_code=201)


@address_router.get("")
async def get_addresses(user_id: str, page: int | None = None, limit: int | None = None):
    addresses, meta = list_addresses(user_id, page=page, limit=limit)
    return respond("Addresses retrieved successfully.", addresses, meta=meta)


@address_router.get("/{address_id}")
async def get_address(address_id: str, user_id: str):
    return respond("Address retrieved successfully.", address_detail(user_id, address_id))


@address_router.put("/setDefault/{address_id}")
async def set_default_address(address_id: str, body: SetDefaultAddressRequest):
    command = SetDefaultAddress(user_id=body.user_id, address_id=address_id)
    current_domain.process(command, asynchronous=False)
    return respond("Address set as default successfully.", address_detail(body.user_id, address_id))


@address_router.put("/{address_id}")
async def update_address(address_id: str, body: UpdateAddressRequest):
    command = UpdateAddress(address_id=address_id, **body.model_dump(exclude_none=True))
    current_domain.process(command, asynchronous=False)
    return respond("Address updated successfully.", address_detail(body.user_id, address_id))


@address_router.delete("/{address_id}")
async def delete_address(address_id: str, user_id: str):
    current_domain.process(RemoveAddress(user_id=user_id, address_id=address_id), asynchronous=False)
    return respond("Address deleted successfully.")
