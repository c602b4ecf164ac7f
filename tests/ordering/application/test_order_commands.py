"""Application tests for PlaceOrder, PlaceOrderFromCart and UpdateOrderStatus."""

import json
from datetime import UTC, datetime

import pytest
from ordering.address.management import AddAddress
from ordering.cart.cart import Cart
from ordering.cart.items import AddToCart
from ordering.order.order import Order
from ordering.order.placement import PlaceOrder, PlaceOrderFromCart
from ordering.order.status import UpdateOrderStatus
from ordering.stock.catalogue_events import CatalogueStockEventHandler
from ordering.stock.stock import StockItem
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError
from shared.events.catalogue import ProductCreated

ADDRESS = {"street": "12 MG Road", "city": "Bengaluru", "postal_code": "560001", "country": "IN"}


def _stock(product_id="prod-1", name="Aviator", price=149.0, stock=10):
    CatalogueStockEventHandler().on_product_created(
        ProductCreated(
            product_id=product_id,
            name=name,
            product_type="Sunglasses",
            price=price,
            stock=stock,
            created_at=datetime.now(UTC),
        )
    )


def _place_order(items=None, **overrides):
    defaults = {
        "user_id": "42",
        "items": json.dumps(items or [{"product_id": "prod-1", "quantity": 1}]),
        "shipping_address": json.dumps(ADDRESS),
        "payment_method": "cod",
    }
    defaults.update(overrides)
    return current_domain.process(PlaceOrder(**defaults), asynchronous=False)


def _update_status(order_id, status, **extra):
    command = UpdateOrderStatus(order_id=order_id, status=status, **extra)
    return current_domain.process(command, asynchronous=False)


def _available(product_id="prod-1"):
    return current_domain.repository_for(StockItem).get(product_id).available


class TestPlaceOrder:
    def test_order_persisted(self):
        _stock()
        order = current_domain.repository_for(Order).get(_place_order())
        assert order.status == "pending"
        assert len(order.items) == 1
        assert order.shipping_address.city == "Bengaluru"

    def test_lines_priced_from_catalogue(self):
        _stock(price=149.0)
        _stock("prod-2", name="Lens wipes", price=4.99)

        order_id = _place_order([{"product_id": "prod-1", "quantity": 2}, {"product_id": "prod-2", "quantity": 3}])

        order = current_domain.repository_for(Order).get(order_id)
        prices = {str(item.product_id): (item.title, item.unit_price) for item in order.items}
        assert prices == {"prod-1": ("Aviator", 149.0), "prod-2": ("Lens wipes", 4.99)}
        assert order.total_amount == 312.97

    def test_client_price_ignored(self):
        _stock(price=149.0)
        order_id = _place_order([{"product_id": "prod-1", "quantity": 1, "unit_price": 0.01}])
        assert current_domain.repository_for(Order).get(order_id).total_amount == 149.0

    def test_stock_reserved(self):
        _stock(stock=5)
        _place_order([{"product_id": "prod-1", "quantity": 2}])
        assert _available() == 3

    def test_repeated_product_lines_merged(self):
        _stock(stock=5)
        order_id = _place_order([{"product_id": "prod-1", "quantity": 2}, {"product_id": "prod-1", "quantity": 1}])

        order = current_domain.repository_for(Order).get(order_id)
        assert [(str(item.product_id), item.quantity) for item in order.items] == [("prod-1", 3)]
        assert _available() == 2

    def test_insufficient_stock_rejected(self):
        _stock(stock=1)
        with pytest.raises(ValidationError) as exc:
            _place_order([{"product_id": "prod-1", "quantity": 2}])

        assert exc.value.messages["items"] == [
            'Product "Aviator" is out of stock or insufficient quantity (Available: 1, Requested: 2).'
        ]
        assert _available() == 1
        assert current_domain.repository_for(Order)._dao.query.all().total == 0

    def test_last_unit_cannot_be_sold_twice(self):
        _stock(stock=1)
        _place_order()
        with pytest.raises(ValidationError):
            _place_order()

    def test_unknown_product_rejected(self):
        with pytest.raises(ObjectNotFoundError):
            _place_order([{"product_id": "missing", "quantity": 1}])

    def test_bad_address_rejected(self):
        _stock()
        with pytest.raises(ValidationError):
            _place_order(shipping_address=json.dumps({"city": "Pune"}))


class TestPlaceOrderFromCart:
    def _fill_cart(self, *lines):
        for product_id, quantity in lines:
            current_domain.process(
                AddToCart(user_id="42", product_id=product_id, quantity=quantity), asynchronous=False
            )

    def _checkout(self, **overrides):
        defaults = {"user_id": "42", "shipping_address": json.dumps(ADDRESS), "payment_method": "card"}
        defaults.update(overrides)
        return current_domain.process(PlaceOrderFromCart(**defaults), asynchronous=False)

    def test_cart_lines_become_the_order(self):
        _stock(price=100.0)
        _stock("prod-2", name="Case", price=12.5)
        self._fill_cart(("prod-1", 1), ("prod-2", 2))

        order = current_domain.repository_for(Order).get(self._checkout())

        assert {str(item.product_id): item.quantity for item in order.items} == {"prod-1": 1, "prod-2": 2}
        assert order.total_amount == 125.0

    def test_cart_cleared_after_order(self):
        _stock()
        self._fill_cart(("prod-1", 2))

        self._checkout()

        assert current_domain.repository_for(Cart).get("42").items == []
        assert _available() == 8

    def test_empty_cart_rejected(self):
        with pytest.raises(ValidationError) as exc:
            self._checkout()
        assert exc.value.messages["cart"] == ["Your cart is empty. Cannot create an order."]

    def test_cart_kept_when_stock_runs_short(self):
        _stock(stock=1)
        self._fill_cart(("prod-1", 3))

        with pytest.raises(ValidationError):
            self._checkout()

        assert len(current_domain.repository_for(Cart).get("42").items) == 1

    def test_ships_to_saved_address(self):
        _stock()
        self._fill_cart(("prod-1", 1))
        address_id = current_domain.process(
            AddAddress(
                user_id="42",
                full_name="Asha Rao",
                phone="9845000000",
                street="5 Church Street",
                city="Bengaluru",
                postal_code="560001",
                country="IN",
            ),
            asynchronous=False,
        )

        order = current_domain.repository_for(Order).get(self._checkout(shipping_address=None, address_id=address_id))

        assert order.shipping_address.street == "5 Church Street"
        assert order.shipping_address.full_name == "Asha Rao"

    def test_missing_address_rejected(self):
        _stock()
        self._fill_cart(("prod-1", 1))
        with pytest.raises(ValidationError):
            self._checkout(shipping_address=None)


class TestUpdateOrderStatus:
    def test_timestamps_survive_persistence(self):
        _stock()
        order_id = _place_order()
        _update_status(order_id, "shipped", tracking_id="TRK-9")
        shipped_at = current_domain.repository_for(Order).get(order_id).shipped_at

        _update_status(order_id, "delivered")

        order = current_domain.repository_for(Order).get(order_id)
        assert order.status == "delivered"
        assert order.shipped_at == shipped_at
        assert order.delivered_at is not None
        assert order.tracking_id == "TRK-9"

    def test_repeated_status_leaves_order_untouched(self):
        _stock()
        order_id = _place_order()
        _update_status(order_id, "cancelled")
        cancelled_at = current_domain.repository_for(Order).get(order_id).cancelled_at

        _update_status(order_id, "cancelled")

        assert current_domain.repository_for(Order).get(order_id).cancelled_at == cancelled_at

    def test_cancelled_order_can_be_shipped(self):
        _stock()
        order_id = _place_order()
        _update_status(order_id, "cancelled")

        _update_status(order_id, "shipped")

        order = current_domain.repository_for(Order).get(order_id)
        assert order.status == "shipped"
        assert order.cancelled_at is not None
        assert order.shipped_at is not None

    def test_unknown_status_rejected(self):
        _stock()
        order_id = _place_order()
        with pytest.raises(ValidationError):
            _update_status(order_id, "lost")

    def test_unknown_order(self):
        with pytest.raises(ObjectNotFoundError):
            _update_status("missing", "shipped")
