"""Tests for the Cart aggregate."""

import pytest
from ordering.cart.cart import Cart
from ordering.cart.events import CartCleared, CartItemAdded, CartItemRemoved
from protean.exceptions import ObjectNotFoundError


@pytest.fixture()
def cart():
    return Cart.open("42")


class TestAddProduct:
    def test_new_line(self, cart):
        cart.add_product("prod-1", 2)
        assert cart.lines() == [("prod-1", 2)]
        assert isinstance(cart._events[-1], CartItemAdded)

    def test_existing_line_quantity_replaced(self, cart):
        cart.add_product("prod-1", 2)
        cart.add_product("prod-1", 1)
        assert cart.lines() == [("prod-1", 1)]


class TestRemoveProduct:
    def test_decrement_keeps_line(self, cart):
        cart.add_product("prod-1", 3)
        line = cart.remove_product("prod-1", decrement=True)
        assert line.quantity == 2
        assert cart._events[-1].remaining_quantity == 2

    def test_decrement_of_last_unit_removes_line(self, cart):
        cart.add_product("prod-1", 1)
        assert cart.remove_product("prod-1", decrement=True) is None
        assert cart.lines() == []

    def test_remove_drops_whole_line(self, cart):
        cart.add_product("prod-1", 3)
        assert cart.remove_product("prod-1") is None
        assert isinstance(cart._events[-1], CartItemRemoved)
        assert cart._events[-1].remaining_quantity == 0

    def test_missing_line(self, cart):
        with pytest.raises(ObjectNotFoundError, match="Product not found in cart for this user."):
            cart.remove_product("prod-1")


class TestClear:
    def test_clear_counts_lines(self, cart):
        cart.add_product("prod-1", 3)
        cart.add_product("prod-2", 1)
        assert cart.clear() == 2
        assert cart.lines() == []
        assert isinstance(cart._events[-1], CartCleared)

    def test_clearing_empty_cart(self, cart):
        assert cart.clear() == 0
        assert cart._events == []
