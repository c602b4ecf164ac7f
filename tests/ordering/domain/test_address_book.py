"""Tests for the AddressBook aggregate and its default-address rule."""

import pytest
from ordering.address.address import AddressBook
from ordering.address.events import DefaultAddressChanged
from protean.exceptions import ObjectNotFoundError, ValidationError

DETAILS = {
    "full_name": "Asha Rao",
    "phone": "9845000000",
    "street": "12 MG Road",
    "city": "Bengaluru",
    "postal_code": "560001",
    "country": "IN",
}


@pytest.fixture()
def book():
    return AddressBook.open("42")


def _defaults(book):
    return [address.label for address in book.addresses if address.is_default]


class TestAddAddress:
    def test_first_address_becomes_default(self, book):
        book.add_address(label="Home", **DETAILS)
        assert _defaults(book) == ["Home"]

    def test_later_address_not_default(self, book):
        book.add_address(label="Home", **DETAILS)
        book.add_address(label="Work", **DETAILS)
        assert _defaults(book) == ["Home"]

    def test_new_default_replaces_old(self, book):
        book.add_address(label="Home", **DETAILS)
        book.add_address(label="Work", is_default=True, **DETAILS)
        assert _defaults(book) == ["Work"]


class TestDefaultAddress:
    def test_set_default(self, book):
        home = book.add_address(label="Home", **DETAILS)
        work = book.add_address(label="Work", **DETAILS)

        book.set_default_address(work.id)

        assert _defaults(book) == ["Work"]
        event = book._events[-1]
        assert isinstance(event, DefaultAddressChanged)
        assert event.previous_default_address_id == str(home.id)

    def test_update_can_take_the_default(self, book):
        book.add_address(label="Home", **DETAILS)
        work = book.add_address(label="Work", **DETAILS)
        book.update_address(work.id, is_default=True, city="Mysuru")
        assert _defaults(book) == ["Work"]
        assert work.city == "Mysuru"

    def test_default_cannot_be_removed(self, book):
        home = book.add_address(label="Home", **DETAILS)
        with pytest.raises(ValidationError):
            book.remove_address(home.id)

    def test_other_address_can_be_removed(self, book):
        book.add_address(label="Home", **DETAILS)
        work = book.add_address(label="Work", **DETAILS)
        book.remove_address(work.id)
        assert [address.label for address in book.addresses] == ["Home"]


class TestLookup:
    def test_unknown_address(self, book):
        with pytest.raises(ObjectNotFoundError, match="permission to update it"):
            book.update_address("missing", city="Pune")

    def test_shipping_address_view(self, book):
        home = book.add_address(label="Home", **DETAILS)
        assert home.as_shipping_address() == DETAILS
