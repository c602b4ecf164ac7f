"""Address read helpers, always scoped to the owning user."""

from protean.exceptions import ObjectNotFoundError

from ordering.address.management import address_book_for
from shared.pagination import paginate_list


def address_detail(user_id, address_id) -> dict:
    book = address_book_for(user_id)
    if book is None:
        raise ObjectNotFoundError("Address not found or you do not have permission to access it.")
    return book.find(address_id).to_dict()


def list_addresses(user_id, page=None, limit=None):
    """The user's addresses, newest first."""
    book = address_book_for(user_id)
    addresses = book.newest_first() if book else []
    window, meta = paginate_list(addresses, page, limit)
    return [address.to_dict() for address in window], meta


def shipping_address_from_book(user_id, address_id) -> dict:
    """The saved address as the dict ``Order.place`` expects."""
    book = address_book_for(user_id)
    if book is None:
        raise ObjectNotFoundError("Address not found or you do not have permission to access it.")
    return book.find(address_id).as_shipping_address()
