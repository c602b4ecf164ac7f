"""Address book commands and handler."""

from protean.exceptions import ObjectNotFoundError
from protean.fields import Boolean, Identifier, String
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from ordering.address.address import ADDRESS_FIELDS, AddressBook
from ordering.domain import ordering


@ordering.command(part_of="AddressBook")
class AddAddress:
    user_id = Identifier(required=True)
    label = String(max_length=50)
    full_name = String(required=True, max_length=255)
    phone = String(required=True, max_length=20)
    street = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(max_length=100)
    postal_code = String(required=True, max_length=20)
    country = String(required=True, max_length=100)
    is_default = Boolean(default=False)


@ordering.command(part_of="AddressBook")
class UpdateAddress:
    user_id = Identifier(required=True)
    address_id = Identifier(required=True)
    label = String(max_length=50)
    full_name = String(max_length=255)
    phone = String(max_length=20)
    street = String(max_length=255)
    city = String(max_length=100)
    state = String(max_length=100)
    postal_code = String(max_length=20)
    country = String(max_length=100)
    is_default = Boolean()


@ordering.command(part_of="AddressBook")
class RemoveAddress:
    user_id = Identifier(required=True)
    address_id = Identifier(required=True)


@ordering.command(part_of="AddressBook")
class SetDefaultAddress:
    user_id = Identifier(required=True)
    address_id = Identifier(required=True)


def address_book_for(user_id, create=False):
    repo = current_domain.repository_for(AddressBook)
    try:
        return repo.get(str(user_id))
    except ObjectNotFoundError:
        if not create:
            return None
        return AddressBook.open(user_id)


def _owned_book(user_id, action):
    book = address_book_for(user_id)
    if book is None:
        raise ObjectNotFoundError(f"Address not found or you do not have permission to {action}.")
    return book


@ordering.command_handler(part_of=AddressBook)
class AddressBookHandler:
    @handle(AddAddress)
    def add_address(self, command):
        book = address_book_for(command.user_id, create=True)
        details = {field: getattr(command, field) for field in ADDRESS_FIELDS}
        address = book.add_address(is_default=bool(command.is_default), **details)
        current_domain.repository_for(AddressBook).add(book)
        return str(address.id)

    @handle(UpdateAddress)
    def update_address(self, command):
        book = _owned_book(command.user_id, "update it")
        changes = {field: getattr(command, field) for field in ADDRESS_FIELDS if getattr(command, field) is not None}
        address = book.update_address(command.address_id, is_default=command.is_default, **changes)
        current_domain.repository_for(AddressBook).add(book)
        return str(address.id)

    @handle(RemoveAddress)
    def remove_address(self, command):
        book = _owned_book(command.user_id, "delete it")
        book.remove_address(command.address_id)
        current_domain.repository_for(AddressBook).add(book)

    @handle(SetDefaultAddress)
    def set_default_address(self, command):
        book = _owned_book(command.user_id, "set it as default")
        address = book.set_default_address(command.address_id)
        current_domain.repository_for(AddressBook).add(book)
        return str(address.id)
