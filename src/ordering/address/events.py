"""Domain events for the AddressBook aggregate."""

from protean.fields import Boolean, DateTime, Identifier, String

from ordering.domain import ordering


@ordering.event(part_of="AddressBook")
class AddressAdded:
    __version__ = 1

    user_id = Identifier(required=True)
    address_id = Identifier(required=True)
    label = String()
    city = String(required=True)
    country = String(required=True)
    is_default = Boolean(required=True)
    added_at = DateTime(required=True)


@ordering.event(part_of="AddressBook")
class AddressUpdated:
    __version__ = 1

    user_id = Identifier(required=True)
    address_id = Identifier(required=True)
    updated_at = DateTime(required=True)


@ordering.event(part_of="AddressBook")
class AddressRemoved:
    __version__ = 1

    user_id = Identifier(required=True)
    address_id = Identifier(required=True)
    removed_at = DateTime(required=True)


@ordering.event(part_of="AddressBook")
class DefaultAddressChanged:
    """The user picked a different default delivery address."""

    __version__ = 1

    user_id = Identifier(required=True)
    address_id = Identifier(required=True)
    previous_default_address_id = Identifier()
    changed_at = DateTime(required=True)
