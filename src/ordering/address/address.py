"""AddressBook aggregate — the saved delivery addresses of one user.

At most one address is the default. The first address saved becomes the
default automatically, and the default address cannot be deleted until
another one takes its place.
"""

from datetime import UTC, datetime

from protean import atomic_change, invariant
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Boolean, DateTime, HasMany, String

from ordering.address.events import AddressAdded, AddressRemoved, AddressUpdated, DefaultAddressChanged
from ordering.domain import ordering

ADDRESS_FIELDS = ("label", "full_name", "phone", "street", "city", "state", "postal_code", "country")

# Fields a ShippingAddress is built from
_SHIPPING_FIELDS = ("full_name", "phone", "street", "city", "state", "postal_code", "country")


@ordering.entity(part_of="AddressBook")
class Address:
    label = String(max_length=50)
    full_name = String(required=True, max_length=255)
    phone = String(required=True, max_length=20)
    street = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(max_length=100)
    postal_code = String(required=True, max_length=20)
    country = String(required=True, max_length=100)
    is_default = Boolean(default=False)
    created_at = DateTime()
    updated_at = DateTime()

    def to_dict(self):
        data = {field: getattr(self, field) for field in ADDRESS_FIELDS}
        data.update(
            id=str(self.id),
            is_default=bool(self.is_default),
            created_at=self.created_at,
            updated_at=self.updated_at,
        )
        return data

    def as_shipping_address(self):
        return {field: getattr(self, field) for field in _SHIPPING_FIELDS if getattr(self, field) is not None}


@ordering.aggregate
class AddressBook:
    user_id = String(identifier=True, max_length=255)
    addresses = HasMany(Address)

    @invariant.post
    def at_most_one_default(self):
        if sum(1 for address in self.addresses if address.is_default) > 1:
            raise ValidationError({"is_default": ["Only one address can be the default"]})

    @classmethod
    def open(cls, user_id):
        return cls(user_id=str(user_id))

    def find(self, address_id, action="access it"):
        address = next((a for a in self.addresses if str(a.id) == str(address_id)), None)
        if address is None:
            raise ObjectNotFoundError(f"Address not found or you do not have permission to {action}.")
        return address

    def _unset_default(self):
        previous = None
        for address in self.addresses:
            if address.is_default:
                previous = address
                address.is_default = False
        return previous

    def add_address(self, is_default=False, **details):
        now = datetime.now(UTC)
        # First address is always default
        if not self.addresses:
            is_default = True

        with atomic_change(self):
            if is_default:
                self._unset_default()
            address = Address(is_default=bool(is_default), created_at=now, updated_at=now, **details)
            self.add_addresses(address)

        self.raise_(
            AddressAdded(
                user_id=self.user_id,
                address_id=str(address.id),
                label=address.label,
                city=address.city,
                country=address.country,
                is_default=address.is_default,
                added_at=now,
            )
        )
        return address

    def update_address(self, address_id, is_default=None, **changes):
        address = self.find(address_id, "update it")
        now = datetime.now(UTC)

        with atomic_change(self):
            for field, value in changes.items():
                setattr(address, field, value)
            if is_default is True and not address.is_default:
                self._unset_default()
                address.is_default = True
            elif is_default is False:
                address.is_default = False
            address.updated_at = now

        self.raise_(AddressUpdated(user_id=self.user_id, address_id=str(address.id), updated_at=now))
        return address

    def remove_address(self, address_id):
        address = self.find(address_id, "delete it")
        if address.is_default:
            raise ValidationError(
                {
                    "address": [
                        "Cannot delete the default address. Please set another address as default first, "
                        "or update this address to be non-default."
                    ]
                }
            )

        self.remove_addresses(address)
        self.raise_(AddressRemoved(user_id=self.user_id, address_id=str(address_id), removed_at=datetime.now(UTC)))

    def set_default_address(self, address_id):
        address = self.find(address_id, "set it as default")
        now = datetime.now(UTC)

        with atomic_change(self):
            previous = self._unset_default()
            address.is_default = True
            address.updated_at = now

        self.raise_(
            DefaultAddressChanged(
                user_id=self.user_id,
                address_id=str(address.id),
                previous_default_address_id=str(previous.id) if previous else None,
                changed_at=now,
            )
        )
        return address

    def default_address(self):
        return next((a for a in self.addresses if a.is_default), None)

    def newest_first(self):
        return sorted(self.addresses, key=lambda a: a.created_at, reverse=True)
