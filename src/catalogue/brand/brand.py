"""Brand aggregate — one record per (brand, locale)."""

from datetime import UTC, datetime

from protean.fields import DateTime, String, Text

from catalogue.domain import catalogue
from catalogue.localization.locale import DEFAULT_LOCALE, localizations_of


@catalogue.aggregate
class Brand:
    name = String(required=True, max_length=150)
    description = Text()
    logo_url = String(max_length=500)
    locale = String(required=True, max_length=10, default=DEFAULT_LOCALE)
    localizations = Text(default="[]")  # JSON: [{id, locale}]

    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def register(cls, name, description=None, logo_url=None, locale=None):
        now = datetime.now(UTC)
        return cls(
            name=name,
            description=description,
            logo_url=logo_url,
            locale=locale or DEFAULT_LOCALE,
            localizations="[]",
            created_at=now,
            updated_at=now,
        )

    def to_dict(self):
        return {
            "id": str(self.id),
            "name": self.name,
            "description": self.description,
            "logo_url": self.logo_url,
            "locale": self.locale,
            "localizations": localizations_of(self),
        }
