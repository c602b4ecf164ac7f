"""Attribute aggregate — localized frame and lens vocabularies.

Frame shapes, materials, sizes and weights, and lens types, coatings and
thicknesses share one shape (a name plus an optional description), so they
are stored as one aggregate distinguished by ``kind``.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, String, Text

from catalogue.domain import catalogue
from catalogue.localization.locale import DEFAULT_LOCALE, localizations_of


class AttributeKind(Enum):
    FRAME_SHAPE = "FrameShape"
    FRAME_MATERIAL = "FrameMaterial"
    FRAME_SIZE = "FrameSize"
    FRAME_WEIGHT = "FrameWeight"
    LENS_TYPE = "LensType"
    LENS_COATING = "LensCoating"
    LENS_THICKNESS = "LensThickness"


@catalogue.aggregate
class Attribute:
    kind = String(choices=AttributeKind, required=True)
    name = String(required=True, max_length=150)
    description = Text()
    locale = String(required=True, max_length=10, default=DEFAULT_LOCALE)
    localizations = Text(default="[]")  # JSON: [{id, locale}]

    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def define(cls, kind, name, description=None, locale=None):
        now = datetime.now(UTC)
        return cls(
            kind=kind,
            name=name,
            description=description,
            locale=locale or DEFAULT_LOCALE,
            localizations="[]",
            created_at=now,
            updated_at=now,
        )

    def to_dict(self):
        return {
            "id": str(self.id),
            "kind": self.kind,
            "name": self.name,
            "description": self.description,
            "locale": self.locale,
            "localizations": localizations_of(self),
        }
