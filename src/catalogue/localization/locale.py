"""Locale resolution for localized catalogue records.

A localized record (a brand, a frame shape, a lens coating ...) exists once
per locale. Each record lists its siblings in ``localizations`` as
``[{"id": ..., "locale": ...}]`` and never embeds them. Callers hold the
default-locale record and ask for a locale; ``resolve`` follows the link
when one exists and otherwise falls back to the record it was given.

The resolver works on anything that exposes ``locale`` and
``localizations``, whether an aggregate or a plain dict, and fetches
siblings through a caller-supplied callable.
"""

import json
import os
from collections.abc import Callable
from typing import Any

import structlog
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

logger = structlog.get_logger(__name__)

DEFAULT_LOCALE = os.getenv("DEFAULT_LOCALE", "en")

Fetch = Callable[[Any], Any]


def _field(entity, name):
    if isinstance(entity, dict):
        return entity.get(name)
    return getattr(entity, name, None)


def locale_of(entity) -> str | None:
    return _field(entity, "locale")


def localizations_of(entity) -> list[dict]:
    """Sibling links of ``entity``; stored either as a list or as JSON text."""
    raw = _field(entity, "localizations")
    if not raw:
        return []
    if isinstance(raw, str):
        raw = json.loads(raw)
    return [dict(entry) for entry in raw]


def resolve(entity, requested_locale: str | None, fetch: Fetch, default_locale: str | None = None):
    """Return the variant of ``entity`` for ``requested_locale``.

    Falls back to ``entity`` itself when no locale is requested, when the
    default (or the entity's own) locale is requested, when no sibling
    carries that locale, or when the linked sibling cannot be fetched.
    """
    default_locale = default_locale or DEFAULT_LOCALE
    if entity is None or not requested_locale:
        return entity
    if requested_locale in (default_locale, locale_of(entity)):
        return entity

    match = next(
        (entry for entry in localizations_of(entity) if entry.get("locale") == requested_locale),
        None,
    )
    if match is None:
        return entity

    try:
        localized = fetch(match["id"])
    except ObjectNotFoundError:
        logger.warning(
            "Localized record missing, falling back",
            localization_id=str(match["id"]),
            locale=requested_locale,
        )
        return entity

    return localized if localized is not None else entity


def repository_fetcher(aggregate_cls) -> Fetch:
    """Build a ``fetch`` callable that loads ``aggregate_cls`` by id."""

    def fetch(identifier):
        return current_domain.repository_for(aggregate_cls).get(str(identifier))

    return fetch


def add_localization(entity, localization_id, locale: str) -> str:
    """Return ``entity``'s localizations as JSON text with one more link."""
    entries = localizations_of(entity)
    entries.append({"id": str(localization_id), "locale": locale})
    return json.dumps(entries)


def link_translation(source, translation, fetch: Fetch) -> list:
    """Link ``translation`` with ``source`` and every existing sibling.

    Both directions are written: each sibling gains a link to the new
    record, and the new record links to all of them. Returns the siblings
    (``source`` first) so the caller can persist them.
    """
    siblings = [source] + [fetch(entry["id"]) for entry in localizations_of(source)]
    taken = {locale_of(sibling) for sibling in siblings}
    if translation.locale in taken:
        raise ValidationError({"locale": [f"A localization for '{translation.locale}' already exists."]})

    for sibling in siblings:
        sibling.localizations = add_localization(sibling, translation.id, translation.locale)
        translation.localizations = add_localization(translation, sibling.id, sibling.locale)

    return siblings
