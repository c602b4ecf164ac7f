"""Application tests for brand and attribute translations."""

import pytest
from catalogue.attribute.attribute import Attribute
from catalogue.attribute.management import CreateAttribute, TranslateAttribute
from catalogue.brand.brand import Brand
from catalogue.brand.management import CreateBrand, TranslateBrand
from catalogue.localization.locale import localizations_of, repository_fetcher, resolve
from protean import current_domain
from protean.exceptions import ValidationError


def _create_brand(name="Sunsight", locale=None):
    return current_domain.process(CreateBrand(name=name, locale=locale), asynchronous=False)


def _translate_brand(brand_id, locale, name):
    return current_domain.process(TranslateBrand(brand_id=brand_id, locale=locale, name=name), asynchronous=False)


class TestBrandTranslation:
    def test_default_locale_is_english(self):
        brand = current_domain.repository_for(Brand).get(_create_brand())
        assert brand.locale == "en"
        assert localizations_of(brand) == []

    def test_translation_linked_both_ways(self):
        source_id = _create_brand()
        french_id = _translate_brand(source_id, "fr", "Vuesoleil")

        repo = current_domain.repository_for(Brand)
        assert localizations_of(repo.get(source_id)) == [{"id": french_id, "locale": "fr"}]
        assert localizations_of(repo.get(french_id)) == [{"id": source_id, "locale": "en"}]

    def test_third_locale_links_all_siblings(self):
        source_id = _create_brand()
        french_id = _translate_brand(source_id, "fr", "Vuesoleil")
        german_id = _translate_brand(french_id, "de", "Sonnensicht")

        repo = current_domain.repository_for(Brand)
        assert {e["locale"] for e in localizations_of(repo.get(source_id))} == {"fr", "de"}
        assert {e["locale"] for e in localizations_of(repo.get(german_id))} == {"en", "fr"}

    def test_duplicate_locale_rejected(self):
        source_id = _create_brand()
        _translate_brand(source_id, "fr", "Vuesoleil")
        with pytest.raises(ValidationError):
            _translate_brand(source_id, "fr", "Autre")

    def test_resolver_follows_persisted_links(self):
        source_id = _create_brand()
        french_id = _translate_brand(source_id, "fr", "Vuesoleil")

        fetch = repository_fetcher(Brand)
        assert str(resolve(fetch(source_id), "fr", fetch).id) == french_id
        assert str(resolve(fetch(source_id), "es", fetch).id) == source_id


class TestAttributeTranslation:
    def test_translation_keeps_kind(self):
        source_id = current_domain.process(CreateAttribute(kind="LensCoating", name="Anti-glare"), asynchronous=False)
        french_id = current_domain.process(
            TranslateAttribute(attribute_id=source_id, locale="fr", name="Antireflet"),
            asynchronous=False,
        )

        french = current_domain.repository_for(Attribute).get(french_id)
        assert french.kind == "LensCoating"
        assert french.locale == "fr"

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            current_domain.process(CreateAttribute(kind="FrameColour", name="Red"), asynchronous=False)
