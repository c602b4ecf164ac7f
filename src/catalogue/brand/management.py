"""Brand management — creation and translation commands."""

from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from catalogue.brand.brand import Brand
from catalogue.domain import catalogue
from catalogue.localization.locale import link_translation, repository_fetcher


@catalogue.command(part_of="Brand")
class CreateBrand:
    name = String(required=True, max_length=150)
    description = Text()
    logo_url = String(max_length=500)
    locale = String(max_length=10)


@catalogue.command(part_of="Brand")
class TranslateBrand:
    brand_id = Identifier(required=True)
    locale = String(required=True, max_length=10)
    name = String(required=True, max_length=150)
    description = Text()
    logo_url = String(max_length=500)


@catalogue.command_handler(part_of=Brand)
class ManageBrandHandler:
    @handle(CreateBrand)
    def create_brand(self, command):
        brand = Brand.register(
            name=command.name,
            description=command.description,
            logo_url=command.logo_url,
            locale=command.locale,
        )
        current_domain.repository_for(Brand).add(brand)
        return str(brand.id)

    @handle(TranslateBrand)
    def translate_brand(self, command):
        repo = current_domain.repository_for(Brand)
        source = repo.get(str(command.brand_id))

        translation = Brand.register(
            name=command.name,
            description=command.description,
            logo_url=command.logo_url or source.logo_url,
            locale=command.locale,
        )
        siblings = link_translation(source, translation, repository_fetcher(Brand))

        repo.add(translation)
        for sibling in siblings:
            repo.add(sibling)
        return str(translation.id)
