"""Attribute management — creation and translation commands."""

from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from catalogue.attribute.attribute import Attribute
from catalogue.domain import catalogue
from catalogue.localization.locale import link_translation, repository_fetcher


@catalogue.command(part_of="Attribute")
class CreateAttribute:
    kind = String(required=True, max_length=20)
    name = String(required=True, max_length=150)
    description = Text()
    locale = String(max_length=10)


@catalogue.command(part_of="Attribute")
class TranslateAttribute:
    attribute_id = Identifier(required=True)
    locale = String(required=True, max_length=10)
    name = String(required=True, max_length=150)
    description = Text()


@catalogue.command_handler(part_of=Attribute)
class ManageAttributeHandler:
    @handle(CreateAttribute)
    def create_attribute(self, command):
        attribute = Attribute.define(
            kind=command.kind,
            name=command.name,
            description=command.description,
            locale=command.locale,
        )
        current_domain.repository_for(Attribute).add(attribute)
        return str(attribute.id)

    @handle(TranslateAttribute)
    def translate_attribute(self, command):
        repo = current_domain.repository_for(Attribute)
        source = repo.get(str(command.attribute_id))

        # A translation always belongs to the same vocabulary as its source
        translation = Attribute.define(
            kind=source.kind,
            name=command.name,
            description=command.description,
            locale=command.locale,
        )
        siblings = link_translation(source, translation, repository_fetcher(Attribute))

        repo.add(translation)
        for sibling in siblings:
            repo.add(sibling)
        return str(translation.id)
