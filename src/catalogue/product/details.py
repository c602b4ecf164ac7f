"""Product details management — command and handler.

Only descriptive fields, price and stock are accepted here. The rating
fields are owned by the rating aggregator.
"""

from protean import handle
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from catalogue.domain import catalogue
from catalogue.product.product import Product

_DETAIL_FIELDS = ("name", "description", "price", "product_type", "brand_id", "stock")


@catalogue.command(part_of="Product")
class UpdateProductDetails:
    product_id: Identifier(required=True)
    name: String(max_length=255)
    description: Text()
    price: Float(min_value=0.0)
    product_type: String(max_length=20)
    brand_id: Identifier()
    stock: Integer()


@catalogue.command_handler(part_of=Product)
class ManageProductDetailsHandler:
    @handle(UpdateProductDetails)
    def update_details(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        changes = {field: getattr(command, field) for field in _DETAIL_FIELDS if getattr(command, field) is not None}
        product.update_details(**changes)
        repo.add(product)
        return str(product.id)
