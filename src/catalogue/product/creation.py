"""Product creation — command and handler."""

from protean import handle
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from catalogue.domain import catalogue
from catalogue.product.product import Product


@catalogue.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True, min_value=0.0)
    product_type: String(required=True, max_length=20)
    brand_id: Identifier()
    stock: Integer(default=0)


@catalogue.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        product = Product.create(
            name=command.name,
            description=command.description,
            price=command.price,
            product_type=command.product_type,
            brand_id=command.brand_id,
            stock=command.stock,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)
