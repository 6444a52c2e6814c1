"""Product details management: command and handler."""

from protean import handle
from protean.fields import Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from catalogue.domain import catalogue
from catalogue.product.creation import resolve_category_code
from catalogue.product.product import Product


@catalogue.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    name: String(max_length=255)
    description: Text()
    price: Integer(min_value=0)
    status: String(max_length=20)
    category_id: Identifier()
    thumbnail_image_url: String(max_length=500)
    brand: String(max_length=100)


@catalogue.command_handler(part_of=Product)
class ManageProductDetailsHandler:
    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get_live(command.product_id)

        category_code = None
        if command.category_id is not None:
            category_code = resolve_category_code(command.category_id)

        product.update(
            name=command.name,
            description=command.description,
            price=command.price,
            status=command.status,
            category_id=command.category_id,
            category_code=category_code,
            thumbnail_image_url=command.thumbnail_image_url,
            brand=command.brand,
        )
        repo.add(product)
        return str(product.id)
