"""Product creation: command and handler."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from catalogue.category.category import Category
from catalogue.domain import catalogue
from catalogue.product.options import get_product_validator, parse_option_groups
from catalogue.product.product import Product, ProductStatus
from catalogue.shared.exceptions import SkuConflictError

logger = structlog.get_logger(__name__)


@catalogue.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=255)
    description: Text()
    price: Integer(required=True, min_value=0)
    status: String(max_length=20)
    category_id: Identifier()
    thumbnail_image_url: String(max_length=500)
    brand: String(max_length=100)
    option_groups: Text()


def resolve_category_code(category_id):
    """Code of the referenced category, or None when it cannot be found.

    The category is optional enrichment: an unknown id is logged and the
    product keeps the id without a code.
    """
    if not category_id:
        return None
    try:
        return current_domain.repository_for(Category).get(category_id).code
    except ObjectNotFoundError:
        logger.warning("Category not found, product stored without category code", category_id=str(category_id))
        return None


@catalogue.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        option_groups = parse_option_groups(command.option_groups)
        get_product_validator().validate(option_groups)

        product = Product.create(
            name=command.name,
            description=command.description,
            price=command.price,
            status=command.status or ProductStatus.ACTIVE.value,
            category_id=command.category_id,
            category_code=resolve_category_code(command.category_id),
            thumbnail_image_url=command.thumbnail_image_url,
            brand=command.brand,
            option_groups=option_groups,
        )
        skus = product.generate_skus()

        repo = current_domain.repository_for(Product)
        conflicts = repo.existing_sku_ids(sku.sku_id for sku in skus)
        if conflicts:
            raise SkuConflictError(conflicts)

        repo.add(product)

        logger.info(
            "Product created",
            product_id=str(product.id),
            product_code=product.product_code,
            sku_count=len(skus),
        )
        return str(product.id)
