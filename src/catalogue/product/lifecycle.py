"""Product lifecycle management: delete command and handler."""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from catalogue.domain import catalogue
from catalogue.product.product import Product

logger = structlog.get_logger(__name__)


@catalogue.command(part_of="Product")
class DeleteProduct:
    product_id: Identifier(required=True)


@catalogue.command_handler(part_of=Product)
class ManageLifecycleHandler:
    @handle(DeleteProduct)
    def delete_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get_live(command.product_id)
        product.delete()
        repo.add(product)
        logger.info("Product soft deleted", product_id=str(product.id))
