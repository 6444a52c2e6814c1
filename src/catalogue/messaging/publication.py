"""Publication of integration events after a product has been created.

Runs once the create command's unit of work has committed, so a delivery
failure never undoes the write. The failure is logged and raised as
EventPublicationError; consumers must tolerate redelivery of SKU events.
"""

import structlog
from protean.utils.globals import current_domain

from catalogue.messaging import get_publisher
from catalogue.messaging.messages import to_product_created_event, to_sku_created_events
from catalogue.product.product import Product
from catalogue.shared.exceptions import EventPublicationError

logger = structlog.get_logger(__name__)


def publish_product_created(product_id) -> None:
    """Publish product-created, then one SKU-created message per SKU."""
    product = current_domain.repository_for(Product).get(product_id)
    product_event = to_product_created_event(product)
    sku_events = to_sku_created_events(product)

    publisher = get_publisher()
    try:
        publisher.publish(product_event)
        publisher.publish_all(sku_events)
    except Exception as exc:
        logger.error(
            "Failed to publish product events",
            product_id=str(product_id),
            sku_count=len(sku_events),
            error=str(exc),
        )
        raise EventPublicationError(product_id, str(exc)) from exc

    logger.info("Product events published", product_id=str(product_id), sku_count=len(sku_events))
