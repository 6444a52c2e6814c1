"""Outbound integration messages and their mapping from the Product aggregate.

These are the payloads other services consume. They are deliberately
separate from the internal domain events in catalogue.product.events.
"""

import json
from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel, Field

INITIAL_SKU_QUANTITY = 0


class IntegrationMessage(BaseModel):
    """Base class; ``event_type`` names the message on the wire."""

    event_type: ClassVar[str] = ""


class ProductCreatedMessage(IntegrationMessage):
    event_type: ClassVar[str] = "catalog.product.created"

    product_id: str
    product_code: str
    name: str
    description: str | None = None
    price: int
    status: str
    category_id: str | None = None
    category_code: str | None = None
    thumbnail_image_url: str | None = None
    brand: str | None = None
    created_at: datetime | None = None


class SkuCreatedMessage(IntegrationMessage):
    event_type: ClassVar[str] = "catalog.sku.created"

    sku_id: str
    product_id: str
    product_code: str
    price: int
    option_values: dict[str, str] = Field(default_factory=dict)
    initial_quantity: int = INITIAL_SKU_QUANTITY
    created_at: datetime | None = None


def to_product_created_event(product) -> ProductCreatedMessage:
    return ProductCreatedMessage(
        product_id=str(product.id),
        product_code=product.product_code,
        name=product.name,
        description=product.description,
        price=product.price,
        status=product.status,
        category_id=str(product.category_id) if product.category_id else None,
        category_code=product.category_code,
        thumbnail_image_url=product.thumbnail_image_url,
        brand=product.brand,
        created_at=product.created_at,
    )


def to_sku_created_events(product) -> list[SkuCreatedMessage]:
    """One message per SKU, ordered by SKU id."""
    return [
        SkuCreatedMessage(
            sku_id=sku.sku_id,
            product_id=str(product.id),
            product_code=product.product_code,
            price=sku.price,
            option_values=json.loads(sku.option_values) if sku.option_values else {},
            created_at=sku.created_at,
        )
        for sku in sorted(product.skus, key=lambda sku: sku.sku_id)
    ]
