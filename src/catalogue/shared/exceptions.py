"""Catalogue errors that have no counterpart in protean.exceptions.

Validation and not-found conditions use Protean's own ValidationError and
ObjectNotFoundError. The API layer translates all of them into HTTP
responses (see catalogue.api.errors).
"""

from __future__ import annotations


class CatalogueError(Exception):
    """Base class for catalogue-specific failures."""


class SkuConflictError(CatalogueError):
    """One or more generated SKU ids already exist in the store."""

    def __init__(self, sku_ids):
        self.sku_ids = sorted(sku_ids)
        super().__init__(f"SKU id already exists: {', '.join(self.sku_ids)}")


class EventPublicationError(CatalogueError):
    """Integration events could not be delivered.

    The product has already been persisted when this is raised.
    """

    def __init__(self, product_id, reason):
        self.product_id = str(product_id)
        self.reason = reason
        super().__init__(f"Failed to publish events for product {self.product_id}: {reason}")


class CategoryTreeIntegrityError(CatalogueError):
    """Categories reference parents that are not part of the category set."""

    def __init__(self, orphan_ids):
        self.orphan_ids = list(orphan_ids)
        super().__init__(f"Categories reference missing parents: {', '.join(self.orphan_ids)}")
