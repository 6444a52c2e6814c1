"""Domain events for the Product aggregate.

These stay inside the catalogue. Outbound integration messages are built
separately by catalogue.messaging.
"""

from protean.fields import DateTime, Identifier, Integer, String

from catalogue.domain import catalogue


@catalogue.event(part_of="Product")
class ProductCreated:
    """A product was assembled with its option groups."""

    __version__ = 1

    product_id: Identifier(required=True)
    product_code: String(required=True)
    name: String(required=True)
    price: Integer(required=True)
    status: String(required=True)
    category_id: Identifier()
    option_group_count: Integer(default=0)
    created_at: DateTime(required=True)


@catalogue.event(part_of="Product")
class ProductUpdated:
    """One or more product fields were overwritten."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    price: Integer(required=True)
    status: String(required=True)
    category_id: Identifier()
    updated_at: DateTime(required=True)


@catalogue.event(part_of="Product")
class ProductDeleted:
    """A product was soft deleted."""

    __version__ = 1

    product_id: Identifier(required=True)
    deleted_at: DateTime(required=True)
