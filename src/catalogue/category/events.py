"""Domain events for the Category aggregate."""

from protean.fields import Identifier, Integer, String

from catalogue.domain import catalogue


@catalogue.event(part_of="Category")
class CategoryCreated:
    """A new category was added to the catalogue hierarchy."""

    __version__ = 1

    category_id: Identifier(required=True)
    name: String(required=True)
    code: String(required=True)
    parent_id: Identifier()
    depth: Integer(required=True)
    ordering: Integer(required=True)
