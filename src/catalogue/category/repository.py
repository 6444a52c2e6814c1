"""Repository for the Category aggregate."""

from catalogue.category.category import Category
from catalogue.domain import catalogue
from catalogue.utils.db import fetch_all


def _by_ordering(categories):
    return sorted(categories, key=lambda category: (category.depth, category.ordering))


@catalogue.repository(part_of=Category)
class CategoryRepository:
    """Category store.

    On top of the standard ``get``/``add``, exposes the lookups the read
    side needs. Every list comes back sorted by depth, then ordering.
    """

    def children_of(self, parent_id: str) -> list[Category]:
        """Direct children of ``parent_id``."""
        return _by_ordering(fetch_all(self._dao.query.filter(parent_id=parent_id)))

    def roots(self) -> list[Category]:
        """Categories without a parent."""
        return [category for category in self.all_ordered() if not category.parent_id]

    def at_depth(self, depth: int) -> list[Category]:
        return _by_ordering(fetch_all(self._dao.query.filter(depth=depth)))

    def all_ordered(self) -> list[Category]:
        """The complete category set, depth ascending then ordering ascending."""
        return _by_ordering(fetch_all(self._dao.query))
