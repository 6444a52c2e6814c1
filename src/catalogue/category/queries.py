"""Read side for categories: listings and the full tree."""

from protean.utils.globals import current_domain

from catalogue.category.category import Category
from catalogue.category.tree import build_category_tree


def list_categories(parent_id=None) -> list[Category]:
    """Children of ``parent_id``, or the root categories when it is omitted."""
    repo = current_domain.repository_for(Category)
    if parent_id:
        return repo.children_of(parent_id)
    return repo.roots()


def get_category(category_id) -> Category:
    return current_domain.repository_for(Category).get(category_id)


def get_category_tree():
    """Build the forest from the complete category set."""
    categories = current_domain.repository_for(Category).all_ordered()
    return build_category_tree(categories)
