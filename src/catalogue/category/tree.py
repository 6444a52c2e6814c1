"""Category tree construction.

The hierarchy is stored as flat rows with a parent id. The tree is an
arena keyed by category id, rebuilt on every request and discarded after
serialization.
"""

from dataclasses import dataclass, field

from catalogue.shared.exceptions import CategoryTreeIntegrityError


@dataclass
class CategoryTreeNode:
    id: str
    name: str
    depth: int
    parent_id: str | None = None
    children: list["CategoryTreeNode"] = field(default_factory=list)


def build_category_tree(categories) -> list[CategoryTreeNode]:
    """Turn the full, depth/ordering-sorted category set into a forest.

    Children keep the relative order of the input, and so do the roots.
    A category whose parent is missing from the input means the set is
    incomplete or corrupt, and raises CategoryTreeIntegrityError.
    """
    nodes = {
        str(category.id): CategoryTreeNode(
            id=str(category.id),
            name=category.name,
            depth=category.depth,
            parent_id=str(category.parent_id) if category.parent_id else None,
        )
        for category in categories
    }

    roots = []
    orphans = []
    for node in nodes.values():
        if node.parent_id is None:
            roots.append(node)
            continue

        parent = nodes.get(node.parent_id)
        if parent is None:
            orphans.append(node.id)
            continue
        parent.children.append(node)

    if orphans:
        raise CategoryTreeIntegrityError(orphans)

    return roots
