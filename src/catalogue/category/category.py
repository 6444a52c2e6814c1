"""Category aggregate root for product categorization."""

import re
from datetime import datetime
from uuid import uuid4

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Integer, String

from catalogue.domain import catalogue


def generate_category_code(name):
    """Readable, collision-resistant code such as ``HOME-KITCHEN-3FA9C2``."""
    slug = re.sub(r"[^A-Za-z0-9]+", "-", name).strip("-").upper()[:30] or "CAT"
    return f"{slug}-{uuid4().hex[:6].upper()}"


@catalogue.aggregate
class Category:
    """A node in the category hierarchy.

    Categories reference their parent by id only. Depth is derived from the
    parent at creation time and never supplied by clients; children are
    never stored and are rebuilt on demand (see catalogue.category.tree).
    """

    name: String(required=True, max_length=100)
    code: String(max_length=50)
    parent_id: Identifier()
    depth: Integer(default=0, min_value=0)
    ordering: Integer(default=0, min_value=0)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @invariant.post
    def name_must_not_be_blank(self):
        if self.name is not None and not self.name.strip():
            raise ValidationError({"name": ["Category name must not be blank"]})

    @invariant.post
    def root_categories_sit_at_depth_zero(self):
        if not self.parent_id and self.depth != 0:
            raise ValidationError({"depth": ["Root categories must have depth 0"]})

    @classmethod
    def create(cls, name, parent=None, ordering=0):
        from catalogue.category.events import CategoryCreated

        now = datetime.now()
        parent_id = parent.id if parent is not None else None
        depth = parent.depth + 1 if parent is not None else 0

        category = cls(
            name=name,
            code=generate_category_code(name),
            parent_id=parent_id,
            depth=depth,
            ordering=ordering,
            created_at=now,
            updated_at=now,
        )
        category.raise_(
            CategoryCreated(
                category_id=category.id,
                name=name,
                code=category.code,
                parent_id=parent_id,
                depth=depth,
                ordering=ordering,
            )
        )
        return category
