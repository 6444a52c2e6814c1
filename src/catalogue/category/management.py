"""Category management: commands and handlers."""

import structlog
from protean import handle
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from catalogue.category.category import Category
from catalogue.domain import catalogue

logger = structlog.get_logger(__name__)


@catalogue.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=100)
    parent_id: Identifier()
    ordering: Integer(default=0, min_value=0)


@catalogue.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        repo = current_domain.repository_for(Category)

        parent = None
        if command.parent_id:
            # Raises ObjectNotFoundError for unknown parents
            parent = repo.get(command.parent_id)

        category = Category.create(
            name=command.name,
            parent=parent,
            ordering=command.ordering or 0,
        )
        repo.add(category)

        logger.info(
            "Category created",
            category_id=str(category.id),
            parent_id=str(parent.id) if parent else None,
            depth=category.depth,
        )
        return str(category.id)
