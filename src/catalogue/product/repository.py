"""Repository for the Product aggregate."""

from dataclasses import dataclass, field

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from catalogue.domain import catalogue
from catalogue.product.product import Product, ProductSku, ProductStatus
from catalogue.utils.db import fetch_all

SORTABLE_FIELDS = ("name", "price", "created_at")
DEFAULT_SORT = "created_at,desc"


@dataclass
class ProductPage:
    items: list = field(default_factory=list)
    total: int = 0
    page: int = 0
    size: int = 20

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 0
        return (self.total + self.size - 1) // self.size


def parse_sort(sort: str | None) -> tuple[str, bool]:
    """Read ``"field,dir"`` into ``(field, descending)``."""
    field_name, _, direction = (sort or DEFAULT_SORT).partition(",")
    field_name = field_name.strip() or "created_at"
    direction = (direction.strip() or "asc").lower()

    if field_name not in SORTABLE_FIELDS:
        raise ValidationError({"sort": [f"Cannot sort by '{field_name}'; use one of {', '.join(SORTABLE_FIELDS)}"]})
    if direction not in ("asc", "desc"):
        raise ValidationError({"sort": [f"Sort direction must be 'asc' or 'desc', got '{direction}'"]})

    return field_name, direction == "desc"


def _matches_keyword(product, keyword):
    needle = keyword.lower()
    return needle in (product.name or "").lower() or needle in (product.description or "").lower()


@catalogue.repository(part_of=Product)
class ProductRepository:
    """Product store with the paginated conditional search used by listings."""

    def get_live(self, product_id) -> Product:
        """Load a product that has not been soft deleted.

        Deleted products are reported as missing.
        """
        product = self.get(product_id)
        if product.status == ProductStatus.DELETED.value:
            raise ObjectNotFoundError(f"Product with id {product_id} does not exist")
        return product

    def search(
        self,
        category_id=None,
        keyword=None,
        status=ProductStatus.ACTIVE.value,
        page=0,
        size=20,
        sort=DEFAULT_SORT,
    ) -> ProductPage:
        """Filter by status and optional category, then match the keyword
        against name and description (case-insensitive).
        """
        sort_field, descending = parse_sort(sort)

        filters = {"status": status}
        if category_id:
            filters["category_id"] = category_id
        products = fetch_all(self._dao.query.filter(**filters))

        if keyword and keyword.strip():
            products = [product for product in products if _matches_keyword(product, keyword.strip())]

        products.sort(key=lambda product: getattr(product, sort_field), reverse=descending)

        start = page * size
        return ProductPage(
            items=products[start : start + size],
            total=len(products),
            page=page,
            size=size,
        )

    def existing_sku_ids(self, sku_ids) -> set[str]:
        """The subset of ``sku_ids`` already persisted by any product."""
        sku_ids = list(sku_ids)
        if not sku_ids:
            return set()
        sku_dao = current_domain.repository_for(ProductSku)._dao
        return {sku.sku_id for sku in fetch_all(sku_dao.query.filter(sku_id__in=sku_ids))}
