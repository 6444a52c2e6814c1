"""Read side for products: listings and detail."""

from protean.utils.globals import current_domain

from catalogue.product.product import Product, ProductStatus
from catalogue.product.repository import DEFAULT_SORT, ProductPage


def list_products(category_id=None, keyword=None, page=0, size=20, sort=DEFAULT_SORT) -> ProductPage:
    """Page of ACTIVE products, optionally narrowed by category and keyword."""
    return current_domain.repository_for(Product).search(
        category_id=category_id,
        keyword=keyword,
        status=ProductStatus.ACTIVE.value,
        page=page,
        size=size,
        sort=sort,
    )


def get_product_detail(product_id) -> Product:
    """The product with its option groups, options and SKUs.

    Soft-deleted products raise ObjectNotFoundError.
    """
    return current_domain.repository_for(Product).get_live(product_id)
