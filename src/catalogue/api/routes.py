"""FastAPI endpoints for the Catalogue domain."""

from fastapi import APIRouter, Depends, Query, Response
from protean.utils.globals import current_domain

from catalogue.api.schemas import (
    CategoryResponse,
    CategoryTreeNodeResponse,
    CreateCategoryRequest,
    CreateProductRequest,
    ProductDetailResponse,
    ProductPageResponse,
    UpdateProductRequest,
)
from catalogue.api.security import require_admin
from catalogue.category.management import CreateCategory
from catalogue.category.queries import get_category, get_category_tree, list_categories
from catalogue.messaging.publication import publish_product_created
from catalogue.product.creation import CreateProduct
from catalogue.product.details import UpdateProduct
from catalogue.product.lifecycle import DeleteProduct
from catalogue.product.queries import get_product_detail, list_products
from catalogue.product.repository import DEFAULT_SORT

product_router = APIRouter(prefix="/products", tags=["products"])
category_router = APIRouter(prefix="/categories", tags=["categories"])


# --- Category endpoints ---


@category_router.get("", response_model=list[CategoryResponse])
async def list_categories_endpoint(parent_id: str | None = None) -> list[CategoryResponse]:
    return [CategoryResponse.from_category(category) for category in list_categories(parent_id)]


@category_router.get("/tree", response_model=list[CategoryTreeNodeResponse])
async def category_tree() -> list[CategoryTreeNodeResponse]:
    return [CategoryTreeNodeResponse.from_node(node) for node in get_category_tree()]


@category_router.post(
    "",
    status_code=201,
    response_model=CategoryResponse,
    dependencies=[Depends(require_admin)],
)
async def create_category(body: CreateCategoryRequest) -> CategoryResponse:
    command = CreateCategory(
        name=body.name,
        parent_id=body.parent_id,
        ordering=body.ordering,
    )
    category_id = current_domain.process(command, asynchronous=False)
    return CategoryResponse.from_category(get_category(category_id))


# --- Product endpoints ---


@product_router.get("", response_model=ProductPageResponse)
async def list_products_endpoint(
    category_id: str | None = None,
    keyword: str | None = None,
    page: int = Query(0, ge=0),
    size: int = Query(20, ge=1, le=100),
    sort: str = DEFAULT_SORT,
) -> ProductPageResponse:
    result = list_products(category_id=category_id, keyword=keyword, page=page, size=size, sort=sort)
    return ProductPageResponse.from_page(result)


@product_router.get("/{product_id}", response_model=ProductDetailResponse)
async def product_detail(product_id: str) -> ProductDetailResponse:
    return ProductDetailResponse.from_product(get_product_detail(product_id))


@product_router.post(
    "",
    status_code=201,
    response_model=ProductDetailResponse,
    dependencies=[Depends(require_admin)],
)
async def create_product(body: CreateProductRequest) -> ProductDetailResponse:
    command = CreateProduct(
        name=body.name,
        description=body.description,
        price=body.price,
        status=body.status,
        category_id=body.category_id,
        thumbnail_image_url=body.thumbnail_image_url,
        brand=body.brand,
        option_groups=body.option_groups_json(),
    )
    product_id = current_domain.process(command, asynchronous=False)

    # Outside the command's unit of work: a delivery failure keeps the product.
    publish_product_created(product_id)

    return ProductDetailResponse.from_product(get_product_detail(product_id))


@product_router.put(
    "/{product_id}",
    response_model=ProductDetailResponse,
    dependencies=[Depends(require_admin)],
)
async def update_product(product_id: str, body: UpdateProductRequest) -> ProductDetailResponse:
    command = UpdateProduct(
        product_id=product_id,
        name=body.name,
        description=body.description,
        price=body.price,
        status=body.status,
        category_id=body.category_id,
        thumbnail_image_url=body.thumbnail_image_url,
        brand=body.brand,
    )
    current_domain.process(command, asynchronous=False)
    return ProductDetailResponse.from_product(get_product_detail(product_id))


@product_router.delete(
    "/{product_id}",
    status_code=204,
    dependencies=[Depends(require_admin)],
)
async def delete_product(product_id: str) -> Response:
    current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
    return Response(status_code=204)
