"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator

AssignableStatus = Literal["ACTIVE", "INACTIVE", "OUT_OF_STOCK"]


def _not_blank(value: str | None) -> str | None:
    if value is not None and not value.strip():
        raise ValueError("must not be blank")
    return value


# --- Category Request Schemas ---


class CreateCategoryRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Phones",
                    "parent_id": "a3c1f0de-6a8e-4c55-9c1b-1b2f0b7d2e10",
                    "ordering": 1,
                }
            ]
        }
    }

    name: str = Field(..., max_length=100)
    parent_id: str | None = None
    ordering: int = Field(0, ge=0)

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, value):
        return _not_blank(value)


# --- Product Request Schemas ---


class OptionRequest(BaseModel):
    name: str = Field(..., max_length=100)
    additional_price: int = Field(0, ge=0)
    ordering: int = Field(0, ge=0)

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, value):
        return _not_blank(value)


class OptionGroupRequest(BaseModel):
    name: str = Field(..., max_length=100)
    ordering: int = Field(0, ge=0)
    options: list[OptionRequest] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, value):
        return _not_blank(value)


class CreateProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Classic T-Shirt",
                    "description": "Premium cotton crew-neck tee.",
                    "price": 19900,
                    "category_id": "a3c1f0de-6a8e-4c55-9c1b-1b2f0b7d2e10",
                    "brand": "Acme Apparel",
                    "thumbnail_image_url": "https://cdn.example.com/tshirt.jpg",
                    "option_groups": [
                        {
                            "name": "Color",
                            "ordering": 0,
                            "options": [{"name": "Black"}, {"name": "White"}],
                        },
                        {
                            "name": "Size",
                            "ordering": 1,
                            "options": [
                                {"name": "M"},
                                {"name": "L"},
                                {"name": "XL", "additional_price": 1000},
                            ],
                        },
                    ],
                }
            ]
        }
    }

    name: str = Field(..., max_length=255)
    description: str | None = None
    price: int = Field(..., ge=0)
    status: AssignableStatus = "ACTIVE"
    category_id: str | None = None
    thumbnail_image_url: str | None = Field(None, max_length=500)
    brand: str | None = Field(None, max_length=100)
    option_groups: list[OptionGroupRequest] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, value):
        return _not_blank(value)

    def option_groups_json(self) -> str:
        return json.dumps([group.model_dump() for group in self.option_groups])


class UpdateProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "price": 500,
                }
            ]
        }
    }

    name: str | None = Field(None, max_length=255)
    description: str | None = None
    price: int | None = Field(None, ge=0)
    status: AssignableStatus | None = None
    category_id: str | None = None
    thumbnail_image_url: str | None = Field(None, max_length=500)
    brand: str | None = Field(None, max_length=100)

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, value):
        return _not_blank(value)


# --- Category Response Schemas ---


class CategoryResponse(BaseModel):
    id: str
    name: str
    code: str | None = None
    parent_id: str | None = None
    depth: int
    ordering: int

    @classmethod
    def from_category(cls, category) -> CategoryResponse:
        return cls(
            id=str(category.id),
            name=category.name,
            code=category.code,
            parent_id=str(category.parent_id) if category.parent_id else None,
            depth=category.depth,
            ordering=category.ordering,
        )


class CategoryTreeNodeResponse(BaseModel):
    id: str
    name: str
    depth: int
    children: list[CategoryTreeNodeResponse] = Field(default_factory=list)

    @classmethod
    def from_node(cls, node) -> CategoryTreeNodeResponse:
        return cls(
            id=node.id,
            name=node.name,
            depth=node.depth,
            children=[cls.from_node(child) for child in node.children],
        )


# --- Product Response Schemas ---


class ProductSummaryResponse(BaseModel):
    id: str
    name: str
    price: int
    status: str
    category_id: str | None = None
    thumbnail_image_url: str | None = None

    @classmethod
    def from_product(cls, product) -> ProductSummaryResponse:
        return cls(
            id=str(product.id),
            name=product.name,
            price=product.price,
            status=product.status,
            category_id=str(product.category_id) if product.category_id else None,
            thumbnail_image_url=product.thumbnail_image_url,
        )


class ProductPageResponse(BaseModel):
    items: list[ProductSummaryResponse]
    page: int
    size: int
    total: int
    total_pages: int

    @classmethod
    def from_page(cls, page) -> ProductPageResponse:
        return cls(
            items=[ProductSummaryResponse.from_product(product) for product in page.items],
            page=page.page,
            size=page.size,
            total=page.total,
            total_pages=page.total_pages,
        )


class OptionResponse(BaseModel):
    id: str
    name: str
    additional_price: int
    ordering: int


class OptionGroupResponse(BaseModel):
    id: str
    name: str
    ordering: int
    options: list[OptionResponse] = Field(default_factory=list)


class SkuResponse(BaseModel):
    sku_id: str
    price: int
    option_values: dict[str, str] = Field(default_factory=dict)
    created_at: datetime | None = None


class ProductDetailResponse(BaseModel):
    id: str
    product_code: str
    name: str
    description: str | None = None
    price: int
    status: str
    category_id: str | None = None
    category_code: str | None = None
    thumbnail_image_url: str | None = None
    brand: str | None = None
    option_groups: list[OptionGroupResponse] = Field(default_factory=list)
    skus: list[SkuResponse] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_product(cls, product) -> ProductDetailResponse:
        return cls(
            id=str(product.id),
            product_code=product.product_code,
            name=product.name,
            description=product.description,
            price=product.price,
            status=product.status,
            category_id=str(product.category_id) if product.category_id else None,
            category_code=product.category_code,
            thumbnail_image_url=product.thumbnail_image_url,
            brand=product.brand,
            option_groups=[
                OptionGroupResponse(
                    id=str(group.id),
                    name=group.name,
                    ordering=group.ordering,
                    options=[
                        OptionResponse(
                            id=str(option.id),
                            name=option.name,
                            additional_price=option.additional_price,
                            ordering=option.ordering,
                        )
                        for option in group.ordered_options()
                    ],
                )
                for group in product.ordered_option_groups()
            ],
            skus=[
                SkuResponse(
                    sku_id=sku.sku_id,
                    price=sku.price,
                    option_values=json.loads(sku.option_values) if sku.option_values else {},
                    created_at=sku.created_at,
                )
                for sku in sorted(product.skus, key=lambda sku: sku.sku_id)
            ],
            created_at=product.created_at,
            updated_at=product.updated_at,
        )
