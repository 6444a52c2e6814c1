"""Product aggregate root with option groups, options and generated SKUs."""

from datetime import datetime
from enum import Enum
from uuid import uuid4

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer, String, Text

from catalogue.domain import catalogue
from catalogue.shared.sku import canonical_option_values, expand_option_combinations, generate_sku_id

DEFAULT_PRODUCT_CODE_PREFIX = "PRD"


class ProductStatus(Enum):
    """Enumeration of product statuses."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    OUT_OF_STOCK = "OUT_OF_STOCK"
    DELETED = "DELETED"


ASSIGNABLE_STATUSES = tuple(status.value for status in ProductStatus if status is not ProductStatus.DELETED)


def _reject_deleted_status(status):
    # Soft delete only goes through Product.delete
    if status == ProductStatus.DELETED.value:
        raise ValidationError({"status": [f"Status must be one of {', '.join(ASSIGNABLE_STATUSES)}"]})


def generate_product_code(category_code=None):
    """Prefix for a product's SKU ids, e.g. ``PHONES-1A2B3C-9F8E7D6C``."""
    prefix = category_code or DEFAULT_PRODUCT_CODE_PREFIX
    return f"{prefix}-{uuid4().hex[:8].upper()}"


@catalogue.entity(part_of="Product")
class ProductOptionGroup:
    """A named axis of variation such as ``Color`` or ``Size``."""

    name: String(required=True, max_length=100)
    ordering: Integer(default=0, min_value=0)
    options: HasMany("ProductOption")

    def ordered_options(self):
        return sorted(self.options, key=lambda option: option.ordering)


@catalogue.entity(part_of=ProductOptionGroup)
class ProductOption:
    """A single choice within an option group, e.g. ``Red`` under ``Color``."""

    name: String(required=True, max_length=100)
    additional_price: Integer(default=0, min_value=0)
    ordering: Integer(default=0, min_value=0)


@catalogue.entity(part_of="Product")
class ProductSku:
    """One purchasable combination of options."""

    sku_id: String(required=True, max_length=255, unique=True)
    price: Integer(required=True, min_value=0)
    option_values: Text()
    created_at: DateTime(default=datetime.now)


@catalogue.aggregate
class Product:
    """Product aggregate root.

    Option groups, their options and the SKUs expanded from them are owned
    by the product and only ever change through its methods.
    """

    product_code: String(required=True, max_length=100)
    name: String(required=True, max_length=255)
    description: Text()
    price: Integer(required=True, min_value=0)
    status: String(choices=ProductStatus, default=ProductStatus.ACTIVE.value)
    category_id: Identifier()
    category_code: String(max_length=50)
    thumbnail_image_url: String(max_length=500)
    brand: String(max_length=100)
    option_groups: HasMany(ProductOptionGroup)
    skus: HasMany(ProductSku)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @invariant.post
    def name_must_not_be_blank(self):
        if self.name is not None and not self.name.strip():
            raise ValidationError({"name": ["Product name must not be blank"]})

    @invariant.post
    def sku_combinations_must_be_unique(self):
        option_values = [sku.option_values for sku in self.skus]
        if len(option_values) != len(set(option_values)):
            raise ValidationError({"skus": ["Each SKU must have a distinct option combination"]})

    @classmethod
    def create(
        cls,
        name,
        price,
        description=None,
        status=None,
        category_id=None,
        category_code=None,
        thumbnail_image_url=None,
        brand=None,
        option_groups=None,
    ):
        """Assemble a product with its option groups and options.

        ``option_groups`` is a list of OptionGroupSpec, already validated.
        SKUs are not expanded here; call ``generate_skus`` afterwards.
        """
        from catalogue.product.events import ProductCreated

        _reject_deleted_status(status)
        now = datetime.now()
        product = cls(
            product_code=generate_product_code(category_code),
            name=name,
            description=description,
            price=price,
            status=status or ProductStatus.ACTIVE.value,
            category_id=category_id,
            category_code=category_code,
            thumbnail_image_url=thumbnail_image_url,
            brand=brand,
            created_at=now,
            updated_at=now,
        )

        for spec in option_groups or []:
            group = ProductOptionGroup(name=spec.name, ordering=spec.ordering)
            product.add_option_groups(group)
            for option_spec in spec.options:
                group.add_options(
                    ProductOption(
                        name=option_spec.name,
                        additional_price=option_spec.additional_price,
                        ordering=option_spec.ordering,
                    )
                )

        product.raise_(
            ProductCreated(
                product_id=product.id,
                product_code=product.product_code,
                name=name,
                price=price,
                status=product.status,
                category_id=category_id,
                option_group_count=len(product.option_groups),
                created_at=now,
            )
        )
        return product

    def ordered_option_groups(self):
        return sorted(self.option_groups, key=lambda group: group.ordering)

    def generate_skus(self):
        """Expand the option groups into SKUs, one per combination.

        A product without option groups gets a single default SKU at the
        base price. SKU price is the base price plus the additional price
        of every selected option.
        """
        if self.skus:
            raise ValidationError({"skus": ["SKUs have already been generated for this product"]})

        axes = [(group, group.ordered_options()) for group in self.ordered_option_groups()]
        now = datetime.now()

        for combination in expand_option_combinations(axes):
            selected = {group.name: option.name for group, option in combination}
            self.add_skus(
                ProductSku(
                    sku_id=generate_sku_id(self.product_code, selected),
                    price=self.price + sum(option.additional_price for _, option in combination),
                    option_values=canonical_option_values(selected),
                    created_at=now,
                )
            )

        return list(self.skus)

    def update(
        self,
        name=None,
        description=None,
        price=None,
        status=None,
        category_id=None,
        category_code=None,
        thumbnail_image_url=None,
        brand=None,
    ):
        """Overwrite only the fields that were supplied."""
        from catalogue.product.events import ProductUpdated

        _reject_deleted_status(status)
        if name is not None:
            self.name = name
        if description is not None:
            self.description = description
        if price is not None:
            self.price = price
        if status is not None:
            self.status = status
        if category_id is not None:
            self.category_id = category_id
            self.category_code = category_code
        if thumbnail_image_url is not None:
            self.thumbnail_image_url = thumbnail_image_url
        if brand is not None:
            self.brand = brand

        self.updated_at = datetime.now()

        self.raise_(
            ProductUpdated(
                product_id=self.id,
                name=self.name,
                price=self.price,
                status=self.status,
                category_id=self.category_id,
                updated_at=self.updated_at,
            )
        )

    def delete(self):
        """Soft delete: the row stays, the status moves to DELETED."""
        from catalogue.product.events import ProductDeleted

        if self.status == ProductStatus.DELETED.value:
            raise ValidationError({"status": ["Product has already been deleted"]})

        self.status = ProductStatus.DELETED.value
        now = datetime.now()
        self.updated_at = now

        self.raise_(
            ProductDeleted(
                product_id=self.id,
                deleted_at=now,
            )
        )
