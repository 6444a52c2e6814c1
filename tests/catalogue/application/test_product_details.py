"""Application tests for partial product updates."""

import pytest
from catalogue.category.management import CreateCategory
from catalogue.product.creation import CreateProduct
from catalogue.product.details import UpdateProduct
from catalogue.product.lifecycle import DeleteProduct
from catalogue.product.product import Product
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain


def _create_product(**overrides):
    defaults = {
        "name": "Desk Lamp",
        "description": "Warm white LED lamp",
        "price": 4500,
        "brand": "Lumen",
        "thumbnail_image_url": "https://cdn.example.com/lamp.jpg",
    }
    defaults.update(overrides)
    return current_domain.process(CreateProduct(**defaults), asynchronous=False)


def _update(product_id, **fields):
    return current_domain.process(UpdateProduct(product_id=product_id, **fields), asynchronous=False)


class TestUpdateProductHandler:
    def test_only_price_changes(self):
        product_id = _create_product()
        repo = current_domain.repository_for(Product)
        before = repo.get(product_id)

        _update(product_id, price=500)

        after = repo.get(product_id)
        assert after.price == 500
        assert after.name == before.name
        assert after.description == before.description
        assert after.status == before.status
        assert after.category_id == before.category_id
        assert after.brand == before.brand
        assert after.thumbnail_image_url == before.thumbnail_image_url
        assert after.product_code == before.product_code

    def test_several_fields(self):
        product_id = _create_product()

        _update(product_id, name="Floor Lamp", status="OUT_OF_STOCK")

        product = current_domain.repository_for(Product).get(product_id)
        assert product.name == "Floor Lamp"
        assert product.status == "OUT_OF_STOCK"
        assert product.price == 4500

    def test_skus_untouched(self):
        product_id = _create_product()
        repo = current_domain.repository_for(Product)
        sku_ids = [sku.sku_id for sku in repo.get(product_id).skus]

        _update(product_id, price=9900)

        product = repo.get(product_id)
        assert [sku.sku_id for sku in product.skus] == sku_ids
        assert product.skus[0].price == 4500

    def test_category_change_resolves_code(self):
        product_id = _create_product()
        category_id = current_domain.process(CreateCategory(name="Lighting"), asynchronous=False)

        _update(product_id, category_id=category_id)

        product = current_domain.repository_for(Product).get(product_id)
        assert product.category_id == category_id
        assert product.category_code.startswith("LIGHTING-")

    def test_unknown_status_rejected(self):
        product_id = _create_product()
        with pytest.raises(ValidationError):
            _update(product_id, status="ARCHIVED")

    def test_status_cannot_be_set_to_deleted(self):
        product_id = _create_product()

        with pytest.raises(ValidationError) as exc:
            _update(product_id, status="DELETED")

        assert "status" in exc.value.messages
        assert current_domain.repository_for(Product).get_live(product_id).status == "ACTIVE"

    def test_unknown_product(self):
        with pytest.raises(ObjectNotFoundError):
            _update("no-such-product", price=1)

    def test_deleted_product_cannot_be_updated(self):
        product_id = _create_product()
        current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)

        with pytest.raises(ObjectNotFoundError):
            _update(product_id, price=1)
