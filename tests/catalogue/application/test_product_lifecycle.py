"""Application tests for soft deletion."""

import pytest
from catalogue.product.creation import CreateProduct
from catalogue.product.lifecycle import DeleteProduct
from catalogue.product.product import Product
from catalogue.product.queries import get_product_detail, list_products
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain


def _create_product(name="Desk Lamp"):
    return current_domain.process(CreateProduct(name=name, price=4500), asynchronous=False)


def _delete(product_id):
    current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)


class TestDeleteProductHandler:
    def test_row_kept_with_deleted_status(self):
        product_id = _create_product()

        _delete(product_id)

        product = current_domain.repository_for(Product).get(product_id)
        assert product.status == "DELETED"
        assert len(product.skus) == 1

    def test_deleted_product_excluded_from_listing(self):
        kept = _create_product(name="Kept")
        removed = _create_product(name="Removed")

        _delete(removed)

        page = list_products()
        assert [str(p.id) for p in page.items] == [kept]
        assert page.total == 1

    def test_deleted_product_detail_not_found(self):
        product_id = _create_product()
        _delete(product_id)

        with pytest.raises(ObjectNotFoundError):
            get_product_detail(product_id)

    def test_deleting_twice_is_not_found(self):
        product_id = _create_product()
        _delete(product_id)

        with pytest.raises(ObjectNotFoundError):
            _delete(product_id)

    def test_unknown_product(self):
        with pytest.raises(ObjectNotFoundError):
            _delete("no-such-product")
