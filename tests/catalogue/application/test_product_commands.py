"""Application tests for product creation and details management."""

import pytest
from catalogue.product.creation import CreateProduct
from catalogue.product.details import UpdateProductDetails
from catalogue.product.product import Product
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError


def _create_product(**overrides):
    defaults = {"name": "Daily Contacts", "price": 25.0, "product_type": "ContactLens", "stock": 100}
    defaults.update(overrides)
    return current_domain.process(CreateProduct(**defaults), asynchronous=False)


class TestCreateProduct:
    def test_create_persists_product(self):
        product_id = _create_product()
        product = current_domain.repository_for(Product).get(product_id)
        assert product.name == "Daily Contacts"
        assert product.stock == 100
        assert product.review_count == 0

    def test_invalid_type_rejected(self):
        with pytest.raises(ValidationError):
            _create_product(product_type="Hat")


class TestUpdateProductDetails:
    def test_only_given_fields_change(self):
        product_id = _create_product()
        current_domain.process(UpdateProductDetails(product_id=product_id, price=19.5), asynchronous=False)

        product = current_domain.repository_for(Product).get(product_id)
        assert product.price == 19.5
        assert product.name == "Daily Contacts"
        assert product.stock == 100

    def test_unknown_product(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(UpdateProductDetails(product_id="missing", name="X"), asynchronous=False)
