"""Shared BDD fixtures and step definitions for the Catalogue domain."""

import pytest
from catalogue.product.creation import CreateProduct
from catalogue.product.product import Product
from protean import current_domain
from pytest_bdd import given, parsers, then


@pytest.fixture()
def error():
    """Container for captured domain errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a product "{name}"'), target_fixture="product_id")
def a_product(name):
    command = CreateProduct(name=name, price=89.0, product_type="Eyeglasses")
    return current_domain.process(command, asynchronous=False)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the product average rating is {average:g}"))
def product_average(product_id, average):
    product = current_domain.repository_for(Product).get(product_id)
    assert product.average_rating == pytest.approx(average)


@then(parsers.cfparse("the product review count is {count:d}"))
def product_review_count(product_id, count):
    assert current_domain.repository_for(Product).get(product_id).review_count == count
