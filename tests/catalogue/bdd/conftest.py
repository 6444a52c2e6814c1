"""Shared BDD fixtures and step definitions for the Catalogue domain."""

import pytest
from catalogue.category.category import Category
from protean.utils.globals import current_domain
from pytest_bdd import given, then


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured domain errors."""
    return {"exc": None}


@pytest.fixture()
def categories():
    """Category ids by name, filled as scenarios create them."""
    return {}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("no categories exist")
def no_categories_exist():
    assert current_domain.repository_for(Category).all_ordered() == []


# ---------------------------------------------------------------------------
# Then steps (shared)
# ---------------------------------------------------------------------------
@then("no categories exist")
def still_no_categories():
    assert current_domain.repository_for(Category).all_ordered() == []

