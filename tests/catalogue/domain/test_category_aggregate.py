"""Tests for the Category aggregate."""

import re

import pytest
from catalogue.category.category import Category, generate_category_code
from catalogue.category.events import CategoryCreated
from protean.exceptions import ValidationError


class TestCategoryCreation:
    def test_root_category_sits_at_depth_zero(self):
        category = Category.create(name="Electronics")
        assert category.depth == 0
        assert category.parent_id is None
        assert category.ordering == 0

    def test_child_depth_is_parent_depth_plus_one(self):
        parent = Category.create(name="Electronics")
        child = Category.create(name="Phones", parent=parent, ordering=2)

        assert child.parent_id == parent.id
        assert child.depth == 1
        assert child.ordering == 2

    def test_grandchild_depth(self):
        root = Category.create(name="Electronics")
        child = Category.create(name="Phones", parent=root)
        grandchild = Category.create(name="Smartphones", parent=child)
        assert grandchild.depth == 2

    def test_code_is_derived_from_name(self):
        category = Category.create(name="Home & Kitchen")
        assert re.fullmatch(r"HOME-KITCHEN-[0-9A-F]{6}", category.code)

    def test_created_event_raised(self):
        parent = Category.create(name="Electronics")
        category = Category.create(name="Phones", parent=parent)

        events = [e for e in category._events if isinstance(e, CategoryCreated)]
        assert len(events) == 1
        assert events[0].name == "Phones"
        assert events[0].depth == 1
        assert events[0].parent_id == parent.id


class TestCategoryValidation:
    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError) as exc:
            Category.create(name="   ")
        assert "name" in exc.value.messages

    def test_missing_name_rejected(self):
        with pytest.raises(ValidationError):
            Category(depth=0)

    def test_negative_ordering_rejected(self):
        with pytest.raises(ValidationError):
            Category.create(name="Electronics", ordering=-1)

    def test_root_with_nonzero_depth_rejected(self):
        with pytest.raises(ValidationError) as exc:
            Category(name="Electronics", depth=2)
        assert "depth" in exc.value.messages


class TestCategoryCode:
    def test_codes_differ_for_same_name(self):
        assert generate_category_code("Phones") != generate_category_code("Phones")

    def test_name_without_alphanumerics_falls_back(self):
        assert generate_category_code("***").startswith("CAT-")
