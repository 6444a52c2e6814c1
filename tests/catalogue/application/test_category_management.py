"""Application tests for category creation and category reads."""

import pytest
from catalogue.category.category import Category
from catalogue.category.management import CreateCategory
from catalogue.category.queries import get_category_tree, list_categories
from catalogue.utils.db import fetch_all
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain


def _create_category(**overrides):
    defaults = {"name": "Electronics"}
    defaults.update(overrides)
    command = CreateCategory(**defaults)
    return current_domain.process(command, asynchronous=False)


class TestCreateCategoryHandler:
    def test_create_root_category(self):
        category_id = _create_category()

        category = current_domain.repository_for(Category).get(category_id)
        assert category.name == "Electronics"
        assert category.depth == 0
        assert category.parent_id is None

    def test_create_child_category(self):
        parent_id = _create_category(name="Electronics")
        child_id = _create_category(name="Phones", parent_id=parent_id)

        child = current_domain.repository_for(Category).get(child_id)
        assert child.depth == 1
        assert child.parent_id == parent_id

    def test_depth_follows_parent_chain(self):
        level0 = _create_category(name="Level 0")
        level1 = _create_category(name="Level 1", parent_id=level0)
        level2 = _create_category(name="Level 2", parent_id=level1)
        level3 = _create_category(name="Level 3", parent_id=level2)

        assert current_domain.repository_for(Category).get(level3).depth == 3

    def test_unknown_parent_is_not_found_and_nothing_persisted(self):
        with pytest.raises(ObjectNotFoundError):
            _create_category(name="Phones", parent_id="does-not-exist")

        assert current_domain.repository_for(Category).all_ordered() == []

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            _create_category(name="   ")

    def test_negative_ordering_rejected(self):
        with pytest.raises(ValidationError):
            _create_category(ordering=-1)

    def test_names_need_not_be_unique(self):
        first = _create_category(name="Accessories")
        second = _create_category(name="Accessories")
        assert first != second


class TestListCategories:
    def test_roots_ordered_by_ordering(self):
        _create_category(name="Music", ordering=2)
        _create_category(name="Books", ordering=0)
        _create_category(name="Games", ordering=1)

        assert [c.name for c in list_categories()] == ["Books", "Games", "Music"]

    def test_children_of_parent(self):
        root = _create_category(name="Electronics")
        _create_category(name="Tablets", parent_id=root, ordering=1)
        _create_category(name="Phones", parent_id=root, ordering=0)
        _create_category(name="Books")

        children = list_categories(parent_id=root)
        assert [c.name for c in children] == ["Phones", "Tablets"]

    def test_roots_exclude_children(self):
        root = _create_category(name="Electronics")
        _create_category(name="Phones", parent_id=root)

        assert [c.name for c in list_categories()] == ["Electronics"]


class TestCategoryRepository:
    def test_at_depth(self):
        root = _create_category(name="Electronics")
        _create_category(name="Phones", parent_id=root)
        _create_category(name="Laptops", parent_id=root, ordering=1)

        repo = current_domain.repository_for(Category)
        assert [c.name for c in repo.at_depth(1)] == ["Phones", "Laptops"]
        assert [c.name for c in repo.at_depth(0)] == ["Electronics"]

    def test_all_ordered_by_depth_then_ordering(self):
        root = _create_category(name="Electronics", ordering=1)
        _create_category(name="Phones", parent_id=root)
        _create_category(name="Books", ordering=0)

        repo = current_domain.repository_for(Category)
        assert [c.name for c in repo.all_ordered()] == ["Books", "Electronics", "Phones"]

    def test_fetch_all_walks_every_batch_in_id_order(self):
        ids = [_create_category(name=f"Category {index}") for index in range(5)]

        repo = current_domain.repository_for(Category)
        records = fetch_all(repo._dao.query, batch_size=2)

        assert [record.id for record in records] == sorted(ids)


class TestCategoryTree:
    def test_tree_from_store(self):
        electronics = _create_category(name="Electronics")
        _create_category(name="Phones", parent_id=electronics)
        _create_category(name="Books", ordering=1)

        forest = get_category_tree()

        assert [node.name for node in forest] == ["Electronics", "Books"]
        assert [child.name for child in forest[0].children] == ["Phones"]
        assert forest[1].children == []

    def test_empty_store(self):
        assert get_category_tree() == []
