"""Unit tests for the category lifecycle manager."""

import pytest

from src.catalog.core.models import CategoryCommand
from src.catalog.core.services.catalog.errors import (
    AlreadyDeletedError,
    DuplicateNameError,
    HasActiveChildrenError,
    NotDeletedError,
    NotFoundError,
)
from src.catalog.entities.core import RecordScope
from src.catalog.entities.service.category import CategoryRepository


class TestCreateCategory:
    def test_create_returns_new_active_category(self, category_manager, session):
        category_id = category_manager.create(
            CategoryCommand(name="Beverages", description="Drinks")
        )

        stored = CategoryRepository(session).find_by_id(category_id)
        assert stored is not None
        assert stored.name == "Beverages"
        assert stored.description == "Drinks"
        assert stored.deleted is False

    def test_create_rejects_case_insensitive_duplicate(self, category_manager, make_category):
        make_category("Beverages")

        with pytest.raises(DuplicateNameError) as exc_info:
            category_manager.create(CategoryCommand(name="BEVERAGES"))

        assert exc_info.value.code == "DuplicateName"
        assert exc_info.value.name == "BEVERAGES"

    def test_create_rejects_non_ascii_case_duplicate(self, category_manager, make_category):
        make_category("LÁCTEOS")

        with pytest.raises(DuplicateNameError):
            category_manager.create(CategoryCommand(name="lácteos"))

    def test_unique_index_folds_non_ascii_case(
        self, category_manager, make_category, monkeypatch
    ):
        make_category("LÁCTEOS")
        monkeypatch.setattr(CategoryRepository, "exists_by_name", lambda self, name: False)

        with pytest.raises(DuplicateNameError):
            category_manager.create(CategoryCommand(name="Lácteos"))

    def test_rename_to_non_ascii_case_variant_of_other(self, category_manager, make_category):
        make_category("ÑOQUIS")
        other_id = make_category("Pastas")

        with pytest.raises(DuplicateNameError):
            category_manager.update(other_id, CategoryCommand(name="ñoquis"))

    def test_create_allows_name_of_deleted_category(self, category_manager, make_category):
        old_id = make_category("Beverages")
        category_manager.delete(old_id)

        new_id = category_manager.create(CategoryCommand(name="beverages"))

        assert new_id != old_id

    def test_unique_index_backs_up_name_check(
        self, category_manager, make_category, monkeypatch
    ):
        """A name race that slips past the lookup is still reported as a duplicate."""
        make_category("Beverages")
        monkeypatch.setattr(CategoryRepository, "exists_by_name", lambda self, name: False)

        with pytest.raises(DuplicateNameError):
            category_manager.create(CategoryCommand(name="beverages"))

    def test_failed_create_leaves_no_row(self, category_manager, make_category, session):
        make_category("Beverages")

        with pytest.raises(DuplicateNameError):
            category_manager.create(CategoryCommand(name="Beverages"))

        rows = CategoryRepository(session).find_all(RecordScope.INCLUDE_DELETED)
        assert [c.name for c in rows] == ["Beverages"]


class TestUpdateCategory:
    def test_update_overwrites_fields(self, category_manager, make_category, session):
        category_id = make_category("Beverages")

        category_manager.update(
            category_id, CategoryCommand(name="Drinks", description="Cold and hot")
        )

        stored = CategoryRepository(session).find_by_id(category_id)
        assert stored.name == "Drinks"
        assert stored.description == "Cold and hot"

    def test_update_keeps_own_name_with_different_case(self, category_manager, make_category):
        category_id = make_category("Beverages")

        category_manager.update(category_id, CategoryCommand(name="BEVERAGES"))

    def test_update_rejects_name_of_other_active_category(
        self, category_manager, make_category
    ):
        make_category("Beverages")
        snacks_id = make_category("Snacks")

        with pytest.raises(DuplicateNameError) as exc_info:
            category_manager.update(snacks_id, CategoryCommand(name="beverages"))

        assert exc_info.value.entity_id == snacks_id

    def test_update_missing_category(self, category_manager):
        with pytest.raises(NotFoundError) as exc_info:
            category_manager.update(999, CategoryCommand(name="Anything"))

        assert exc_info.value.active_only is True

    def test_update_deleted_category_is_not_found(self, category_manager, make_category):
        category_id = make_category("Beverages")
        category_manager.delete(category_id)

        with pytest.raises(NotFoundError):
            category_manager.update(category_id, CategoryCommand(name="Drinks"))

    def test_missing_id_reported_before_duplicate_name(self, category_manager, make_category):
        make_category("Beverages")

        with pytest.raises(NotFoundError):
            category_manager.update(999, CategoryCommand(name="Beverages"))


class TestDeleteCategory:
    def test_delete_marks_category_deleted(self, category_manager, make_category, session):
        category_id = make_category("Beverages")

        category_manager.delete(category_id)

        repo = CategoryRepository(session)
        assert repo.find_by_id(category_id) is None
        assert repo.find_by_id(category_id, RecordScope.INCLUDE_DELETED).deleted is True

    def test_delete_missing_category(self, category_manager):
        with pytest.raises(NotFoundError):
            category_manager.delete(999)

    def test_delete_twice(self, category_manager, make_category):
        category_id = make_category("Beverages")
        category_manager.delete(category_id)

        with pytest.raises(AlreadyDeletedError):
            category_manager.delete(category_id)

    def test_delete_refused_while_products_active(
        self, category_manager, make_category, make_product
    ):
        category_id = make_category("Snacks")
        make_product(category_id, name="Chips")
        make_product(category_id, name="Pretzels")

        with pytest.raises(HasActiveChildrenError) as exc_info:
            category_manager.delete(category_id)

        assert exc_info.value.active_products == 2

    def test_delete_allowed_once_products_deleted(
        self, category_manager, product_manager, make_category, make_product
    ):
        category_id = make_category("Snacks")
        product_id = make_product(category_id)
        product_manager.delete(product_id)

        category_manager.delete(category_id)


class TestRestoreCategory:
    def test_restore_reactivates_category(self, category_manager, make_category, session):
        category_id = make_category("Beverages")
        category_manager.delete(category_id)

        category_manager.restore(category_id)

        assert CategoryRepository(session).find_by_id(category_id).deleted is False

    def test_restore_missing_category(self, category_manager):
        with pytest.raises(NotFoundError):
            category_manager.restore(999)

    def test_restore_active_category(self, category_manager, make_category):
        category_id = make_category("Beverages")

        with pytest.raises(NotDeletedError):
            category_manager.restore(category_id)

    def test_restore_refused_when_name_reused(self, category_manager, make_category):
        old_id = make_category("Beverages")
        category_manager.delete(old_id)
        make_category("BEVERAGES")

        with pytest.raises(DuplicateNameError):
            category_manager.restore(old_id)

    def test_delete_then_restore_is_identity(self, category_manager, make_category, session):
        category_id = make_category("Beverages", description="Drinks")
        before = CategoryRepository(session).find_by_id(category_id)

        category_manager.delete(category_id)
        category_manager.restore(category_id)

        session.expire_all()
        after = CategoryRepository(session).find_by_id(category_id)
        assert after == before
