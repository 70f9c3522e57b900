"""Unit tests for the catalog read projections."""

from decimal import Decimal

from src.catalog.core.models import CategoryStatus, StockStatus
from src.catalog.core.services import CatalogProjectionService
from src.catalog.entities.core import RecordScope
from src.catalog.entities.service.category import CategoryRepository
from src.catalog.runtime.config.config_data import CatalogConfig


class TestCategoryProjection:
    def test_list_categories_counts_active_products(
        self, projections, product_manager, make_category, make_product
    ):
        snacks_id = make_category("Snacks")
        make_category("Beverages")
        make_product(snacks_id, name="Chips")
        deleted_id = make_product(snacks_id, name="Pretzels")
        product_manager.delete(deleted_id)

        views = {view.name: view for view in projections.list_categories()}

        assert views["Snacks"].active_product_count == 1
        assert views["Snacks"].status == CategoryStatus.ACTIVE
        assert views["Beverages"].active_product_count == 0

    def test_list_categories_excludes_deleted(
        self, projections, category_manager, make_category
    ):
        make_category("Snacks")
        deleted_id = make_category("Old")
        category_manager.delete(deleted_id)

        assert [view.name for view in projections.list_categories()] == ["Snacks"]

    def test_list_categories_filters_by_name(self, projections, make_category):
        make_category("Snacks")
        make_category("Frozen Snacks")
        make_category("Beverages")

        names = [view.name for view in projections.list_categories(name_contains="SNACK")]

        assert names == ["Frozen Snacks", "Snacks"]

    def test_name_filter_folds_non_ascii_case(self, projections, make_category):
        make_category("LÁCTEOS")
        make_category("Bebidas")

        names = [view.name for view in projections.list_categories(name_contains="á")]

        assert names == ["LÁCTEOS"]

    def test_name_filter_matches_wildcards_literally(self, projections, make_category):
        make_category("100% Juice")
        make_category("1000 Island")

        names = [view.name for view in projections.list_categories(name_contains="0%")]

        assert names == ["100% Juice"]

    def test_list_deleted_categories(self, projections, category_manager, make_category):
        make_category("Snacks")
        deleted_id = make_category("Old")
        category_manager.delete(deleted_id)

        views = projections.list_deleted_categories()

        assert [view.id for view in views] == [deleted_id]
        assert views[0].status == CategoryStatus.DELETED
        assert views[0].deleted is True

    def test_get_category_respects_scope(self, projections, category_manager, make_category):
        category_id = make_category("Old")
        category_manager.delete(category_id)

        assert projections.get_category(category_id) is None
        view = projections.get_category(category_id, RecordScope.INCLUDE_DELETED)
        assert view is not None
        assert view.status == CategoryStatus.DELETED

    def test_get_missing_category_is_none(self, projections):
        assert projections.get_category(999) is None


class TestProductProjection:
    def test_product_view_derived_fields(self, projections, make_category, make_product):
        category_id = make_category("Snacks")
        product_id = make_product(category_id, name="Chips", price="2.5", stock=5)

        view = projections.get_product(product_id)

        assert view.category_name == "Snacks"
        assert view.stock_status == StockStatus.LOW
        assert view.formatted_price == "$2.50"

    def test_list_products_hides_products_of_deleted_category(
        self, projections, make_category, make_product, session
    ):
        snacks_id = make_category("Snacks")
        old_id = make_category("Old")
        make_product(snacks_id, name="Chips")
        make_product(old_id, name="Relic")
        # bypass the lifecycle rules to leave an active product under a deleted category
        CategoryRepository(session).set_deleted(old_id, True)
        session.commit()

        assert [view.name for view in projections.list_products()] == ["Chips"]

    def test_product_views_across_categories(self, projections, make_category, make_product):
        snacks_id = make_category("Snacks")
        pastas_id = make_category("PASTAS")
        make_product(snacks_id, name="Chips")
        make_product(pastas_id, name="ÑOQUIS")

        views = {view.name: view for view in projections.list_products()}
        assert views["Chips"].category_name == "Snacks"
        assert views["ÑOQUIS"].category_name == "PASTAS"

        filtered = projections.list_products(name_contains="ñoq")
        assert [view.name for view in filtered] == ["ÑOQUIS"]

    def test_filter_by_category(self, projections, make_category, make_product):
        snacks_id = make_category("Snacks")
        drinks_id = make_category("Beverages")
        make_product(snacks_id, name="Chips")
        make_product(drinks_id, name="Cola")

        views = projections.list_products(category_id=drinks_id)

        assert [view.name for view in views] == ["Cola"]

    def test_filter_by_inclusive_price_range(self, projections, make_category, make_product):
        category_id = make_category("Snacks")
        make_product(category_id, name="Cheap", price="1.00")
        make_product(category_id, name="Middle", price="2.50")
        make_product(category_id, name="Pricey", price="5.00")

        views = projections.list_products(min_price=Decimal("1.00"), max_price=Decimal("2.50"))

        assert [view.name for view in views] == ["Cheap", "Middle"]

    def test_inverted_price_range_is_empty(self, projections, make_category, make_product):
        make_product(make_category("Snacks"), price="2.00")

        assert projections.list_products(min_price=Decimal("5"), max_price=Decimal("1")) == []

    def test_stock_above_is_strict(self, projections, make_category, make_product):
        category_id = make_category("Snacks")
        make_product(category_id, name="Seven", stock=7)
        make_product(category_id, name="Eight", stock=8)

        assert [view.name for view in projections.list_products(stock_above=7)] == ["Eight"]

    def test_filters_combine(self, projections, make_category, make_product):
        category_id = make_category("Snacks")
        make_product(category_id, name="Chips", price="2.00", stock=50)
        make_product(category_id, name="Choc Chips", price="4.00", stock=50)
        make_product(category_id, name="Chip Dip", price="2.00", stock=1)

        views = projections.list_products(
            name_contains="chip", max_price=Decimal("3.00"), stock_above=10
        )

        assert [view.name for view in views] == ["Chips"]

    def test_list_deleted_products_keeps_category_name(
        self, projections, product_manager, category_manager, make_category, make_product
    ):
        category_id = make_category("Old")
        product_id = make_product(category_id, name="Relic")
        product_manager.delete(product_id)
        category_manager.delete(category_id)

        views = projections.list_deleted_products()

        assert [view.id for view in views] == [product_id]
        assert views[0].category_name == "Old"
        assert views[0].deleted is True

    def test_get_deleted_product_only_with_wider_scope(
        self, projections, product_manager, make_category, make_product
    ):
        product_id = make_product(make_category("Snacks"))
        product_manager.delete(product_id)

        assert projections.get_product(product_id) is None
        assert projections.get_product(product_id, RecordScope.DELETED_ONLY).id == product_id

    def test_custom_presentation_config(self, database_service, make_category, make_product):
        config = CatalogConfig(
            low_stock_threshold=2, medium_stock_threshold=4, currency_symbol="€"
        )
        projections = CatalogProjectionService(database_service, config)
        product_id = make_product(make_category("Snacks"), price="3", stock=3)

        view = projections.get_product(product_id)

        assert view.stock_status == StockStatus.MEDIUM
        assert view.formatted_price == "€3.00"
