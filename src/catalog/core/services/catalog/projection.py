from decimal import Decimal

from src.catalog.core.models.catalog import CategoryView, ProductView
from src.catalog.core.services.catalog.transforms import category_view, product_view
from src.catalog.core.services.database.db_session import DbSessionService
from src.catalog.entities.core import RecordScope
from src.catalog.entities.service.category import Category, CategoryRepository
from src.catalog.entities.service.product import Product, ProductRepository
from src.catalog.runtime.config.config_data import CatalogConfig
from src.catalog.runtime.context import get_config


class CatalogProjectionService:
    """Read side of the catalog.

    Never writes and never raises lifecycle errors: a missing entity is
    reported as ``None`` and an empty match as an empty list. Derived fields
    (product counts, status labels, stock buckets, formatted prices) are
    computed here on every read.
    """

    def __init__(self, database: DbSessionService, config: CatalogConfig | None = None):
        self._database = database
        self._config = config

    @property
    def config(self) -> CatalogConfig:
        return self._config or get_config().catalog

    # Categories

    def list_categories(self, name_contains: str | None = None) -> list[CategoryView]:
        with self._database.session_scope() as session:
            categories = CategoryRepository(session).find_all(
                RecordScope.ACTIVE_ONLY, name_contains=name_contains
            )
            return self._category_views(session, categories)

    def list_deleted_categories(self) -> list[CategoryView]:
        with self._database.session_scope() as session:
            categories = CategoryRepository(session).find_all(RecordScope.DELETED_ONLY)
            return self._category_views(session, categories)

    def get_category(
        self, category_id: int, scope: RecordScope = RecordScope.ACTIVE_ONLY
    ) -> CategoryView | None:
        with self._database.session_scope() as session:
            category = CategoryRepository(session).find_by_id(category_id, scope)
            if category is None:
                return None
            return self._category_views(session, [category])[0]

    def _category_views(self, session, categories: list[Category]) -> list[CategoryView]:
        counts = ProductRepository(session).count_active_by_categories(
            category.id for category in categories
        )
        return [category_view(category, counts[category.id]) for category in categories]

    # Products

    def list_products(
        self,
        name_contains: str | None = None,
        category_id: int | None = None,
        min_price: Decimal | None = None,
        max_price: Decimal | None = None,
        stock_above: int | None = None,
    ) -> list[ProductView]:
        """Active products of active categories matching every filter given."""
        if min_price is not None and max_price is not None and min_price > max_price:
            return []
        with self._database.session_scope() as session:
            products = ProductRepository(session).find_all(
                RecordScope.ACTIVE_ONLY,
                name_contains=name_contains,
                category_id=category_id,
                min_price=min_price,
                max_price=max_price,
                stock_above=stock_above,
                require_active_category=True,
            )
            return self._product_views(session, products)

    def list_deleted_products(self) -> list[ProductView]:
        with self._database.session_scope() as session:
            products = ProductRepository(session).find_all(RecordScope.DELETED_ONLY)
            return self._product_views(session, products)

    def get_product(
        self, product_id: int, scope: RecordScope = RecordScope.ACTIVE_ONLY
    ) -> ProductView | None:
        with self._database.session_scope() as session:
            product = ProductRepository(session).find_by_id(product_id, scope)
            if product is None:
                return None
            return self._product_views(session, [product])[0]

    def _product_views(self, session, products: list[Product]) -> list[ProductView]:
        names = CategoryRepository(session).names_by_ids(
            product.category_id for product in products
        )
        config = self.config
        return [
            product_view(product, names.get(product.category_id), config)
            for product in products
        ]
