"""Data-access layer for products."""

from collections.abc import Iterable
from datetime import UTC, datetime
from decimal import Decimal

import sqlalchemy as sa
from sqlmodel import Session, select

from src.catalog.entities.core import RecordScope, name_key
from src.catalog.entities.service.category.table import CategoryTable

from .entity import Product
from .table import ProductTable


class ProductRepository:
    """Persistence gateway for products, bound to one session/transaction."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def _row(self, product_id: int, scope: RecordScope) -> ProductTable | None:
        statement = select(ProductTable).where(ProductTable.id == product_id)
        clause = scope.clause(ProductTable.deleted)
        if clause is not None:
            statement = statement.where(clause)
        return self._session.exec(statement).first()

    def find_by_id(
        self, product_id: int, scope: RecordScope = RecordScope.ACTIVE_ONLY
    ) -> Product | None:
        row = self._row(product_id, scope)
        if row is None:
            return None
        return Product.model_validate(row, from_attributes=True)

    def exists_by_id(
        self, product_id: int, scope: RecordScope = RecordScope.INCLUDE_DELETED
    ) -> bool:
        return self._row(product_id, scope) is not None

    def exists_by_name(self, name: str) -> bool:
        """Case-insensitive name lookup over active products."""
        statement = select(ProductTable.id).where(
            ProductTable.name_key == name_key(name),
            ProductTable.deleted.is_(False),
        )
        return self._session.exec(statement).first() is not None

    def find_all(
        self,
        scope: RecordScope = RecordScope.ACTIVE_ONLY,
        *,
        name_contains: str | None = None,
        category_id: int | None = None,
        min_price: Decimal | None = None,
        max_price: Decimal | None = None,
        stock_above: int | None = None,
        require_active_category: bool = False,
    ) -> list[Product]:
        """Return products matching every filter given, ordered by name.

        Price bounds are inclusive; ``stock_above`` keeps products whose stock
        is strictly greater than the threshold.
        """
        statement = select(ProductTable)
        clause = scope.clause(ProductTable.deleted)
        if clause is not None:
            statement = statement.where(clause)
        if require_active_category or category_id is not None:
            statement = statement.join(
                CategoryTable, CategoryTable.id == ProductTable.category_id
            ).where(CategoryTable.deleted.is_(False))
        if name_contains:
            statement = statement.where(
                ProductTable.name_key.contains(name_key(name_contains), autoescape=True)
            )
        if category_id is not None:
            statement = statement.where(ProductTable.category_id == category_id)
        if min_price is not None:
            statement = statement.where(ProductTable.price >= min_price)
        if max_price is not None:
            statement = statement.where(ProductTable.price <= max_price)
        if stock_above is not None:
            statement = statement.where(ProductTable.stock > stock_above)
        statement = statement.order_by(ProductTable.name, ProductTable.id)
        rows = self._session.exec(statement).all()
        return [Product.model_validate(row, from_attributes=True) for row in rows]

    def count_active_by_category(self, category_id: int) -> int:
        statement = select(sa.func.count(ProductTable.id)).where(
            ProductTable.category_id == category_id,
            ProductTable.deleted.is_(False),
        )
        return self._session.exec(statement).one()

    def count_active_by_categories(self, category_ids: Iterable[int]) -> dict[int, int]:
        """Active product counts for many categories in one grouped query.

        Categories without active products are reported as 0.
        """
        ids = set(category_ids)
        if not ids:
            return {}
        statement = (
            select(ProductTable.category_id, sa.func.count(ProductTable.id))
            .where(ProductTable.category_id.in_(ids), ProductTable.deleted.is_(False))
            .group_by(ProductTable.category_id)
        )
        counts = dict.fromkeys(ids, 0)
        counts.update(dict(self._session.exec(statement).all()))
        return counts

    def insert(self, product: Product) -> int:
        row = ProductTable(
            name=product.name,
            name_key=name_key(product.name),
            description=product.description,
            price=product.price,
            stock=product.stock,
            category_id=product.category_id,
            deleted=product.deleted,
        )
        self._session.add(row)
        self._session.flush()
        if row.id is None:
            raise RuntimeError("Product insert did not produce an id")
        return row.id

    def save(self, product: Product) -> None:
        row = self._session.get(ProductTable, product.id)
        if row is None:
            raise ValueError(f"Product {product.id} not found")
        row.name = product.name
        row.name_key = name_key(product.name)
        row.description = product.description
        row.price = product.price
        row.stock = product.stock
        row.category_id = product.category_id
        row.deleted = product.deleted
        row.updated_at = datetime.now(UTC)
        self._session.add(row)
        self._session.flush()

    def set_deleted(self, product_id: int, deleted: bool) -> None:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            raise ValueError(f"Product {product_id} not found")
        row.deleted = deleted
        row.updated_at = datetime.now(UTC)
        self._session.add(row)
        self._session.flush()
