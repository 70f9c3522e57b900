"""Data-access layer for categories."""

from collections.abc import Iterable
from datetime import UTC, datetime

from sqlmodel import Session, select

from src.catalog.entities.core import RecordScope, name_key

from .entity import Category
from .table import CategoryTable


class CategoryRepository:
    """Persistence gateway for categories, bound to one session/transaction."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def _row(self, category_id: int, scope: RecordScope) -> CategoryTable | None:
        statement = select(CategoryTable).where(CategoryTable.id == category_id)
        clause = scope.clause(CategoryTable.deleted)
        if clause is not None:
            statement = statement.where(clause)
        return self._session.exec(statement).first()

    def find_by_id(
        self, category_id: int, scope: RecordScope = RecordScope.ACTIVE_ONLY
    ) -> Category | None:
        row = self._row(category_id, scope)
        if row is None:
            return None
        return Category.model_validate(row, from_attributes=True)

    def exists_by_id(
        self, category_id: int, scope: RecordScope = RecordScope.INCLUDE_DELETED
    ) -> bool:
        return self._row(category_id, scope) is not None

    def exists_by_name(self, name: str) -> bool:
        """Case-insensitive name lookup over active categories."""
        statement = select(CategoryTable.id).where(
            CategoryTable.name_key == name_key(name),
            CategoryTable.deleted.is_(False),
        )
        return self._session.exec(statement).first() is not None

    def find_all(
        self,
        scope: RecordScope = RecordScope.ACTIVE_ONLY,
        name_contains: str | None = None,
    ) -> list[Category]:
        statement = select(CategoryTable)
        clause = scope.clause(CategoryTable.deleted)
        if clause is not None:
            statement = statement.where(clause)
        if name_contains:
            statement = statement.where(
                CategoryTable.name_key.contains(name_key(name_contains), autoescape=True)
            )
        statement = statement.order_by(CategoryTable.name, CategoryTable.id)
        rows = self._session.exec(statement).all()
        return [Category.model_validate(row, from_attributes=True) for row in rows]

    def names_by_ids(self, category_ids: Iterable[int]) -> dict[int, str]:
        """Names of the given categories, deleted ones included, in one query."""
        ids = set(category_ids)
        if not ids:
            return {}
        statement = select(CategoryTable.id, CategoryTable.name).where(
            CategoryTable.id.in_(ids)
        )
        return {row_id: name for row_id, name in self._session.exec(statement).all()}

    def insert(self, category: Category) -> int:
        row = CategoryTable(
            name=category.name,
            name_key=name_key(category.name),
            description=category.description,
            deleted=category.deleted,
        )
        self._session.add(row)
        self._session.flush()
        if row.id is None:
            raise RuntimeError("Category insert did not produce an id")
        return row.id

    def save(self, category: Category) -> None:
        row = self._session.get(CategoryTable, category.id)
        if row is None:
            raise ValueError(f"Category {category.id} not found")
        row.name = category.name
        row.name_key = name_key(category.name)
        row.description = category.description
        row.deleted = category.deleted
        row.updated_at = datetime.now(UTC)
        self._session.add(row)
        self._session.flush()

    def set_deleted(self, category_id: int, deleted: bool) -> None:
        row = self._session.get(CategoryTable, category_id)
        if row is None:
            raise ValueError(f"Category {category_id} not found")
        row.deleted = deleted
        row.updated_at = datetime.now(UTC)
        self._session.add(row)
        self._session.flush()
