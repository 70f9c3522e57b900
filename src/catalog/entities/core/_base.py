from datetime import UTC, datetime

import sqlalchemy as sa
from pydantic import BaseModel
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel


class Entity(BaseModel):
    """Base entity class with a persistence-assigned identifier.

    ``id`` stays ``None`` until the entity has been inserted; the repository
    hands back the database-assigned value and it never changes afterwards.
    """

    id: int | None = PydanticField(
        default=None,
        description="Unique identifier assigned on insert",
    )

    created_at: datetime = PydanticField(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = PydanticField(default_factory=lambda: datetime.now(UTC))


class SoftDeletableEntity(Entity):
    """Entity that is hidden rather than removed when deleted."""

    deleted: bool = PydanticField(
        default=False, description="Soft-delete flag; false means active"
    )

    @property
    def is_active(self) -> bool:
        return not self.deleted


class EntityTable(SQLModel, table=False):
    """Base table with an autoincrement integer primary key and timestamps."""

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Unique identifier assigned on insert",
    )

    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        nullable=False,
        sa_column_kwargs={
            "server_default": sa.func.now(),
            "onupdate": sa.func.now(),
        },
    )


def name_key(name: str) -> str:
    """Case-folded form of a name, stored alongside it for comparisons.

    Folding happens in Python because SQLite's ``lower()`` only folds ASCII.
    """
    return name.casefold()


def active_name_index(table: sa.Table, name: str) -> sa.Index:
    """Partial unique index on ``name_key`` over the rows that are not deleted.

    This is the storage-level backstop for name uniqueness among active rows;
    it rejects the second of two racing writes that both passed the
    application-level pre-check.
    """
    return sa.Index(
        name,
        table.c.name_key,
        unique=True,
        sqlite_where=sa.text("deleted = 0"),
        postgresql_where=sa.text("deleted = false"),
    )
