"""Category database table model."""

from sqlmodel import Field

from src.catalog.entities.core import EntityTable, active_name_index


class CategoryTable(EntityTable, table=True):
    """Database persistence model for categories."""

    __tablename__ = "categories"

    name: str = Field(max_length=100, nullable=False)
    name_key: str = Field(nullable=False)
    description: str | None = Field(default=None, max_length=500)
    deleted: bool = Field(default=False, nullable=False, index=True)


active_name_index(CategoryTable.__table__, "uq_categories_active_name")
