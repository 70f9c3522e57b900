"""Entity: Category."""

from typing import Any

from pydantic import Field

from src.catalog.entities.core import SoftDeletableEntity


class Category(SoftDeletableEntity):
    """Category entity grouping products in the catalog.

    A category does not own its products: deleting it never cascades, and it
    may only be deleted once no active product references it.
    """

    name: str = Field(description="Category name, unique among active categories")
    description: str | None = Field(default=None, description="Free-text description")

    def __eq__(self, other: Any) -> bool:
        """Compare categories by business attributes, ignoring timestamps."""
        if not isinstance(other, Category):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.description == other.description
            and self.deleted == other.deleted
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((self.id, self.name, self.description, self.deleted))
