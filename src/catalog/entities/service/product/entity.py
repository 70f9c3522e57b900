"""Entity: Product."""

from decimal import Decimal
from typing import Any

from pydantic import Field

from src.catalog.entities.core import SoftDeletableEntity


class Product(SoftDeletableEntity):
    """Product entity listed under exactly one category.

    ``category_id`` is a plain reference: the product neither owns nor is
    owned by its category and may be reassigned while active.
    """

    name: str = Field(description="Product name, unique among active products")
    description: str | None = Field(default=None, description="Free-text description")
    price: Decimal = Field(description="Unit price")
    stock: int = Field(description="Units on hand")
    category_id: int = Field(description="Referenced category")

    def __eq__(self, other: Any) -> bool:
        """Compare products by business attributes, ignoring timestamps."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.description == other.description
            and self.price == other.price
            and self.stock == other.stock
            and self.category_id == other.category_id
            and self.deleted == other.deleted
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.name,
            self.description,
            self.price,
            self.stock,
            self.category_id,
            self.deleted,
        ))
