"""Product database table model."""

from decimal import Decimal

from sqlmodel import Field

from src.catalog.entities.core import EntityTable, active_name_index


class ProductTable(EntityTable, table=True):
    """Database persistence model for products.

    The foreign key carries no cascade; category deletion is guarded by the
    lifecycle manager instead.
    """

    __tablename__ = "products"

    name: str = Field(max_length=100, nullable=False)
    name_key: str = Field(nullable=False)
    description: str | None = Field(default=None, max_length=500)
    price: Decimal = Field(max_digits=12, decimal_places=2, nullable=False)
    stock: int = Field(default=0, nullable=False)
    category_id: int = Field(foreign_key="categories.id", nullable=False, index=True)
    deleted: bool = Field(default=False, nullable=False, index=True)


active_name_index(ProductTable.__table__, "uq_products_active_name")
