"""Command inputs and read views for the catalog.

Commands carry the field-shape rules (lengths, price > 0, stock >= 0). They
are enforced when a command is built, before it reaches a lifecycle manager;
the managers only check catalog-wide rules.
"""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class CategoryCommand(BaseModel):
    """Input for creating or updating a category."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=100, description="Category name")
    description: str | None = Field(
        default=None, max_length=500, description="Category description"
    )


class ProductCommand(BaseModel):
    """Input for creating or updating a product."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=100, description="Product name")
    description: str | None = Field(
        default=None, max_length=500, description="Product description"
    )
    price: Decimal = Field(gt=0, max_digits=12, decimal_places=2, description="Unit price")
    stock: int = Field(ge=0, description="Units on hand")
    category_id: int = Field(ge=1, description="Category the product belongs to")


class CategoryStatus(str, Enum):
    ACTIVE = "ACTIVE"
    DELETED = "DELETED"


class StockStatus(str, Enum):
    NO_STOCK = "NO_STOCK"
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class CategoryView(BaseModel):
    """Read-side category with derived, never persisted fields."""

    id: int
    name: str
    description: str | None = None
    deleted: bool
    active_product_count: int
    status: CategoryStatus


class ProductView(BaseModel):
    """Read-side product with derived, never persisted fields."""

    id: int
    name: str
    description: str | None = None
    price: Decimal
    stock: int
    category_id: int
    category_name: str | None = None
    deleted: bool
    stock_status: StockStatus
    formatted_price: str


class CreatedResponse(BaseModel):
    id: int
