from .catalog import (
    CategoryCommand,
    CategoryStatus,
    CategoryView,
    CreatedResponse,
    ProductCommand,
    ProductView,
    StockStatus,
)

__all__ = [
    "CategoryCommand",
    "CategoryStatus",
    "CategoryView",
    "CreatedResponse",
    "ProductCommand",
    "ProductView",
    "StockStatus",
]
