"""Catalog lifecycle managers, read projections and their error kinds."""

from .category_manager import CategoryLifecycleManager
from .errors import (
    AlreadyDeletedError,
    CatalogError,
    CategoryInactiveError,
    CategoryNotFoundError,
    DuplicateNameError,
    HasActiveChildrenError,
    NotDeletedError,
    NotFoundError,
)
from .product_manager import ProductLifecycleManager
from .projection import CatalogProjectionService

__all__ = [
    "AlreadyDeletedError",
    "CatalogError",
    "CatalogProjectionService",
    "CategoryInactiveError",
    "CategoryLifecycleManager",
    "CategoryNotFoundError",
    "DuplicateNameError",
    "HasActiveChildrenError",
    "NotDeletedError",
    "NotFoundError",
    "ProductLifecycleManager",
]
