"""Core services exports."""

from .catalog import (
    CatalogProjectionService,
    CategoryLifecycleManager,
    ProductLifecycleManager,
)
from .database import DbManageService, DbSessionService

__all__ = [
    # Catalog services
    "CatalogProjectionService",
    "CategoryLifecycleManager",
    "ProductLifecycleManager",
    # Database services
    "DbManageService",
    "DbSessionService",
]
