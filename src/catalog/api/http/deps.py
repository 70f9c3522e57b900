"""FastAPI dependency implementations."""

from __future__ import annotations

from fastapi import Request

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.core.services import (
    CatalogProjectionService,
    CategoryLifecycleManager,
    DbSessionService,
    ProductLifecycleManager,
)


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_database_service(request: Request) -> DbSessionService:
    """Get the database service instance."""
    return get_app_dependencies(request).database_service


def get_category_manager(request: Request) -> CategoryLifecycleManager:
    """Get the category lifecycle manager."""
    return get_app_dependencies(request).category_manager


def get_product_manager(request: Request) -> ProductLifecycleManager:
    """Get the product lifecycle manager."""
    return get_app_dependencies(request).product_manager


def get_projection_service(request: Request) -> CatalogProjectionService:
    """Get the read projection service."""
    return get_app_dependencies(request).projection_service
