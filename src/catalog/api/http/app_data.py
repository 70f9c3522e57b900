from dataclasses import dataclass

from src.catalog.core.services import (
    CatalogProjectionService,
    CategoryLifecycleManager,
    DbSessionService,
    ProductLifecycleManager,
)


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    category_manager: CategoryLifecycleManager
    product_manager: ProductLifecycleManager
    projection_service: CatalogProjectionService

    @classmethod
    def build(cls, database_service: DbSessionService) -> "ApplicationDependencies":
        """Wire every catalog service onto one database service."""
        return cls(
            database_service=database_service,
            category_manager=CategoryLifecycleManager(database_service),
            product_manager=ProductLifecycleManager(database_service),
            projection_service=CatalogProjectionService(database_service),
        )
