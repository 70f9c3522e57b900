"""Database initialization script."""

from src.catalog.core.services.database import DbManageService, DbSessionService


def init_db() -> None:
    """Create all database tables."""
    database_service = DbSessionService()
    DbManageService(database_service.engine).create_all()
    database_service.dispose()


if __name__ == "__main__":
    init_db()
