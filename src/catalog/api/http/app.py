"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.responses import JSONResponse

from src.catalog import __version__
from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.api.http.routers import health
from src.catalog.api.http.routers.service import category, product
from src.catalog.api.utils.app_startup import configure_logging
from src.catalog.core.services import DbManageService, DbSessionService
from src.catalog.core.services.catalog.errors import (
    AlreadyDeletedError,
    CatalogError,
    CategoryInactiveError,
    CategoryNotFoundError,
    DuplicateNameError,
    HasActiveChildrenError,
    NotDeletedError,
    NotFoundError,
)
from src.catalog.runtime.context import get_config

ERROR_STATUS_CODES: dict[type[CatalogError], int] = {
    NotFoundError: 404,
    CategoryNotFoundError: 422,
    AlreadyDeletedError: 409,
    NotDeletedError: 409,
    DuplicateNameError: 409,
    HasActiveChildrenError: 409,
    CategoryInactiveError: 409,
}


def status_code_for(error: CatalogError) -> int:
    for error_type in type(error).__mro__:
        if error_type in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[error_type]
    return 400


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    request_id = getattr(request.state, "request_id", None)
    status_code = status_code_for(exc)
    logger.bind(
        status_code=status_code,
        error_type=type(exc).__name__,
        entity=exc.entity,
        entity_id=exc.entity_id,
    ).info("request.rejected")
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "code": exc.code, "request_id": request_id},
    )


async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request.state.request_id = request_id

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": request.client.host if request.client else "unknown",
    }

    start = time.perf_counter()

    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")

            response.headers.setdefault("X-Request-ID", request_id)
            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal Server Error", "request_id": request_id},
                headers={"X-Request-ID": request_id},
            )


def create_app(database_service: DbSessionService | None = None) -> FastAPI:
    """Build the catalog API.

    Args:
        database_service: Database service to use instead of one built from
            config on startup.
    """
    config = get_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db = database_service or DbSessionService()
        if config.database.create_tables:
            DbManageService(db.engine).create_all()
        app.state.app_dependencies = ApplicationDependencies.build(db)
        logger.info("Starting up application in {} environment", config.app.environment)
        try:
            yield
        finally:
            logger.info("Shutting down application")
            if database_service is None:
                db.dispose()

    is_production = config.app.environment == "production"
    app = FastAPI(
        title="Catalog API",
        version=__version__,
        lifespan=lifespan,
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
    )

    if is_production and "*" in config.app.cors.origins:
        raise RuntimeError(
            "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.app.cors.origins,
        allow_credentials=config.app.cors.allow_credentials,
        allow_methods=config.app.cors.allow_methods,
        allow_headers=config.app.cors.allow_headers,
    )
    app.middleware("http")(log_requests)
    app.add_exception_handler(CatalogError, catalog_error_handler)

    app.include_router(health.router)
    app.include_router(category.router, prefix="/api/v1")
    app.include_router(product.router, prefix="/api/v1")

    return app


configure_logging()

app = create_app()
