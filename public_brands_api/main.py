"""Main FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from public_brands_api.core.logging import configure_logging
from public_brands_api.core.middleware import request_context_middleware
from public_brands_api.core.settings import get_settings
from public_brands_api.db.concepts import close_concepts_client, get_concepts_client
from public_brands_api.db.postgres import close_graph_db_pool, get_graph_db_pool
from public_brands_api.features.brands.router import router as brands_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.
    Handles startup and shutdown events.
    """
    # Startup
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(
        "Starting %s v%s in env %s", settings.app_name, settings.app_version, settings.env
    )

    if settings.brands_backend == "graph":
        _ = await get_graph_db_pool()
        logger.info(
            "Graph database connection pool created for %s:%d/%s",
            settings.postgres_host,
            settings.postgres_port,
            settings.postgres_db,
        )
    else:
        _ = await get_concepts_client()
        logger.info("Concepts API client created for %s", settings.concepts_api_url)

    yield

    # Shutdown
    logger.info("Shutting down application")
    await close_graph_db_pool()
    await close_concepts_client()


async def http_exception_handler(
    _request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render framework-level HTTP errors in the same shape as brand errors."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description=settings.app_description,
        lifespan=lifespan,
    )

    _ = app.middleware("http")(request_context_middleware)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # pyright: ignore[reportArgumentType]

    # Include routers
    app.include_router(brands_router)

    return app


# Create the app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "public_brands_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="info" if not settings.debug else "debug",
    )
