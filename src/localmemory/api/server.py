import logging
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from localmemory import __version__
from localmemory.api.errors import ERROR_HEADER, error_body
from localmemory.api.routes import auth, documents, health, workspace
from localmemory.application.settings import (
    ServerSettings,
    ensure_directories,
    load_settings,
)
from localmemory.application.workspace_fixtures import WorkspaceFixtures

logger = structlog.get_logger()


def configure_logging(level_name: str) -> None:
    """Configure stdlib logging and structlog with the same level."""
    log_level = logging.getLevelName(level_name.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    logging.basicConfig(level=log_level, format="%(message)s")
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )


async def local_memory_http_exception_handler(
    request: Request,
    exc: HTTPException,
) -> JSONResponse:
    """Return standardized error responses for tagged exceptions."""
    if (
        exc.headers
        and exc.headers.get(ERROR_HEADER) == "1"
        and isinstance(exc.detail, dict)
    ):
        return JSONResponse(status_code=exc.status_code, content=exc.detail)
    return await http_exception_handler(request, exc)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Turn an unexpected failure into a generic 500 for this request only."""
    logger.error(
        "request.unhandled_error",
        method=request.method,
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("internal_error", "Internal server error"),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create storage directories on startup."""
    settings: ServerSettings = app.state.settings
    ensure_directories(settings)
    await logger.ainfo(
        "fastapi.startup",
        message="Local memory server starting...",
        port=settings.port,
        memory_dir=str(settings.memory_dir),
    )
    yield
    await logger.ainfo(
        "fastapi.shutdown", message="Local memory server shutting down..."
    )


def create_app(settings: ServerSettings | None = None) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        settings: Server settings; loaded from file/environment when omitted.

    Returns:
        Configured FastAPI application
    """
    settings = settings or load_settings()

    app = FastAPI(
        title="Local Memory API",
        description="Offline document store compatible with the memory service API",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.fixtures = WorkspaceFixtures()

    app.add_exception_handler(HTTPException, local_memory_http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.include_router(documents.router, prefix="/v3", tags=["documents"])
    app.include_router(workspace.router, prefix="/v3", tags=["workspace"])
    app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
    app.include_router(health.router, tags=["health"])

    return app


def run(settings: ServerSettings) -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    configure_logging(settings.log_level)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run(load_settings())
