"""FastAPI application for the blogstore REST API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from blogstore import __version__
from blogstore.api.middleware import api_key_middleware
from blogstore.api.routes import health, posts
from blogstore.core import config
from blogstore.core.errors import MissingHeader, StoreError, StoreIOError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("blogstore API starting up (posts dir: %s)", config.get_posts_dir())
    yield
    logger.info("blogstore API shutting down...")


def _status_for(exc: StoreError) -> int:
    if isinstance(exc, MissingHeader):
        return 422
    if isinstance(exc, StoreIOError) and exc.not_found:
        return 404
    return 500


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    """Translate store failures into JSON error responses."""
    status_code = _status_for(exc)
    log = logger.error if status_code >= 500 else logger.warning
    log("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "kind": str(exc.kind)},
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="blogstore API",
        description="REST API for blog posts stored as Markdown files",
        version=__version__,
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.BLOGSTORE_CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add API key authentication middleware
    app.middleware("http")(api_key_middleware)

    app.add_exception_handler(StoreError, store_error_handler)

    # Include routers
    app.include_router(health.router, prefix="/api/v1", tags=["Health"])
    app.include_router(posts.router, prefix="/api/v1", tags=["Posts"])

    return app


# Create the default app instance
app = create_app()


def run_server(host: str | None = None, port: int | None = None):
    """Run the API server."""
    import uvicorn

    uvicorn.run(
        "blogstore.api.app:app",
        host=host or config.BLOGSTORE_HOST,
        port=port or config.BLOGSTORE_PORT,
        reload=False,
    )


if __name__ == "__main__":
    run_server()
