"""
FastAPI main application for the Books REST API.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api.config import APIConfig, config
from api.errors import register_exception_handlers
from api.models import HealthResponse
from api.routes import router as books_router
from api.store import BookStore, seed_books

# Setup logging
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Books REST API", book_count=len(app.state.store))
    yield
    logger.info("Shutting down Books REST API")


def create_app(settings: Optional[APIConfig] = None, store: Optional[BookStore] = None) -> FastAPI:
    """
    Build the FastAPI application around a book store.

    Args:
        settings: API settings, defaults to the global ``config``
        store: Store to serve; a new one is created when omitted, seeded
            with the sample books if ``settings.seed_sample_books`` is set

    Returns:
        Configured FastAPI application
    """
    settings = settings or config
    if store is None:
        store = BookStore(seed_books() if settings.seed_sample_books else None)

    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan
    )
    app.state.store = store
    app.state.settings = settings

    register_exception_handlers(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.include_router(books_router)

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check(request: Request):
        """Health check endpoint."""
        return HealthResponse(
            status="healthy",
            timestamp=datetime.now(timezone.utc),
            version=request.app.state.settings.api_version,
            book_count=len(request.app.state.store)
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level=config.log_level.lower()
    )
