"""FastAPI application for the Bullpen franchise engine."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bullpen import __version__
from bullpen.api.routers import (
    draft_router,
    finances_router,
    progression_router,
    season_router,
    training_router,
)
from bullpen.config import configure_logging, get_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    config = get_config()
    errors = config.validate()
    if errors:
        raise RuntimeError("Invalid configuration: " + "; ".join(errors))
    logger.info("Bullpen API starting up (draft class size %d)", config.draft_class_size)
    yield
    logger.info("Bullpen API shutting down")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Bullpen API",
        description="Minor league baseball franchise simulation engine",
        version=__version__,
        lifespan=lifespan,
    )

    # Configure CORS for frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://localhost:5173",  # Vite dev server
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(draft_router, prefix="/api/v1")
    app.include_router(training_router, prefix="/api/v1")
    app.include_router(finances_router, prefix="/api/v1")
    app.include_router(progression_router, prefix="/api/v1")
    app.include_router(season_router, prefix="/api/v1")

    return app


# Create app instance
app = create_app()


@app.get("/")
async def root() -> dict:
    """Root endpoint - API info."""
    return {
        "name": "Bullpen API",
        "version": __version__,
        "description": "Minor league baseball franchise simulation engine",
        "docs": "/docs",
    }


@app.get("/health")
async def health() -> dict:
    """Health check endpoint."""
    config = get_config()
    return {
        "status": "healthy",
        "seeded": config.seed is not None,
        "draft_class_size": config.draft_class_size,
    }


def run_api(
    host: Optional[str] = None, port: Optional[int] = None, reload: bool = False
) -> None:
    """Run the API server."""
    config = get_config()
    configure_logging()
    uvicorn.run(
        "bullpen.api.main:app",
        host=host or config.api_host,
        port=port or config.api_port,
        reload=reload,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    run_api(reload=True)
