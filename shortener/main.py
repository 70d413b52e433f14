"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shortener.config import configure_logging, get_settings
from shortener.core import container
from shortener.database import dispose_engine, initialize_database
from shortener.infrastructure.common.error_mapping import register_exception_handlers
from shortener.infrastructure.identity.auth.hmac_token_digester import (
    UnsupportedHmacAlgorithmError,
)
from shortener.infrastructure.identity.routers import auth, users
from shortener.infrastructure.shortening.routers import redirect, shortener

settings = get_settings()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Configure logging and the database for the lifetime of the app."""
    configure_logging(settings.ENVIRONMENT)
    initialize_database(settings)
    try:
        container.token_digester()
    except UnsupportedHmacAlgorithmError as e:
        logger.error("invalid_configuration", code=e.code, error=str(e))
        raise
    logger.info(
        "application_started",
        environment=settings.ENVIRONMENT,
        store_backend=settings.STORE_BACKEND,
    )
    yield
    dispose_engine()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/health", tags=["health"])
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


app.include_router(shortener.router, prefix=settings.API_V1_PREFIX)
app.include_router(auth.router, prefix=settings.API_V1_PREFIX)
app.include_router(users.router, prefix=settings.API_V1_PREFIX)
# Catch-all /{code}; must stay last
app.include_router(redirect.router)
