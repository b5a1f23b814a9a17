"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures routers and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import run_migrations
from src.api.auth import router as auth_router
from src.api.dependencies import build_otp_dispatcher
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "auth",
        "description": "Account signup with one-time passcode dispatch",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Creates database connection pool on startup
    - Runs migrations on startup
    - Creates the OTP dispatcher
    - Closes connection pool and dispatcher on shutdown
    """
    settings = get_settings()

    logger.info("Starting application...")
    logger.info("Connecting to database...")

    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
    )
    otp_dispatcher = None

    try:
        logger.info("Running database migrations...")
        run_migrations(pool)

        # Store shared resources in app state for dependency injection
        otp_dispatcher = build_otp_dispatcher(settings)
        app.state.pool = pool
        app.state.otp_dispatcher = otp_dispatcher
        logger.info("OTP dispatcher: %s", settings.otp_dispatcher)

        logger.info("Application startup complete")

        yield
    finally:
        logger.info("Shutting down application...")
        close = getattr(otp_dispatcher, "close", None)
        if close is not None:
            close()
        pool.close()
        logger.info("Database connection pool closed")


app = FastAPI(
    title="signup-otp",
    description="Account signup API - stores bcrypt-hashed credentials and requests a one-time passcode",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

app.include_router(auth_router, prefix="/api/auth")


@app.get("/health")
def health_check(request: Request) -> dict[str, str]:
    """
    Health check endpoint with database validation.

    Returns 200 OK if application and database are healthy.
    Raises exception if database connection fails.
    """
    pool = request.app.state.pool
    with pool.connection() as conn:
        conn.execute("SELECT 1")

    return {"status": "healthy"}
