"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures routes and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, status
from psycopg_pool import ConnectionPool

from signup.adapters.repository.memory import InMemoryAccountRepository
from signup.adapters.repository.postgres import PostgresAccountRepository, ensure_schema
from signup.api.dependencies import build_email_sender, get_repository
from signup.api.v1 import router as v1_router
from signup.config.settings import get_settings
from signup.domain.exceptions import PersistenceFailed
from signup.domain.ports import AccountRepository

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Signup API v1 - Register inactive user accounts",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Creates the account store (PostgreSQL pool or in-memory)
    - Creates the accounts table on startup
    - Starts the activation email thread pool
    - Closes pool and executor on shutdown
    """
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    logger.info("Starting application...")

    pool: ConnectionPool | None = None
    if settings.account_store == "postgres":
        logger.info("Connecting to database...")
        pool = ConnectionPool(
            conninfo=settings.database_url,
            min_size=settings.pool_min_size,
            max_size=settings.pool_max_size,
        )
        ensure_schema(pool)
        app.state.account_repository = PostgresAccountRepository(pool)
    else:
        logger.info("Using in-memory account store")
        app.state.account_repository = InMemoryAccountRepository()

    app.state.email_sender = build_email_sender(settings)
    executor = ThreadPoolExecutor(
        max_workers=settings.notification_workers,
        thread_name_prefix="activation-email",
    )
    app.state.notification_executor = executor

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    executor.shutdown(wait=True)
    logger.info("Notification executor stopped")
    if pool is not None:
        pool.close()
        logger.info("Database connection pool closed")


app = FastAPI(
    title="signup",
    description="User registration API - Creates inactive accounts and sends activation tokens",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

# Include v1 API routes
app.include_router(v1_router, prefix="/api/1.0")


@app.get("/health")
def health_check(repository: AccountRepository = Depends(get_repository)) -> dict[str, str]:
    """
    Health check endpoint with account store validation.

    Returns 200 OK if application and account store are healthy,
    503 otherwise.
    """
    try:
        repository.ping()
    except PersistenceFailed:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Account store unavailable",
        ) from None

    return {"status": "healthy"}
