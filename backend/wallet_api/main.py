"""Wallet API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map WalletError → structured JSON responses
    - Database initialized on startup via lifespan context manager
    - Swagger UI served at /api/docs
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from wallet_api.api.error_handlers import register_error_handlers
from wallet_api.api.routes import auth, health, transactions, users
from wallet_api.config import get_settings
from wallet_api.infrastructure.database import init_db
from wallet_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_auto_create:
        await manager.create_schema()
    logger.info("Wallet API started")
    yield
    await manager.dispose()
    logger.info("Wallet API shutting down")


app = FastAPI(
    title="Wallet API",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/api/docs",
    openapi_url="/api/docs/openapi.json",
    redoc_url=None,
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(transactions.router)

register_error_handlers(app)
