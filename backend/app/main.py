"""Inventory Tracker API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map InventoryError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager
    - A database failure at startup is logged; the process keeps serving (degraded)
    - Running with the placeholder JWT secret is logged as a warning at startup

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Three error handler layers: InventoryError (domain), RequestValidationError
      (Pydantic), Exception (catch-all) — never leaks internal details
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import app.infrastructure.database as database
from app.api.error_handlers import register_error_handlers
from app.api.routes import admin, auth, health, inventories, items, site_content
from app.config import DEFAULT_JWT_SECRET, Settings, get_settings
from app.infrastructure.observability import setup_logging
from app.services.seed_data import ensure_admin_account, seed_demo_data

logger = logging.getLogger(__name__)


def warn_on_default_secret(settings: Settings) -> bool:
    """Log a warning when tokens are signed with the placeholder secret."""
    if settings.jwt_secret != DEFAULT_JWT_SECRET:
        return False
    logger.warning(
        "JWT_SECRET is not set: tokens are signed with the public default key",
    )
    return True


async def prepare_database(settings: Settings) -> None:
    """Create tables and seed startup data as configured."""
    manager = database.db_manager
    if settings.database_create_tables:
        await manager.create_all()
    async with manager.session() as db:
        if settings.admin_email and settings.admin_password:
            await ensure_admin_account(db, settings.admin_email, settings.admin_password)
        if settings.seed_demo_data and await seed_demo_data(db):
            logger.info("Database seeded with sample inventories")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    warn_on_default_secret(settings)
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    try:
        await prepare_database(settings)
    except Exception as e:
        logger.error(
            f"Database initialization failed, serving in degraded mode: {e}",
            exc_info=True,
        )
    logger.info("Inventory Tracker API started")
    yield
    logger.info("Inventory Tracker API shutting down")
    await database.db_manager.dispose()


app = FastAPI(
    title="Inventory Tracker API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(inventories.router)
app.include_router(items.router)
app.include_router(admin.router)
app.include_router(site_content.router)

register_error_handlers(app)
