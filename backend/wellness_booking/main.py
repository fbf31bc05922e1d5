"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wellness_booking.auth import AuthService
from wellness_booking.config import Settings, settings as default_settings
from wellness_booking.database import Database
from wellness_booking.middleware.error_handler import register_error_handlers

# Import routers
from wellness_booking.routers import auth, events, event_types

# Import all models so Base.metadata knows about them
from wellness_booking.models.user import User              # noqa: F401
from wellness_booking.models.event_type import EventType   # noqa: F401
from wellness_booking.models.event import Event, ProposedDate  # noqa: F401

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging, create tables for SQLite dev mode, dispose the engine on exit."""
    app_settings: Settings = app.state.settings
    logging.basicConfig(
        level=app_settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    database: Database = app.state.database
    if database.is_sqlite:
        database.create_all()
    logger.info("Wellness booking API started")
    yield
    database.dispose()


def create_app(app_settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Build the app around an explicitly constructed database."""
    app_settings = app_settings or default_settings

    app = FastAPI(
        title="Wellness Booking",
        description="HR proposes three dates for a wellness event, the vendor confirms one or rejects",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.database = database or Database(app_settings.DATABASE_URL)
    app.state.auth_service = AuthService(app_settings)

    register_error_handlers(app)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS.split(","),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    prefix = app_settings.API_PREFIX
    app.include_router(auth.router, prefix=f"{prefix}/auth", tags=["Auth"])
    app.include_router(event_types.router, prefix=f"{prefix}/event-types", tags=["EventTypes"])
    app.include_router(events.router, prefix=f"{prefix}/events", tags=["Events"])

    @app.get(f"{prefix}/health")
    def health_check():
        return {"status": "ok"}

    return app


app = create_app()
