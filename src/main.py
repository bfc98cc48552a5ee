"""
Production FastAPI Application

Venue booking engine: layouts, shows, seat availability, bookings.
Show statuses are reconciled lazily when shows are listed; there is no background task.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import cleanup, container, setup
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import create_db_and_tables, dispose_engine, get_engine
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Venue Booking] Starting up...')

    tracing = TracingConfig(service_name='venue-booking')
    tracing.setup()
    Logger.base.info('📊 [Venue Booking] OpenTelemetry tracing configured')

    setup()
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Venue Booking] Dependency injection wired')

    tracing.instrument_sqlalchemy(engine=get_engine())
    await create_db_and_tables()
    Logger.base.info('🗄️  [Venue Booking] Database engine ready + tables ensured')

    Logger.base.info('✅ [Venue Booking] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Venue Booking] Shutting down...')

    await dispose_engine()
    Logger.base.info('🗄️  [Venue Booking] Database engine disposed')

    tracing.shutdown()
    container.unwire()
    cleanup()

    Logger.base.info('👋 [Venue Booking] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
