"""
Seat Booking Service - Main Application

Serves the seating chart and books contiguous seat blocks.
Run with: uvicorn src.main:app
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import engine_manager
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Seat Booking] Starting up...')

    tracing = TracingConfig(service_name='seat-booking-service')
    tracing.setup()
    Logger.base.info('📊 [Seat Booking] OpenTelemetry tracing configured')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Seat Booking] Dependency injection wired')

    use_database = settings.SEAT_STORE_BACKEND == 'database'
    if use_database:
        tracing.instrument_sqlalchemy(engine=engine_manager.get_engine())
        Logger.base.info('🗄️  [Seat Booking] Database engine ready + instrumented')

    seat_store = container.seat_store()
    await seat_store.initialize()
    chart = await seat_store.get_snapshot()
    container.booking_metrics().update_seat_availability(
        available=chart.available_count, total=chart.total_seats
    )
    Logger.base.info(
        f'✅ [Seat Booking] Chart loaded: {chart.available_count}/{chart.total_seats} seats available'
    )

    yield

    Logger.base.info('🛑 [Seat Booking] Shutting down...')

    if use_database:
        await engine_manager.dispose()
        Logger.base.info('🗄️  [Seat Booking] Database engine disposed')

    tracing.shutdown()
    container.unwire()

    Logger.base.info('👋 [Seat Booking] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
