#!/usr/bin/env python3
"""
Seat Reset Script
Reset the PostgreSQL seating chart

Features:
1. Create the `seat` table if it does not exist
2. Seed TOTAL_SEATS unbooked seats on an empty table
3. Release every booking on an existing chart

Notes:
- Uses POSTGRES_* settings from .env regardless of SEAT_STORE_BACKEND
- The running service sees the reset immediately, no restart needed
"""

import asyncio
import sys

from src.platform.config.core_setting import settings
from src.platform.database.orm_db_setting import Database, engine_manager
from src.service.seat_booking.driven_adapter.repo.seat_store_sqlalchemy_impl import (
    SeatStoreSqlalchemyImpl,
)


async def main() -> None:
    print('🔄 Starting seat reset...')
    print('=' * 50)
    print(f'Database: {settings.POSTGRES_SERVER}:{settings.POSTGRES_PORT}/{settings.POSTGRES_DB}')

    store = SeatStoreSqlalchemyImpl(
        session_factory=Database().session,
        total_seats=settings.TOTAL_SEATS,
        seats_per_row=settings.SEATS_PER_ROW,
    )

    try:
        await store.initialize()
        chart = await store.reset()
        print(f'✅ {chart.total_seats} seats reset ({chart.row_count} rows of {chart.seats_per_row})')
    except Exception as e:
        print(f'❌ Reset failed: {e}')
        sys.exit(1)
    finally:
        await engine_manager.dispose()

    print('=' * 50)


if __name__ == '__main__':
    asyncio.run(main())
