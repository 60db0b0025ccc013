"""
PostgreSQL Seat Store

One row per seat in the `seat` table. Compare-and-commit is a single
conditional UPDATE inside a transaction: it only counts when every requested
row still had booked = false, otherwise the transaction is rolled back.
"""

from collections.abc import Awaitable, Callable, Sequence
from contextlib import AbstractAsyncContextManager

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import create_db_and_tables
from src.platform.logging.loguru_io import Logger
from src.service.seat_booking.app.interface.i_seat_store import ISeatStore
from src.service.seat_booking.domain.entity.seat_entity import Seat
from src.service.seat_booking.domain.value_object.seating_chart import SeatingChart
from src.service.seat_booking.driven_adapter.model.seat_model import SeatModel


SessionFactory = Callable[[], AbstractAsyncContextManager[AsyncSession]]


class SeatStoreSqlalchemyImpl(ISeatStore):
    def __init__(
        self,
        *,
        session_factory: SessionFactory,
        total_seats: int,
        seats_per_row: int,
        create_tables: Callable[[], Awaitable[None]] = create_db_and_tables,
    ) -> None:
        self.session_factory = session_factory
        self.total_seats = total_seats
        self.seats_per_row = seats_per_row
        self._create_tables = create_tables

    @Logger.io
    async def initialize(self) -> None:
        await self._create_tables()
        async with self.session_factory() as session:
            existing = await session.scalar(select(func.count()).select_from(SeatModel))
            if existing:
                if existing != self.total_seats:
                    Logger.base.warning(
                        f'⚠️ [SEAT-STORE] Chart already has {existing} seats, '
                        f'ignoring TOTAL_SEATS={self.total_seats}'
                    )
                return

            session.add_all(
                [SeatModel(id=seat_id, booked=False) for seat_id in range(1, self.total_seats + 1)]
            )
            await session.commit()
            Logger.base.info(f'💺 [SEAT-STORE] Seeded {self.total_seats} seats')

    async def get_snapshot(self) -> SeatingChart:
        async with self.session_factory() as session:
            result = await session.execute(
                select(SeatModel.id, SeatModel.booked).order_by(SeatModel.id)
            )
            rows = result.all()

        return SeatingChart(
            seats=(Seat(id=row.id, booked=row.booked) for row in rows),
            seats_per_row=self.seats_per_row,
        )

    @Logger.io
    async def compare_and_commit(self, *, seat_ids: Sequence[int]) -> bool:
        ids = list(seat_ids)
        if not ids or len(set(ids)) != len(ids):
            return False

        stmt = (
            update(SeatModel)
            .where(SeatModel.id.in_(ids), SeatModel.booked.is_(False))
            .values(booked=True)
            .execution_options(synchronize_session=False)
        )

        async with self.session_factory() as session:
            result = await session.execute(stmt)
            if result.rowcount != len(ids):  # type: ignore[attr-defined]
                await session.rollback()
                Logger.base.debug(f'⏳ [SEAT-STORE] Commit rejected, seats taken: {ids}')
                return False
            await session.commit()
            return True

    @Logger.io
    async def reset(self) -> SeatingChart:
        async with self.session_factory() as session:
            await session.execute(
                update(SeatModel)
                .values(booked=False)
                .execution_options(synchronize_session=False)
            )
            total = await session.scalar(select(func.count()).select_from(SeatModel))
            await session.commit()

        return SeatingChart.fresh(total_seats=total or 0, seats_per_row=self.seats_per_row)
