from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.seat_booking.app.dto import SeatingStats
from src.service.seat_booking.app.interface import ISeatStore
from src.service.seat_booking.domain.allocation_engine import find_runs
from src.service.seat_booking.domain.value_object.seating_chart import SeatingChart


class ListSeatsUseCase:
    def __init__(self, *, seat_store: ISeatStore) -> None:
        self.seat_store = seat_store

    @classmethod
    @inject
    def depends(cls, seat_store: ISeatStore = Depends(Provide[Container.seat_store])) -> Self:
        return cls(seat_store=seat_store)

    @Logger.io(truncate_content=True)
    async def list_seats(self) -> SeatingChart:
        return await self.seat_store.get_snapshot()

    @Logger.io
    async def get_stats(self) -> SeatingStats:
        chart = await self.seat_store.get_snapshot()
        largest = max(
            (length for row in chart.rows() for _, length in find_runs(row)),
            default=0,
        )
        return SeatingStats(
            total_seats=chart.total_seats,
            seats_per_row=chart.seats_per_row,
            booked_seats=chart.booked_count,
            available_seats=chart.available_count,
            largest_contiguous_block=largest,
        )
