"""
In-Memory Seat Store

Seat state lives in a flat arena of booked flags indexed by `seat_id - 1`.
Snapshots are copies; the arena itself never leaves this class.
"""

from collections.abc import Sequence

import anyio

from src.platform.logging.loguru_io import Logger
from src.service.seat_booking.app.interface.i_seat_store import ISeatStore
from src.service.seat_booking.domain.value_object.seating_chart import SeatingChart


class InMemorySeatStore(ISeatStore):
    def __init__(self, *, total_seats: int, seats_per_row: int) -> None:
        self._total_seats = total_seats
        self._seats_per_row = seats_per_row
        self._booked: list[bool] = [False] * total_seats
        self._lock = anyio.Lock()

    async def initialize(self) -> None:
        Logger.base.info(
            f'💺 [SEAT-STORE] In-memory chart ready: {self._total_seats} seats, '
            f'{self._seats_per_row} per row'
        )

    async def get_snapshot(self) -> SeatingChart:
        async with self._lock:
            return SeatingChart.from_booked_flags(
                booked=tuple(self._booked), seats_per_row=self._seats_per_row
            )

    @Logger.io
    async def compare_and_commit(self, *, seat_ids: Sequence[int]) -> bool:
        indices = [seat_id - 1 for seat_id in seat_ids]
        if not indices or len(set(indices)) != len(indices):
            return False
        if any(not 0 <= index < self._total_seats for index in indices):
            return False

        async with self._lock:
            if any(self._booked[index] for index in indices):
                Logger.base.debug(f'⏳ [SEAT-STORE] Commit rejected, seats taken: {list(seat_ids)}')
                return False
            for index in indices:
                self._booked[index] = True
            return True

    @Logger.io
    async def reset(self) -> SeatingChart:
        async with self._lock:
            self._booked = [False] * self._total_seats
        return SeatingChart.fresh(total_seats=self._total_seats, seats_per_row=self._seats_per_row)
