"""
Seat Store Interface

The store owns the authoritative seat state. Callers only ever see
SeatingChart snapshots and change state through compare-and-commit or reset.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from src.service.seat_booking.domain.value_object.seating_chart import SeatingChart


class ISeatStore(ABC):
    @abstractmethod
    async def initialize(self) -> None:
        """Prepare storage and create the chart (all seats unbooked) if it does not exist yet."""
        pass

    @abstractmethod
    async def get_snapshot(self) -> SeatingChart:
        """Current seat occupancy as an immutable copy."""
        pass

    @abstractmethod
    async def compare_and_commit(self, *, seat_ids: Sequence[int]) -> bool:
        """
        Atomically book `seat_ids` if every one of them is still unbooked.

        Returns:
            True if all seats were booked, False if any was already booked
            (in which case nothing changes)
        """
        pass

    @abstractmethod
    async def reset(self) -> SeatingChart:
        """Clear all bookings, keeping seat count and row width."""
        pass
