"""
Unit tests for ReserveSeatsUseCase

Tests:
- Snapshot -> allocate -> compare-and-commit flow
- Retry on commit conflicts, StaleSnapshotError once attempts run out
- Final failures (invalid count, no capacity) are not retried
- Two concurrent requests racing for the same row
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import anyio
import pytest

from src.service.seat_booking.app.command.reserve_seats_use_case import ReserveSeatsUseCase
from src.service.seat_booking.domain.allocation_error import (
    InsufficientContiguousCapacityError,
    InvalidRequestError,
    StaleSnapshotError,
)
from src.service.seat_booking.domain.value_object.seating_chart import SeatingChart
from src.service.seat_booking.driven_adapter.state.in_memory_seat_store import InMemorySeatStore
from test.shared.seat_utils import make_chart


@pytest.fixture
def mock_metrics() -> MagicMock:
    return MagicMock()


@pytest.fixture
def mock_seat_store() -> AsyncMock:
    store = AsyncMock()
    store.get_snapshot = AsyncMock(return_value=make_chart(80, 7))
    store.compare_and_commit = AsyncMock(return_value=True)
    return store


@pytest.fixture
def use_case(mock_seat_store: AsyncMock, mock_metrics: MagicMock) -> ReserveSeatsUseCase:
    return ReserveSeatsUseCase(seat_store=mock_seat_store, booking_metrics=mock_metrics, max_attempts=3)


class TestReserveSeatsFlow:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_books_leftmost_block_first_try(
        self, use_case: ReserveSeatsUseCase, mock_seat_store: AsyncMock, mock_metrics: MagicMock
    ) -> None:
        mock_seat_store.get_snapshot.side_effect = [
            make_chart(80, 7),
            make_chart(80, 7, booked=[1, 2, 3]),
        ]

        result = await use_case.reserve_seats(count=3)

        assert result.seat_ids == (1, 2, 3)
        assert result.row == 0
        assert result.attempts == 1
        assert result.message == 'Seats booked successfully: 1, 2, 3'
        mock_seat_store.compare_and_commit.assert_awaited_once_with(seat_ids=(1, 2, 3))
        mock_metrics.record_reservation.assert_called_once()
        assert mock_metrics.record_reservation.call_args.kwargs['result'] == 'success'
        mock_metrics.update_seat_availability.assert_called_once_with(available=77, total=80)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_retries_with_fresh_snapshot_after_conflict(
        self, use_case: ReserveSeatsUseCase, mock_seat_store: AsyncMock, mock_metrics: MagicMock
    ) -> None:
        # Someone took seats 1-3 between our read and our commit
        mock_seat_store.get_snapshot.side_effect = [
            make_chart(80, 7),
            make_chart(80, 7, booked=[1, 2, 3]),
            make_chart(80, 7, booked=[1, 2, 3, 4, 5, 6]),
        ]
        mock_seat_store.compare_and_commit.side_effect = [False, True]

        result = await use_case.reserve_seats(count=3)

        assert result.seat_ids == (4, 5, 6)
        assert result.attempts == 2
        assert mock_seat_store.get_snapshot.await_count == 3
        mock_metrics.record_commit_conflict.assert_called_once()
        mock_metrics.update_seat_availability.assert_called_once_with(available=74, total=80)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_availability_gauge_includes_concurrent_bookings(
        self, use_case: ReserveSeatsUseCase, mock_seat_store: AsyncMock, mock_metrics: MagicMock
    ) -> None:
        # Another request committed row 1 while ours was in flight
        mock_seat_store.get_snapshot.side_effect = [
            make_chart(80, 7),
            make_chart(80, 7, booked=[1, 2, *range(8, 15)]),
        ]

        await use_case.reserve_seats(count=2)

        mock_metrics.update_seat_availability.assert_called_once_with(available=71, total=80)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_stale_snapshot_after_max_attempts(
        self, use_case: ReserveSeatsUseCase, mock_seat_store: AsyncMock, mock_metrics: MagicMock
    ) -> None:
        mock_seat_store.compare_and_commit.return_value = False

        with pytest.raises(StaleSnapshotError) as exc_info:
            await use_case.reserve_seats(count=2)

        assert exc_info.value.attempts == 3
        assert exc_info.value.status_code == 409
        assert mock_seat_store.compare_and_commit.await_count == 3
        assert mock_metrics.record_commit_conflict.call_count == 3
        assert mock_metrics.record_reservation.call_args.kwargs['result'] == 'stale_snapshot'


class TestReserveSeatsFailures:
    @pytest.mark.unit
    @pytest.mark.asyncio
    @pytest.mark.parametrize('count', [0, -2, True])
    async def test_invalid_count_never_touches_store(
        self,
        use_case: ReserveSeatsUseCase,
        mock_seat_store: AsyncMock,
        mock_metrics: MagicMock,
        count: int,
    ) -> None:
        with pytest.raises(InvalidRequestError):
            await use_case.reserve_seats(count=count)

        mock_seat_store.get_snapshot.assert_not_awaited()
        assert mock_metrics.record_reservation.call_args.kwargs['result'] == 'invalid_request'

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_no_capacity_is_not_retried(
        self, use_case: ReserveSeatsUseCase, mock_seat_store: AsyncMock, mock_metrics: MagicMock
    ) -> None:
        mock_seat_store.get_snapshot.return_value = make_chart(14, 7, booked=range(1, 15))

        with pytest.raises(InsufficientContiguousCapacityError):
            await use_case.reserve_seats(count=1)

        assert mock_seat_store.get_snapshot.await_count == 1
        mock_seat_store.compare_and_commit.assert_not_awaited()
        assert mock_metrics.record_reservation.call_args.kwargs['result'] == 'insufficient_capacity'

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_store_failure_recorded_as_error(
        self, use_case: ReserveSeatsUseCase, mock_seat_store: AsyncMock, mock_metrics: MagicMock
    ) -> None:
        mock_seat_store.get_snapshot.side_effect = ConnectionError('seat store unreachable')

        with pytest.raises(ConnectionError):
            await use_case.reserve_seats(count=2)

        mock_metrics.record_reservation.assert_called_once()
        assert mock_metrics.record_reservation.call_args.kwargs['result'] == 'error'
        mock_metrics.update_seat_availability.assert_not_called()

    @pytest.mark.unit
    def test_max_attempts_must_be_positive(
        self, mock_seat_store: AsyncMock, mock_metrics: MagicMock
    ) -> None:
        with pytest.raises(ValueError):
            ReserveSeatsUseCase(seat_store=mock_seat_store, booking_metrics=mock_metrics, max_attempts=0)


class _BarrierSeatStore(InMemorySeatStore):
    """Holds every reader until `readers` snapshots were taken, forcing a race."""

    def __init__(self, *, readers: int, **kwargs: int) -> None:
        super().__init__(**kwargs)
        self._readers = readers
        self._arrived = 0
        self._all_arrived = anyio.Event()

    async def get_snapshot(self) -> SeatingChart:
        snapshot = await super().get_snapshot()
        if not self._all_arrived.is_set():
            self._arrived += 1
            if self._arrived >= self._readers:
                self._all_arrived.set()
            await self._all_arrived.wait()
        return snapshot


class TestConcurrentReservations:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_loser_retries_into_next_row(self, mock_metrics: MagicMock) -> None:
        """
        Two requests for 5 seats read the same empty chart and both pick 1-5.
        Exactly one commit wins; the other re-reads and gets 8-12.
        """
        store = _BarrierSeatStore(readers=2, total_seats=14, seats_per_row=7)
        use_case = ReserveSeatsUseCase(seat_store=store, booking_metrics=mock_metrics, max_attempts=3)

        first, second = await asyncio.gather(
            use_case.reserve_seats(count=5),
            use_case.reserve_seats(count=5),
        )

        assert sorted([first.seat_ids, second.seat_ids]) == [(1, 2, 3, 4, 5), (8, 9, 10, 11, 12)]
        assert sorted([first.attempts, second.attempts]) == [1, 2]
        mock_metrics.record_commit_conflict.assert_called_once()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_last_row_contested_one_gets_insufficient(self, mock_metrics: MagicMock) -> None:
        store = _BarrierSeatStore(readers=2, total_seats=14, seats_per_row=7)
        await store.compare_and_commit(seat_ids=list(range(1, 8)))
        use_case = ReserveSeatsUseCase(seat_store=store, booking_metrics=mock_metrics, max_attempts=3)

        results = await asyncio.gather(
            use_case.reserve_seats(count=7),
            use_case.reserve_seats(count=7),
            return_exceptions=True,
        )

        successes = [r for r in results if not isinstance(r, BaseException)]
        failures = [r for r in results if isinstance(r, BaseException)]
        assert len(successes) == 1
        assert successes[0].seat_ids == (8, 9, 10, 11, 12, 13, 14)
        assert len(failures) == 1
        assert isinstance(failures[0], InsufficientContiguousCapacityError)
        mock_metrics.record_commit_conflict.assert_called_once()
        assert (await store.get_snapshot()).available_count == 0
