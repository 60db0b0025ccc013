"""
Allocation Engine

Picks N contiguous, same-row, available seats from a seat snapshot.

Rules:
    - Rows are `seats_per_row` consecutive seats in id order; the last row may be short
    - A booked seat ends the current run of available seats
    - A run qualifies once it reaches `count` and `start_column + count <= seats_per_row`
    - The first qualifying run wins: lowest row, then lowest start column
    - Requests are never split across rows or across gaps

Pure functions only. Failures are raised as AllocationError subclasses and the
caller decides about logging, retries, and user messaging.
"""

from collections.abc import Sequence

from src.service.seat_booking.domain.allocation_error import (
    InsufficientContiguousCapacityError,
    InvalidRequestError,
)
from src.service.seat_booking.domain.entity.seat_entity import Seat
from src.service.seat_booking.domain.value_object.seat_selection import SeatSelection


def validate_count(count: object) -> int:
    # bool is an int subclass, True must not book one seat
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidRequestError(f'Seat count must be a positive integer, got {count!r}')
    if count <= 0:
        raise InvalidRequestError(f'Seat count must be a positive integer, got {count}')
    return count


def partition_rows(seats: Sequence[Seat], seats_per_row: int) -> list[Sequence[Seat]]:
    if seats_per_row <= 0:
        raise ValueError(f'seats_per_row must be positive, got {seats_per_row}')
    return [seats[start : start + seats_per_row] for start in range(0, len(seats), seats_per_row)]


def find_runs(row: Sequence[Seat]) -> list[tuple[int, int]]:
    """
    Maximal runs of available seats in one row.

    Returns:
        List of (start_column, length) pairs, left to right
    """
    runs: list[tuple[int, int]] = []
    start: int | None = None

    for column, seat in enumerate(row):
        if seat.is_available:
            if start is None:
                start = column
        elif start is not None:
            runs.append((start, column - start))
            start = None

    if start is not None:
        runs.append((start, len(row) - start))

    return runs


def _scan_row(row: Sequence[Seat], *, count: int, seats_per_row: int) -> int | None:
    """Start column of the first qualifying run in `row`, or None."""
    run_length = 0
    run_start = 0

    for column, seat in enumerate(row):
        if seat.booked:
            run_length = 0
            continue
        if run_length == 0:
            run_start = column
        run_length += 1
        if run_length >= count and run_start + count <= seats_per_row:
            return run_start

    return None


def allocate(*, seats: Sequence[Seat], count: int, seats_per_row: int) -> SeatSelection:
    """
    Select `count` contiguous available seats in a single row.

    Args:
        seats: Seat snapshot ordered by id (never mutated)
        count: Number of seats requested
        seats_per_row: Fixed row width of the chart

    Returns:
        SeatSelection of the leftmost qualifying run in the lowest row

    Raises:
        InvalidRequestError: count is not a positive integer
        InsufficientContiguousCapacityError: no row has `count` free contiguous seats
    """
    count = validate_count(count)

    for row_index, row in enumerate(partition_rows(seats, seats_per_row)):
        start_column = _scan_row(row, count=count, seats_per_row=seats_per_row)
        if start_column is None:
            continue

        chosen = row[start_column : start_column + count]
        # The scan only walks available seats, re-check before handing the block out
        if len(chosen) != count or any(seat.booked for seat in chosen):
            continue
        return SeatSelection(
            seat_ids=(seat.id for seat in chosen),
            row=row_index,
            start_column=start_column,
        )

    raise InsufficientContiguousCapacityError(
        count=count,
        available_seats=sum(1 for seat in seats if seat.is_available),
    )
