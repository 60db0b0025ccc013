"""Seating chart snapshot value object."""

from collections.abc import Iterable, Sequence
import math

import attrs

from src.service.seat_booking.domain.entity.seat_entity import Seat


def _check_contiguous_ids(instance: 'SeatingChart', attribute: attrs.Attribute, value: tuple) -> None:
    for position, seat in enumerate(value, start=1):
        if seat.id != position:
            raise ValueError(f'Seat ids must be 1..N in order, got id {seat.id} at position {position}')


def _check_positive(instance: 'SeatingChart', attribute: attrs.Attribute, value: int) -> None:
    if value <= 0:
        raise ValueError(f'{attribute.name} must be positive, got {value}')


@attrs.define(frozen=True)
class SeatingChart:
    """
    Immutable point-in-time copy of seat occupancy.

    Seats are ordered by id and partitioned into rows of `seats_per_row`; the
    final row may be shorter. Stores hand out charts, the allocation engine
    reads them, nobody mutates them.
    """

    seats: tuple[Seat, ...] = attrs.field(converter=tuple, validator=_check_contiguous_ids)
    seats_per_row: int = attrs.field(validator=_check_positive)

    @classmethod
    def fresh(cls, *, total_seats: int, seats_per_row: int) -> 'SeatingChart':
        """Chart with every seat unbooked (the result of a reset)."""
        return cls(
            seats=(Seat(id=seat_id) for seat_id in range(1, total_seats + 1)),
            seats_per_row=seats_per_row,
        )

    @classmethod
    def from_booked_flags(cls, *, booked: Iterable[bool], seats_per_row: int) -> 'SeatingChart':
        return cls(
            seats=(Seat(id=seat_id, booked=flag) for seat_id, flag in enumerate(booked, start=1)),
            seats_per_row=seats_per_row,
        )

    @property
    def total_seats(self) -> int:
        return len(self.seats)

    @property
    def booked_count(self) -> int:
        return sum(1 for seat in self.seats if seat.booked)

    @property
    def available_count(self) -> int:
        return self.total_seats - self.booked_count

    @property
    def row_count(self) -> int:
        return math.ceil(self.total_seats / self.seats_per_row)

    def rows(self) -> list[Sequence[Seat]]:
        return [
            self.seats[start : start + self.seats_per_row]
            for start in range(0, self.total_seats, self.seats_per_row)
        ]

    def get(self, seat_id: int) -> Seat:
        if not 1 <= seat_id <= self.total_seats:
            raise ValueError(f'Seat {seat_id} is not in this chart (1..{self.total_seats})')
        return self.seats[seat_id - 1]

    def row_of(self, seat_id: int) -> int:
        self.get(seat_id)
        return (seat_id - 1) // self.seats_per_row

    def column_of(self, seat_id: int) -> int:
        self.get(seat_id)
        return (seat_id - 1) % self.seats_per_row

    def are_adjacent(self, first_id: int, second_id: int) -> bool:
        return (
            self.row_of(first_id) == self.row_of(second_id)
            and abs(self.column_of(first_id) - self.column_of(second_id)) == 1
        )
