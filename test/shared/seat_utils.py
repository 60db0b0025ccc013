from collections.abc import Iterable

from src.service.seat_booking.domain.entity.seat_entity import Seat
from src.service.seat_booking.domain.value_object.seating_chart import SeatingChart


def make_seats(total: int, booked: Iterable[int] = ()) -> tuple[Seat, ...]:
    """Seats 1..total with the given ids booked."""
    booked_ids = set(booked)
    return tuple(Seat(id=seat_id, booked=seat_id in booked_ids) for seat_id in range(1, total + 1))


def make_chart(total: int, seats_per_row: int, booked: Iterable[int] = ()) -> SeatingChart:
    return SeatingChart(seats=make_seats(total, booked), seats_per_row=seats_per_row)


def parse_layout(layout: str) -> tuple[Seat, ...]:
    """
    Build seats from a row layout string, '.' free and 'x' booked.

    Rows are separated by '|' for readability only:
        parse_layout('..x....|.......') -> 14 seats, seat 3 booked
    """
    flags = [char == 'x' for char in layout if char in '.x']
    return tuple(Seat(id=seat_id, booked=flag) for seat_id, flag in enumerate(flags, start=1))
