"""Reservation DTOs"""

import attrs


@attrs.define(frozen=True)
class ReservationResult:
    seat_ids: tuple[int, ...] = attrs.field(converter=tuple)
    row: int
    attempts: int

    @property
    def message(self) -> str:
        seats = ', '.join(str(seat_id) for seat_id in self.seat_ids)
        return f'Seats booked successfully: {seats}'


@attrs.define(frozen=True)
class SeatingStats:
    total_seats: int
    seats_per_row: int
    booked_seats: int
    available_seats: int
    largest_contiguous_block: int
