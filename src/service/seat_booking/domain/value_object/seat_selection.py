import attrs


@attrs.define(frozen=True)
class SeatSelection:
    """Seats picked for one request: same row, column-contiguous, ordered by id."""

    seat_ids: tuple[int, ...] = attrs.field(converter=tuple)
    row: int
    start_column: int

    def __len__(self) -> int:
        return len(self.seat_ids)
