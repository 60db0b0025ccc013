from enum import StrEnum


class SeatStatus(StrEnum):
    AVAILABLE = 'available'
    BOOKED = 'booked'

    @classmethod
    def of(cls, *, booked: bool) -> 'SeatStatus':
        return cls.BOOKED if booked else cls.AVAILABLE
