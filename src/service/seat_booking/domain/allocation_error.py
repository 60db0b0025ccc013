"""
Allocation failures.

- InvalidRequestError: bad input, the client has to change the request
- InsufficientContiguousCapacityError: no single row can hold the block right now
- StaleSnapshotError: every commit attempt lost a race, safe to retry later
"""

from src.platform.exception.exceptions import DomainError


class AllocationError(DomainError):
    pass


class InvalidRequestError(AllocationError):
    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=400)


class InsufficientContiguousCapacityError(AllocationError):
    def __init__(self, *, count: int, available_seats: int) -> None:
        self.count = count
        self.available_seats = available_seats
        if available_seats < count:
            message = f'Not enough available seats: requested {count}, {available_seats} left'
        else:
            message = f'Unable to find {count} consecutive seats in a single row'
        super().__init__(message, status_code=409)


class StaleSnapshotError(AllocationError):
    def __init__(self, *, count: int, attempts: int) -> None:
        self.count = count
        self.attempts = attempts
        super().__init__(
            f'Seats changed while booking {count} seats, gave up after {attempts} attempts',
            status_code=409,
        )
