"""
Reserve Seats Use Case

Flow (repeated up to MAX_ALLOCATION_ATTEMPTS times):
1. Read a fresh snapshot from the seat store
2. Run the allocation engine on it
3. Compare-and-commit the selected seat ids
4. Commit rejected -> another request won the race, start over with a new snapshot

Invalid input and missing contiguous capacity are final answers and are not
retried; only commit conflicts are.
"""

import time
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import BookingMetrics
from src.service.seat_booking.app.dto import ReservationResult
from src.service.seat_booking.app.interface import ISeatStore
from src.service.seat_booking.domain.allocation_engine import allocate, validate_count
from src.service.seat_booking.domain.allocation_error import (
    InsufficientContiguousCapacityError,
    InvalidRequestError,
    StaleSnapshotError,
)


class ReserveSeatsUseCase:
    def __init__(
        self,
        *,
        seat_store: ISeatStore,
        booking_metrics: BookingMetrics,
        max_attempts: int = 3,
    ) -> None:
        if max_attempts < 1:
            raise ValueError('max_attempts must be at least 1')
        self.seat_store = seat_store
        self.booking_metrics = booking_metrics
        self.max_attempts = max_attempts
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        seat_store: ISeatStore = Depends(Provide[Container.seat_store]),
        booking_metrics: BookingMetrics = Depends(Provide[Container.booking_metrics]),
        config: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(
            seat_store=seat_store,
            booking_metrics=booking_metrics,
            max_attempts=config.MAX_ALLOCATION_ATTEMPTS,
        )

    @Logger.io
    async def reserve_seats(self, *, count: int) -> ReservationResult:
        started_at = time.perf_counter()
        result = 'success'
        try:
            return await self._reserve(count=count)
        except InvalidRequestError:
            result = 'invalid_request'
            raise
        except InsufficientContiguousCapacityError:
            result = 'insufficient_capacity'
            raise
        except StaleSnapshotError:
            result = 'stale_snapshot'
            raise
        except Exception:
            result = 'error'
            raise
        finally:
            self.booking_metrics.record_reservation(
                result=result, duration=time.perf_counter() - started_at
            )

    async def _reserve(self, *, count: int) -> ReservationResult:
        with self.tracer.start_as_current_span(
            'use_case.reserve_seats', attributes={'seat.count': str(count)}
        ) as span:
            count = validate_count(count)

            for attempt in range(1, self.max_attempts + 1):
                snapshot = await self.seat_store.get_snapshot()
                selection = allocate(
                    seats=snapshot.seats, count=count, seats_per_row=snapshot.seats_per_row
                )

                if await self.seat_store.compare_and_commit(seat_ids=selection.seat_ids):
                    span.set_attribute('seat.attempts', attempt)
                    # Gauge tracks the live store, concurrent commits included
                    current = await self.seat_store.get_snapshot()
                    self.booking_metrics.update_seat_availability(
                        available=current.available_count, total=current.total_seats
                    )
                    Logger.base.info(
                        f'✅ [RESERVE] Booked seats {list(selection.seat_ids)} '
                        f'in row {selection.row} (attempt {attempt})'
                    )
                    return ReservationResult(
                        seat_ids=selection.seat_ids, row=selection.row, attempts=attempt
                    )

                self.booking_metrics.record_commit_conflict()
                Logger.base.warning(
                    f'⚠️ [RESERVE] Seats {list(selection.seat_ids)} taken before commit, '
                    f'retrying ({attempt}/{self.max_attempts})'
                )

            raise StaleSnapshotError(count=count, attempts=self.max_attempts)
