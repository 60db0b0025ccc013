from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import BookingMetrics
from src.service.seat_booking.app.interface import ISeatStore
from src.service.seat_booking.domain.value_object.seating_chart import SeatingChart


class ResetSeatsUseCase:
    def __init__(self, *, seat_store: ISeatStore, booking_metrics: BookingMetrics) -> None:
        self.seat_store = seat_store
        self.booking_metrics = booking_metrics

    @classmethod
    @inject
    def depends(
        cls,
        seat_store: ISeatStore = Depends(Provide[Container.seat_store]),
        booking_metrics: BookingMetrics = Depends(Provide[Container.booking_metrics]),
    ) -> Self:
        return cls(seat_store=seat_store, booking_metrics=booking_metrics)

    @Logger.io
    async def reset(self) -> SeatingChart:
        chart = await self.seat_store.reset()
        self.booking_metrics.record_reset()
        self.booking_metrics.update_seat_availability(
            available=chart.available_count, total=chart.total_seats
        )
        Logger.base.info(f'🔄 [RESET] All {chart.total_seats} seats released')
        return chart
