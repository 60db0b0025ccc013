from typing import List

import attrs
from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.seat_booking.app.command.reserve_seats_use_case import ReserveSeatsUseCase
from src.service.seat_booking.app.command.reset_seats_use_case import ResetSeatsUseCase
from src.service.seat_booking.app.query.list_seats_use_case import ListSeatsUseCase
from src.service.seat_booking.domain.enum.seat_status import SeatStatus
from src.service.seat_booking.driving_adapter.http_controller.schema.booking_schema import (
    ReserveSeatsRequest,
    ReserveSeatsResponse,
    ResetSeatsResponse,
    SeatingStatsResponse,
    SeatResponse,
)


router = APIRouter()


@router.get('/view')
@Logger.io(truncate_content=True)
async def view_seats(
    use_case: ListSeatsUseCase = Depends(ListSeatsUseCase.depends),
) -> List[SeatResponse]:
    chart = await use_case.list_seats()
    return [
        SeatResponse(
            seat_id=seat.id,
            booked=seat.booked,
            status=SeatStatus.of(booked=seat.booked).value,
            row=chart.row_of(seat.id),
            column=chart.column_of(seat.id),
        )
        for seat in chart.seats
    ]


@router.get('/stats')
@Logger.io
async def get_seating_stats(
    use_case: ListSeatsUseCase = Depends(ListSeatsUseCase.depends),
) -> SeatingStatsResponse:
    stats = await use_case.get_stats()
    return SeatingStatsResponse(**attrs.asdict(stats))


@router.post('/reserve', status_code=status.HTTP_200_OK)
@Logger.io
async def reserve_seats(
    request: ReserveSeatsRequest,
    use_case: ReserveSeatsUseCase = Depends(ReserveSeatsUseCase.depends),
) -> ReserveSeatsResponse:
    # Allocation failures propagate as CustomBaseError and become 400/409 responses
    result = await use_case.reserve_seats(count=request.count)
    return ReserveSeatsResponse(
        message=result.message,
        seat_ids=list(result.seat_ids),
        row=result.row,
        attempts=result.attempts,
    )


@router.post('/reset', status_code=status.HTTP_200_OK)
@Logger.io
async def reset_seats(
    use_case: ResetSeatsUseCase = Depends(ResetSeatsUseCase.depends),
) -> ResetSeatsResponse:
    chart = await use_case.reset()
    return ResetSeatsResponse(message='All seats have been reset', total_seats=chart.total_seats)
