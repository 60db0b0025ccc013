from typing import List, Literal

from pydantic import BaseModel, StrictInt


class SeatResponse(BaseModel):
    seat_id: int
    booked: bool
    status: Literal['available', 'booked']
    row: int
    column: int


class ReserveSeatsRequest(BaseModel):
    model_config = {'json_schema_extra': {'example': {'count': 3}}}

    count: StrictInt


class ReserveSeatsResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'message': 'Seats booked successfully: 1, 2, 3',
                'seat_ids': [1, 2, 3],
                'row': 0,
                'attempts': 1,
            }
        },
    }

    message: str
    seat_ids: List[int]
    row: int
    attempts: int


class ResetSeatsResponse(BaseModel):
    message: str
    total_seats: int


class SeatingStatsResponse(BaseModel):
    total_seats: int
    seats_per_row: int
    booked_seats: int
    available_seats: int
    largest_contiguous_block: int
