"""Seat Booking Application DTOs"""

from src.service.seat_booking.app.dto.reservation_dto import ReservationResult, SeatingStats


__all__ = [
    'ReservationResult',
    'SeatingStats',
]
