from src.service.seat_booking.driven_adapter.model.seat_model import SeatModel


__all__ = ['SeatModel']
