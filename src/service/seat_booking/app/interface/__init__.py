from src.service.seat_booking.app.interface.i_seat_store import ISeatStore


__all__ = ['ISeatStore']
