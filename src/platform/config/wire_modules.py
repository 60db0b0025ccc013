"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.seat_booking.app.command import reserve_seats_use_case, reset_seats_use_case
from src.service.seat_booking.app.query import list_seats_use_case


WIRE_MODULES: list[ModuleType] = [
    reserve_seats_use_case,
    reset_seats_use_case,
    list_seats_use_case,
]
