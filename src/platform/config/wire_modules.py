"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.venue_booking.app.command import (
    cancel_booking_use_case,
    create_booking_use_case,
    create_layout_use_case,
    create_show_use_case,
    reconcile_show_status_use_case,
)
from src.service.venue_booking.app.query import (
    get_booking_use_case,
    list_available_seats_use_case,
    list_shows_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    cancel_booking_use_case,
    create_booking_use_case,
    create_layout_use_case,
    create_show_use_case,
    reconcile_show_status_use_case,
    get_booking_use_case,
    list_available_seats_use_case,
    list_shows_use_case,
]
