"""Application layer interfaces (Ports)"""

from src.service.venue_booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.venue_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.venue_booking.app.interface.i_layout_repo import ILayoutRepo
from src.service.venue_booking.app.interface.i_show_command_repo import IShowCommandRepo
from src.service.venue_booking.app.interface.i_show_query_repo import IShowQueryRepo

__all__ = [
    'IBookingCommandRepo',
    'IBookingQueryRepo',
    'ILayoutRepo',
    'IShowCommandRepo',
    'IShowQueryRepo',
]
