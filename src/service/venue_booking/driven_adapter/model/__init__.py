"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.venue_booking.driven_adapter.model.booking_model import BookingModel
from src.service.venue_booking.driven_adapter.model.layout_model import LayoutModel
from src.service.venue_booking.driven_adapter.model.seat_reservation_model import (
    SeatReservationModel,
)
from src.service.venue_booking.driven_adapter.model.show_model import ShowModel
from src.service.venue_booking.driven_adapter.model.ticket_model import TicketModel

__all__ = [
    'BookingModel',
    'LayoutModel',
    'SeatReservationModel',
    'ShowModel',
    'TicketModel',
]
