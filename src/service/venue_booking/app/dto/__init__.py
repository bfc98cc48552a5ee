"""Application layer DTOs"""

from src.service.venue_booking.app.dto.booking_detail import BookingDetail
from src.service.venue_booking.app.dto.seat_availability import SeatAvailability

__all__ = ['BookingDetail', 'SeatAvailability']
