"""Venue Booking Domain Enums"""

from src.service.venue_booking.domain.enum.booking_status import BookingStatus
from src.service.venue_booking.domain.enum.show_status import ShowStatus
from src.service.venue_booking.domain.enum.ticket_status import TicketStatus

__all__ = ['BookingStatus', 'ShowStatus', 'TicketStatus']
