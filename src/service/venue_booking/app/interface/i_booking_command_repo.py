from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from src.service.venue_booking.domain.entity.booking_entity import Booking
from src.service.venue_booking.domain.entity.ticket_entity import Ticket


class IBookingCommandRepo(ABC):
    """Repository interface for booking write operations"""

    @abstractmethod
    async def create(self, *, booking: Booking, tickets: List[Ticket]) -> Booking:
        """
        Insert the booking, one seat reservation row per seat and the tickets, then flush.

        Raises:
            SeatReservationRaceError: a concurrent booking already holds one of the seats
            StorageError: any other storage failure
        """
        pass

    @abstractmethod
    async def cancel(self, *, booking: Booking) -> Booking:
        """Persist CANCELLED, revoke the tickets and release the seat reservations"""
        pass

    @abstractmethod
    async def update_seat_code(self, *, booking_id: UUID, seat_code: str) -> None:
        pass
