from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.service.venue_booking.domain.entity.booking_entity import Booking
from src.service.venue_booking.domain.entity.ticket_entity import Ticket
from src.service.venue_booking.domain.value_object.booking_seat_code import BookingSeatCode


class IBookingQueryRepo(ABC):
    """Repository interface for booking read operations"""

    @abstractmethod
    async def list_confirmed_seat_codes(self, *, show_id: UUID) -> List[BookingSeatCode]:
        """Raw seat_code of every CONFIRMED booking of the show, always read fresh"""
        pass

    @abstractmethod
    async def list_all_seat_codes(self) -> List[BookingSeatCode]:
        pass

    @abstractmethod
    async def get_by_id(self, *, booking_id: UUID) -> Optional[Booking]:
        pass

    @abstractmethod
    async def list_tickets(self, *, booking_id: UUID) -> List[Ticket]:
        pass
