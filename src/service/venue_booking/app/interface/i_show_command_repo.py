from abc import ABC, abstractmethod
from uuid import UUID

from src.service.venue_booking.domain.entity.show_entity import Show
from src.service.venue_booking.domain.enum.show_status import ShowStatus


class IShowCommandRepo(ABC):
    """Repository interface for show write operations"""

    @abstractmethod
    async def create(self, *, show: Show) -> Show:
        pass

    @abstractmethod
    async def update_status(self, *, show_id: UUID, status: ShowStatus) -> None:
        pass

    @abstractmethod
    async def complete_active_tickets(self, *, show_id: UUID) -> int:
        """Bulk ACTIVE -> COMPLETED for every ticket of the show; returns the number updated"""
        pass
