from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional
from uuid import UUID

from src.service.venue_booking.domain.entity.show_entity import Show
from src.service.venue_booking.domain.enum.show_status import ShowStatus


class IShowQueryRepo(ABC):
    """Repository interface for show read operations"""

    @abstractmethod
    async def get_by_id(self, *, show_id: UUID) -> Optional[Show]:
        """Show with `layout_structure` resolved (snapshot, else live layout)"""
        pass

    @abstractmethod
    async def list_shows(
        self, *, statuses: Optional[List[ShowStatus]] = None, from_date: Optional[date] = None
    ) -> List[Show]:
        """Shows ordered by date and time; no filter means every show"""
        pass
