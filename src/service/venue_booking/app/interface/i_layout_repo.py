from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.service.venue_booking.domain.entity.layout_entity import Layout


class ILayoutRepo(ABC):
    @abstractmethod
    async def create(self, *, layout: Layout) -> Layout:
        pass

    @abstractmethod
    async def get_by_id(self, *, layout_id: UUID) -> Optional[Layout]:
        pass
