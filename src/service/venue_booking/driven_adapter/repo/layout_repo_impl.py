from typing import Optional
from uuid import UUID

from sqlalchemy import select

from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.app.interface.i_layout_repo import ILayoutRepo
from src.service.venue_booking.domain.entity.layout_entity import Layout
from src.service.venue_booking.driven_adapter.model.layout_model import LayoutModel
from src.service.venue_booking.driven_adapter.repo.base_repo_impl import SqlAlchemyRepoBase


class LayoutRepoImpl(SqlAlchemyRepoBase, ILayoutRepo):
    @staticmethod
    def _to_entity(db_layout: LayoutModel) -> Layout:
        return Layout(
            id=db_layout.id,
            name=db_layout.name,
            structure=db_layout.structure or {},
            created_at=db_layout.created_at,
        )

    @Logger.io
    async def create(self, *, layout: Layout) -> Layout:
        async with self._get_session() as session:
            db_layout = LayoutModel(id=layout.id, name=layout.name, structure=layout.structure)
            session.add(db_layout)
            await session.flush()
            await session.refresh(db_layout)
            return self._to_entity(db_layout)

    @Logger.io
    async def get_by_id(self, *, layout_id: UUID) -> Optional[Layout]:
        async with self._get_session() as session:
            result = await session.execute(select(LayoutModel).where(LayoutModel.id == layout_id))
            db_layout = result.scalar_one_or_none()
            return self._to_entity(db_layout) if db_layout else None
