from datetime import date
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select

from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.app.interface.i_show_query_repo import IShowQueryRepo
from src.service.venue_booking.domain.entity.show_entity import Show
from src.service.venue_booking.domain.enum.show_status import ShowStatus
from src.service.venue_booking.driven_adapter.model.show_model import ShowModel
from src.service.venue_booking.driven_adapter.repo.base_repo_impl import SqlAlchemyRepoBase


class ShowQueryRepoImpl(SqlAlchemyRepoBase, IShowQueryRepo):
    @staticmethod
    def _to_entity(db_show: ShowModel) -> Show:
        # Shows created before snapshots existed fall back to the live layout
        layout_structure = db_show.layout_snapshot
        if layout_structure is None and db_show.layout is not None:
            layout_structure = db_show.layout.structure

        return Show(
            id=db_show.id,
            title=db_show.title,
            date=db_show.date,
            time=db_show.time,
            price=db_show.price,
            layout_id=db_show.layout_id,
            status=ShowStatus(db_show.status),
            description=db_show.description,
            layout_structure=layout_structure,
            created_at=db_show.created_at,
        )

    @Logger.io
    async def get_by_id(self, *, show_id: UUID) -> Optional[Show]:
        async with self._get_session() as session:
            result = await session.execute(select(ShowModel).where(ShowModel.id == show_id))
            db_show = result.scalar_one_or_none()
            return self._to_entity(db_show) if db_show else None

    @Logger.io(truncate_content=True)
    async def list_shows(
        self, *, statuses: Optional[List[ShowStatus]] = None, from_date: Optional[date] = None
    ) -> List[Show]:
        async with self._get_session() as session:
            query = select(ShowModel)
            if statuses:
                query = query.where(ShowModel.status.in_([status.value for status in statuses]))
            if from_date:
                query = query.where(ShowModel.date >= from_date)

            result = await session.execute(query.order_by(ShowModel.date, ShowModel.time))
            return [self._to_entity(db_show) for db_show in result.scalars().all()]
