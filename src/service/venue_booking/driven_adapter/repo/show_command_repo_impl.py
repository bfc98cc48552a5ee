from uuid import UUID

from sqlalchemy import update

from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.app.interface.i_show_command_repo import IShowCommandRepo
from src.service.venue_booking.domain.entity.show_entity import Show
from src.service.venue_booking.domain.enum.show_status import ShowStatus
from src.service.venue_booking.domain.enum.ticket_status import TicketStatus
from src.service.venue_booking.driven_adapter.model.show_model import ShowModel
from src.service.venue_booking.driven_adapter.model.ticket_model import TicketModel
from src.service.venue_booking.driven_adapter.repo.base_repo_impl import SqlAlchemyRepoBase


class ShowCommandRepoImpl(SqlAlchemyRepoBase, IShowCommandRepo):
    @Logger.io
    async def create(self, *, show: Show) -> Show:
        async with self._get_session() as session:
            db_show = ShowModel(
                id=show.id,
                title=show.title,
                date=show.date,
                time=show.time,
                price=show.price,
                description=show.description,
                layout_id=show.layout_id,
                layout_snapshot=show.layout_structure,
                status=show.status.value,
            )
            session.add(db_show)
            await session.flush()
            await session.refresh(db_show, attribute_names=['created_at'])
            show.created_at = db_show.created_at
            return show

    @Logger.io
    async def update_status(self, *, show_id: UUID, status: ShowStatus) -> None:
        async with self._get_session() as session:
            await session.execute(
                update(ShowModel).where(ShowModel.id == show_id).values(status=status.value)
            )

    @Logger.io
    async def complete_active_tickets(self, *, show_id: UUID) -> int:
        async with self._get_session() as session:
            result = await session.execute(
                update(TicketModel)
                .where(
                    TicketModel.show_id == show_id,
                    TicketModel.status == TicketStatus.ACTIVE.value,
                )
                .values(status=TicketStatus.COMPLETED.value)
            )
            return result.rowcount or 0  # type: ignore[attr-defined]
