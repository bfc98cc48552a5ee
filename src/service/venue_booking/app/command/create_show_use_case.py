from datetime import date, time
from decimal import Decimal
from typing import Optional, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.domain.entity.show_entity import Show


class CreateShowUseCase:
    """
    Create a show on an existing layout.

    The layout is copied into the show as a normalized snapshot, so later edits to the
    layout cannot renumber seats that were already sold for this show.
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(
        cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(
        self,
        *,
        title: str,
        show_date: date,
        show_time: time,
        price: Decimal,
        layout_id: UUID,
        description: Optional[str] = None,
    ) -> Show:
        async with self.uow:
            layout = await self.uow.layout_repo.get_by_id(layout_id=layout_id)
            if not layout:
                raise NotFoundError('Layout not found')

            show = Show.create(
                title=title,
                date=show_date,
                time=show_time,
                price=price,
                layout=layout,
                description=description,
            )
            created = await self.uow.show_command_repo.create(show=show)
            await self.uow.commit()

        Logger.base.info(
            f'🎭 [SHOW] Created show {created.id} "{created.title}" '
            f'on {created.date} {created.time}'
        )
        return created
