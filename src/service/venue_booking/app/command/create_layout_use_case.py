from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.domain.entity.layout_entity import Layout


class CreateLayoutUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(
        cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, name: str, structure: dict) -> Layout:
        layout = Layout.create(name=name, structure=structure)
        async with self.uow:
            created = await self.uow.layout_repo.create(layout=layout)
            await self.uow.commit()

        Logger.base.info(
            f'🏟️ [LAYOUT] Created layout {created.id} "{created.name}" '
            f'with {created.normalize().seat_count} seats'
        )
        return created
