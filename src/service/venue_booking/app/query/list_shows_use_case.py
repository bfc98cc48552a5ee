from datetime import date, datetime
from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import BookingMetrics
from src.service.venue_booking.app.command.reconcile_show_status_use_case import (
    ReconcileShowStatusUseCase,
)
from src.service.venue_booking.domain.entity.show_entity import Show
from src.service.venue_booking.domain.enum.show_status import ShowStatus


class ListShowsUseCase:
    """
    List shows, reconciling their status first.

    Stored status can lag the clock, so the status filter runs after reconciliation:
    shows are fetched by date only, reconciled, then matched against `statuses`.
    """

    def __init__(
        self, *, uow: AbstractUnitOfWork, reconciler: ReconcileShowStatusUseCase
    ) -> None:
        self.uow = uow
        self.reconciler = reconciler

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
        settings: Settings = Depends(Provide[Container.config_service]),
        metrics: BookingMetrics = Depends(Provide[Container.booking_metrics]),
    ) -> Self:
        return cls(
            uow=uow,
            reconciler=ReconcileShowStatusUseCase.from_settings(
                uow=uow, settings=settings, metrics=metrics
            ),
        )

    @Logger.io(truncate_content=True)
    async def execute(
        self,
        *,
        statuses: Optional[List[ShowStatus]] = None,
        from_date: Optional[date] = None,
        now: Optional[datetime] = None,
    ) -> List[Show]:
        async with self.uow:
            shows = await self.uow.show_query_repo.list_shows(from_date=from_date)

        shows = await self.reconciler.execute(shows=shows, now=now)
        if statuses:
            shows = [show for show in shows if show.status in statuses]

        Logger.base.info(f'📋 [LIST_SHOWS] Returning {len(shows)} shows')
        return shows
