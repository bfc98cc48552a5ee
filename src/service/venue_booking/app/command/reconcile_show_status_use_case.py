from datetime import datetime, timedelta, timezone
from typing import List, Optional, Self
from zoneinfo import ZoneInfo

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import BookingMetrics
from src.service.venue_booking.app.service.occupancy_resolver import resolve_occupied
from src.service.venue_booking.domain.entity.show_entity import Show
from src.service.venue_booking.domain.enum.show_status import ShowStatus
from src.service.venue_booking.domain.seat_inventory_domain import capacity_of
from src.service.venue_booking.domain.show_status_machine import (
    StatusTransition,
    evaluate_capacity_transition,
    evaluate_time_transition,
)


class ReconcileShowStatusUseCase:
    """
    Bring each show's status in line with the wall clock and its occupancy.

    Runs lazily: whenever shows are listed and before a booking. Every show is
    reconciled in its own transaction; a failure is logged and that show is
    returned unchanged, the rest of the batch still runs.
    """

    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        venue_timezone: str,
        grace_window: timedelta,
        metrics: BookingMetrics,
    ) -> None:
        self.uow = uow
        self.tz = ZoneInfo(venue_timezone)
        self.grace_window = grace_window
        self.metrics = metrics
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
        settings: Settings = Depends(Provide[Container.config_service]),
        metrics: BookingMetrics = Depends(Provide[Container.booking_metrics]),
    ) -> Self:
        return cls.from_settings(uow=uow, settings=settings, metrics=metrics)

    @classmethod
    def from_settings(
        cls, *, uow: AbstractUnitOfWork, settings: Settings, metrics: BookingMetrics
    ) -> Self:
        return cls(
            uow=uow,
            venue_timezone=settings.VENUE_TIMEZONE,
            grace_window=timedelta(minutes=settings.SHOW_GRACE_WINDOW_MINUTES),
            metrics=metrics,
        )

    @Logger.io(truncate_content=True)
    async def execute(self, *, shows: List[Show], now: Optional[datetime] = None) -> List[Show]:
        now = now or datetime.now(timezone.utc)
        with self.tracer.start_as_current_span(
            'use_case.reconcile_show_status', attributes={'show.count': len(shows)}
        ):
            reconciled: List[Show] = []
            for show in shows:
                try:
                    reconciled.append(await self.reconcile_show(show=show, now=now))
                except Exception as e:
                    self.metrics.record_reconcile_failure()
                    Logger.base.warning(
                        f'⚠️ [RECONCILE] Show {show.id} skipped: {type(e).__name__}: {e}'
                    )
                    reconciled.append(show)
            return reconciled

    async def reconcile_show(self, *, show: Show, now: datetime) -> Show:
        async with self.uow:
            transition = evaluate_time_transition(
                status=show.status,
                show_start=show.start_at(tz=self.tz),
                now=now,
                grace_window=self.grace_window,
            )
            if transition is None:
                transition = await self._capacity_transition(show=show)
            if transition is None:
                return show

            updated = show.transition_to(transition.to_status)
            await self.uow.show_command_repo.update_status(
                show_id=show.id, status=transition.to_status
            )
            completed = 0
            if transition.complete_tickets:
                completed = await self.uow.show_command_repo.complete_active_tickets(
                    show_id=show.id
                )
            await self.uow.commit()

        self.metrics.record_status_transition(
            from_status=transition.from_status, to_status=transition.to_status
        )
        Logger.base.info(
            f'🔁 [RECONCILE] Show {show.id}: {transition.from_status} -> {transition.to_status}'
            + (f', {completed} tickets completed' if transition.complete_tickets else '')
        )
        return updated

    async def _capacity_transition(self, *, show: Show) -> Optional[StatusTransition]:
        if show.status != ShowStatus.ACTIVE:
            return None
        layout = show.normalized_layout()
        if layout is None:
            # No seating known, capacity is undefined
            return None
        occupied = await resolve_occupied(
            booking_query_repo=self.uow.booking_query_repo, show_id=show.id
        )
        return evaluate_capacity_transition(
            status=show.status, occupied=len(occupied), capacity=capacity_of(layout)
        )
