from typing import List, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.app.dto.seat_availability import SeatAvailability
from src.service.venue_booking.app.service.occupancy_resolver import resolve_occupied
from src.service.venue_booking.domain.seat_inventory_domain import generate_seats


class ListAvailableSeatsUseCase:
    """Seat universe of a show (from its layout) with each seat flagged occupied or free"""

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])
    ) -> Self:
        return cls(uow=uow)

    @Logger.io(truncate_content=True)
    async def execute(self, *, show_id: UUID) -> List[SeatAvailability]:
        with self.tracer.start_as_current_span(
            'use_case.list_available_seats', attributes={'show.id': str(show_id)}
        ):
            async with self.uow:
                show = await self.uow.show_query_repo.get_by_id(show_id=show_id)
                if not show:
                    raise NotFoundError('Show not found')

                layout = show.normalized_layout()
                if layout is None:
                    Logger.base.warning(f'⚠️ [SEATS] Show {show_id} has no layout')
                    return []

                occupied = await resolve_occupied(
                    booking_query_repo=self.uow.booking_query_repo, show_id=show_id
                )

            seats = generate_seats(layout, show.price)
            Logger.base.info(
                f'💺 [SEATS] Show {show_id}: {len(seats)} seats, '
                f'{sum(1 for seat in seats if seat.seat_id in occupied)} occupied'
            )
            return [
                SeatAvailability(seat=seat, occupied=seat.seat_id in occupied) for seat in seats
            ]
