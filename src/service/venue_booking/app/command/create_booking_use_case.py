import time
from typing import List, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import (
    ConflictError,
    DomainError,
    InvariantViolation,
    NotFoundError,
    SeatConflictError,
    SeatReservationRaceError,
    ValidationError,
)
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import BookingMetrics
from src.service.venue_booking.app.command.reconcile_show_status_use_case import (
    ReconcileShowStatusUseCase,
)
from src.service.venue_booking.app.dto.booking_detail import BookingDetail
from src.service.venue_booking.app.service.occupancy_resolver import resolve_occupied
from src.service.venue_booking.domain.entity.booking_entity import Booking, validate_seat_request
from src.service.venue_booking.domain.entity.show_entity import Show
from src.service.venue_booking.domain.entity.ticket_entity import Ticket
from src.service.venue_booking.domain.seat_inventory_domain import generate_seats


class CreateBookingUseCase:
    """
    Book a set of seats for a show.

    Flow:
    1. Validate the request shape (no I/O)
    2. Load the show, reconcile its status, check it is bookable and the seats exist
    3. In one transaction:
       - fresh occupancy read (never a cached one)
       - requested seats already occupied -> SeatConflictError, nothing written
       - insert booking + one seat reservation row per seat + one ticket per seat
       - commit
    4. The (show_id, seat_id) unique constraint on seat reservations catches the
       check-then-insert race; the loser rolls back and repeats step 3, whose
       fresh read then reports exactly which seats were taken
    5. Once attempts run out, one more fresh read reports the taken seats; only when
       none of them are taken is a generic ConflictError raised
    """

    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        reconciler: ReconcileShowStatusUseCase,
        metrics: BookingMetrics,
        max_attempts: int = 3,
    ) -> None:
        self.uow = uow
        self.reconciler = reconciler
        self.metrics = metrics
        self.max_attempts = max(max_attempts, 1)
        self.tracer = trace.get_tracer(__name__)

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
            metrics=metrics,
            max_attempts=settings.BOOKING_MAX_ATTEMPTS,
        )

    @Logger.io
    async def execute(
        self, *, show_id: UUID, seat_ids: List[str], booked_by: str
    ) -> BookingDetail:
        started = time.perf_counter()
        with self.tracer.start_as_current_span(
            'use_case.create_booking',
            attributes={'show.id': str(show_id), 'booking.seat_count': len(seat_ids)},
        ):
            try:
                detail = await self._book(show_id=show_id, seat_ids=seat_ids, booked_by=booked_by)
            except ConflictError:
                self.metrics.record_booking(
                    result='conflict', duration=time.perf_counter() - started
                )
                raise
            except (ValidationError, DomainError, NotFoundError):
                self.metrics.record_booking(
                    result='rejected', duration=time.perf_counter() - started
                )
                raise
            except Exception:
                self.metrics.record_booking(result='error', duration=time.perf_counter() - started)
                raise

            self.metrics.record_booking(
                result='confirmed',
                duration=time.perf_counter() - started,
                seat_count=len(detail.tickets),
            )
            return detail

    async def _book(
        self, *, show_id: UUID, seat_ids: List[str], booked_by: str
    ) -> BookingDetail:
        validate_seat_request(seat_ids=seat_ids, booked_by=booked_by)

        show = await self._load_bookable_show(show_id=show_id, seat_ids=seat_ids)

        for attempt in range(1, self.max_attempts + 1):
            try:
                return await self._attempt(show=show, seat_ids=seat_ids, booked_by=booked_by)
            except SeatReservationRaceError:
                self.metrics.record_race_retried()
                Logger.base.warning(
                    f'🏁 [BOOKING] Lost seat reservation race on show {show_id} '
                    f'(attempt {attempt}/{self.max_attempts}), retrying with fresh occupancy'
                )

        # Out of attempts: report the seats now held if the races were lost to them
        async with self.uow:
            occupied = await resolve_occupied(
                booking_query_repo=self.uow.booking_query_repo, show_id=show.id
            )
        conflicts = [seat_id for seat_id in seat_ids if seat_id in occupied]
        if conflicts:
            raise SeatConflictError(conflicts)
        raise ConflictError(
            f'Seats could not be reserved after {self.max_attempts} attempts, please retry'
        )

    async def _load_bookable_show(self, *, show_id: UUID, seat_ids: List[str]) -> Show:
        async with self.uow:
            show = await self.uow.show_query_repo.get_by_id(show_id=show_id)
        if not show:
            raise NotFoundError('Show not found')

        # A show whose start or grace window has passed must not accept bookings
        [show] = await self.reconciler.execute(shows=[show])
        if not show.is_bookable():
            raise DomainError(f'Show is not open for booking (status {show.status})')

        layout = show.normalized_layout()
        if layout is None:
            raise ValidationError('Show has no seating layout')
        universe = {seat.seat_id for seat in generate_seats(layout, show.price)}
        unknown = [seat_id for seat_id in seat_ids if seat_id not in universe]
        if unknown:
            raise ValidationError(f'Seat(s) not in this show: {", ".join(unknown)}')
        return show

    async def _attempt(
        self, *, show: Show, seat_ids: List[str], booked_by: str
    ) -> BookingDetail:
        async with self.uow:
            occupied = await resolve_occupied(
                booking_query_repo=self.uow.booking_query_repo, show_id=show.id
            )
            conflicts = [seat_id for seat_id in seat_ids if seat_id in occupied]
            if conflicts:
                raise SeatConflictError(conflicts)

            booking = Booking.create(show_id=show.id, seat_ids=seat_ids, booked_by=booked_by)
            tickets = [
                Ticket.issue(
                    booking_id=booking.id,
                    show_id=show.id,
                    show_date=show.date,
                    seat_id=seat_id,
                    price=show.price,
                    generated_by=booking.booked_by,
                )
                for seat_id in booking.seat_ids
            ]
            if len(tickets) != len(seat_ids):
                raise InvariantViolation(
                    f'Booking {booking.id} would carry {len(tickets)} tickets '
                    f'for {len(seat_ids)} seats'
                )

            created = await self.uow.booking_command_repo.create(booking=booking, tickets=tickets)
            await self.uow.commit()

        Logger.base.info(
            f'🎟️ [BOOKING] Booking {created.id} confirmed for show {show.id}: '
            f'{", ".join(seat_ids)} by {created.booked_by}'
        )
        return BookingDetail(booking=created, tickets=tickets)
