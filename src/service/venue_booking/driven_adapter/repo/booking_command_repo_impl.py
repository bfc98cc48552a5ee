from typing import List
from uuid import UUID

from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError
from uuid_utils.compat import uuid7

from src.platform.exception.exceptions import SeatReservationRaceError, StorageError
from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.venue_booking.domain.entity.booking_entity import Booking
from src.service.venue_booking.domain.entity.ticket_entity import Ticket
from src.service.venue_booking.domain.enum.ticket_status import TicketStatus
from src.service.venue_booking.driven_adapter.model.booking_model import BookingModel
from src.service.venue_booking.driven_adapter.model.seat_reservation_model import (
    SEAT_RESERVATION_UNIQUE_CONSTRAINT,
    SeatReservationModel,
)
from src.service.venue_booking.driven_adapter.model.ticket_model import TicketModel
from src.service.venue_booking.driven_adapter.repo.base_repo_impl import SqlAlchemyRepoBase


class BookingCommandRepoImpl(SqlAlchemyRepoBase, IBookingCommandRepo):
    @Logger.io
    async def create(self, *, booking: Booking, tickets: List[Ticket]) -> Booking:
        """
        Stage booking, seat reservations and tickets in the current transaction and flush.

        The flush runs the INSERTs, so a seat already held by another booking fails here
        on the (show_id, seat_id) unique constraint rather than at commit.
        """
        try:
            async with self._get_session() as session:
                session.add(
                    BookingModel(
                        id=booking.id,
                        show_id=booking.show_id,
                        seat_code=booking.seat_code,
                        booked_by=booking.booked_by,
                        booking_time=booking.booking_time,
                        status=booking.status.value,
                    )
                )
                # Parent row first; reservations and tickets reference it
                await session.flush()
                session.add_all(
                    SeatReservationModel(
                        id=uuid7(),
                        show_id=booking.show_id,
                        seat_id=seat_id,
                        booking_id=booking.id,
                    )
                    for seat_id in booking.seat_ids
                )
                session.add_all(
                    TicketModel(
                        id=ticket.id,
                        booking_id=ticket.booking_id,
                        show_id=ticket.show_id,
                        seat_code=ticket.seat_code,
                        ticket_code=ticket.ticket_code,
                        price=ticket.price,
                        status=ticket.status.value,
                        generated_by=ticket.generated_by,
                        generated_at=ticket.generated_at,
                    )
                    for ticket in tickets
                )
                await session.flush()
        except StorageError as e:
            cause = e.__cause__
            if (
                isinstance(cause, IntegrityError)
                and SEAT_RESERVATION_UNIQUE_CONSTRAINT in str(cause.orig)
            ):
                raise SeatReservationRaceError(booking.show_id) from cause
            raise

        return booking

    @Logger.io
    async def cancel(self, *, booking: Booking) -> Booking:
        async with self._get_session() as session:
            await session.execute(
                update(BookingModel)
                .where(BookingModel.id == booking.id)
                .values(status=booking.status.value)
            )
            await session.execute(
                update(TicketModel)
                .where(TicketModel.booking_id == booking.id)
                .values(status=TicketStatus.REVOKED.value)
            )
            await session.execute(
                delete(SeatReservationModel).where(SeatReservationModel.booking_id == booking.id)
            )
        return booking

    @Logger.io
    async def update_seat_code(self, *, booking_id: UUID, seat_code: str) -> None:
        async with self._get_session() as session:
            await session.execute(
                update(BookingModel)
                .where(BookingModel.id == booking_id)
                .values(seat_code=seat_code)
            )
