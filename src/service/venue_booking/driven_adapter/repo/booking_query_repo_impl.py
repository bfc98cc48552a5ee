from typing import List, Optional
from uuid import UUID

from sqlalchemy import select

from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.venue_booking.domain.entity.booking_entity import Booking
from src.service.venue_booking.domain.entity.ticket_entity import Ticket
from src.service.venue_booking.domain.enum.booking_status import BookingStatus
from src.service.venue_booking.domain.enum.ticket_status import TicketStatus
from src.service.venue_booking.domain.value_object.booking_seat_code import BookingSeatCode
from src.service.venue_booking.driven_adapter.model.booking_model import BookingModel
from src.service.venue_booking.driven_adapter.model.ticket_model import TicketModel
from src.service.venue_booking.driven_adapter.repo.base_repo_impl import SqlAlchemyRepoBase


class BookingQueryRepoImpl(SqlAlchemyRepoBase, IBookingQueryRepo):
    @staticmethod
    def _to_entity(db_booking: BookingModel) -> Booking:
        return Booking(
            id=db_booking.id,
            show_id=db_booking.show_id,
            seat_code=db_booking.seat_code,
            booked_by=db_booking.booked_by,
            status=BookingStatus(db_booking.status),
            booking_time=db_booking.booking_time,
        )

    @staticmethod
    def _to_ticket(db_ticket: TicketModel) -> Ticket:
        return Ticket(
            id=db_ticket.id,
            booking_id=db_ticket.booking_id,
            show_id=db_ticket.show_id,
            seat_code=db_ticket.seat_code,
            ticket_code=db_ticket.ticket_code,
            price=db_ticket.price,
            status=TicketStatus(db_ticket.status),
            generated_by=db_ticket.generated_by,
            generated_at=db_ticket.generated_at,
        )

    @Logger.io(truncate_content=True)
    async def list_confirmed_seat_codes(self, *, show_id: UUID) -> List[BookingSeatCode]:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingModel.id, BookingModel.seat_code).where(
                    BookingModel.show_id == show_id,
                    BookingModel.status == BookingStatus.CONFIRMED.value,
                )
            )
            return [
                BookingSeatCode(booking_id=booking_id, seat_code=seat_code)
                for booking_id, seat_code in result.all()
            ]

    @Logger.io(truncate_content=True)
    async def list_all_seat_codes(self) -> List[BookingSeatCode]:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingModel.id, BookingModel.seat_code).order_by(BookingModel.booking_time)
            )
            return [
                BookingSeatCode(booking_id=booking_id, seat_code=seat_code)
                for booking_id, seat_code in result.all()
            ]

    @Logger.io
    async def get_by_id(self, *, booking_id: UUID) -> Optional[Booking]:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingModel).where(BookingModel.id == booking_id)
            )
            db_booking = result.scalar_one_or_none()
            return self._to_entity(db_booking) if db_booking else None

    @Logger.io
    async def list_tickets(self, *, booking_id: UUID) -> List[Ticket]:
        async with self._get_session() as session:
            result = await session.execute(
                select(TicketModel)
                .where(TicketModel.booking_id == booking_id)
                .order_by(TicketModel.ticket_code)
            )
            return [self._to_ticket(db_ticket) for db_ticket in result.scalars().all()]
