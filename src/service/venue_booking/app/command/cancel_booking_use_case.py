from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.app.dto.booking_detail import BookingDetail


class CancelBookingUseCase:
    """
    Cancel a booking.

    In one transaction: booking -> CANCELLED, its tickets -> REVOKED, and its seat
    reservation rows are deleted so the seats are free for the next booking.
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
    async def execute(self, *, booking_id: UUID) -> BookingDetail:
        async with self.uow:
            booking = await self.uow.booking_query_repo.get_by_id(booking_id=booking_id)
            if not booking:
                raise NotFoundError('Booking not found')

            # Raises DomainError when already cancelled
            cancelled = booking.cancel()
            await self.uow.booking_command_repo.cancel(booking=cancelled)
            tickets = await self.uow.booking_query_repo.list_tickets(booking_id=booking_id)
            await self.uow.commit()

        Logger.base.info(
            f'🚫 [CANCEL] Booking {booking_id} cancelled, {len(tickets)} tickets revoked, '
            f'seats released: {", ".join(cancelled.seat_ids)}'
        )
        return BookingDetail(booking=cancelled, tickets=tickets)
