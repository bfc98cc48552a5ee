from uuid import UUID

from fastapi import APIRouter, Depends, status
from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.app.command.cancel_booking_use_case import CancelBookingUseCase
from src.service.venue_booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.venue_booking.app.dto.booking_detail import BookingDetail
from src.service.venue_booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.venue_booking.driving_adapter.http_controller.schema.booking_schema import (
    BookingCreateRequest,
    BookingResponse,
    BookingStatusUpdateRequest,
    SeatConflictResponse,
    TicketResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


def _to_booking_response(detail: BookingDetail) -> BookingResponse:
    booking = detail.booking
    return BookingResponse(
        id=booking.id,
        show_id=booking.show_id,
        seat_ids=detail.seat_ids,
        booked_by=booking.booked_by,
        status=booking.status,
        booking_time=booking.booking_time,
        tickets=[
            TicketResponse(
                id=ticket.id,
                seat_code=ticket.seat_code,
                ticket_code=ticket.ticket_code,
                price=ticket.price,
                status=ticket.status,
                generated_by=ticket.generated_by,
                generated_at=ticket.generated_at,
            )
            for ticket in detail.tickets
        ],
    )


@router.post(
    '',
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_409_CONFLICT: {'model': SeatConflictResponse}},
)
@Logger.io
async def create_booking(
    request: BookingCreateRequest,
    use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
) -> BookingResponse:
    with tracer.start_as_current_span('controller.create_booking') as span:
        span.set_attribute('show_id', str(request.show_id))
        span.set_attribute('seat_count', len(request.seat_ids))

        detail = await use_case.execute(
            show_id=request.show_id, seat_ids=request.seat_ids, booked_by=request.booked_by
        )
        return _to_booking_response(detail)


@router.get('/{booking_id}')
@Logger.io
async def get_booking(
    booking_id: UUID,
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> BookingResponse:
    return _to_booking_response(await use_case.execute(booking_id=booking_id))


@router.patch('/{booking_id}')
@Logger.io
async def cancel_booking(
    booking_id: UUID,
    request: BookingStatusUpdateRequest,
    use_case: CancelBookingUseCase = Depends(CancelBookingUseCase.depends),
) -> BookingResponse:
    """Only CANCELLED is accepted; seats are released and tickets revoked."""
    return _to_booking_response(await use_case.execute(booking_id=booking_id))
