"""
Occupancy Resolver

Occupied seats of a show = union of the decoded seat_code of every CONFIRMED booking.
Fail-open on read: a booking whose seat_code decodes to nothing is logged as an
invariant violation and contributes no occupancy; it never blocks other bookings.
"""

from uuid import UUID

from src.platform.exception.exceptions import InvariantViolation
from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.venue_booking.domain.seat_code_codec import decode_seat_code
from src.service.venue_booking.domain.value_object.booking_seat_code import BookingSeatCode


def union_occupied(booking_seat_codes: list[BookingSeatCode]) -> set[str]:
    occupied: set[str] = set()
    for record in booking_seat_codes:
        seat_ids = decode_seat_code(record.seat_code)
        if not seat_ids:
            violation = InvariantViolation(
                f'Booking {record.booking_id} has no resolvable seats '
                f'(seat_code={record.seat_code!r})'
            )
            Logger.base.warning(f'⚠️ [OCCUPANCY] {violation.message}, ignoring it')
            continue
        occupied.update(seat_ids)
    return occupied


@Logger.io
async def resolve_occupied(*, booking_query_repo: IBookingQueryRepo, show_id: UUID) -> set[str]:
    records = await booking_query_repo.list_confirmed_seat_codes(show_id=show_id)
    return union_occupied(records)
