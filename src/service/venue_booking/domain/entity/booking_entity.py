from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

import attrs
from uuid_utils.compat import uuid7

from src.platform.exception.exceptions import DomainError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.domain.enum.booking_status import BookingStatus
from src.service.venue_booking.domain.seat_code_codec import decode_seat_code, encode_seat_code
from src.service.venue_booking.domain.seat_inventory_domain import is_well_formed_seat_id

# Column widths of bookings.booked_by and seat_reservations.seat_id
MAX_BOOKED_BY_LENGTH = 255
MAX_SEAT_ID_LENGTH = 100


@Logger.io
def validate_seat_request(*, seat_ids: List[str], booked_by: str) -> None:
    """Request-shape checks that need no store access"""
    if not seat_ids:
        raise ValidationError('At least one seat must be selected')
    if not booked_by or not booked_by.strip():
        raise ValidationError('booked_by cannot be empty')
    if len(booked_by.strip()) > MAX_BOOKED_BY_LENGTH:
        raise ValidationError(f'booked_by cannot exceed {MAX_BOOKED_BY_LENGTH} characters')

    malformed = [str(seat_id) for seat_id in seat_ids if not is_well_formed_seat_id(seat_id)]
    if malformed:
        raise ValidationError(
            f'Invalid seat id(s), expected section-rowLetter-seatNumber: {", ".join(malformed)}'
        )
    too_long = [seat_id for seat_id in seat_ids if len(seat_id) > MAX_SEAT_ID_LENGTH]
    if too_long:
        raise ValidationError(
            f'Seat id(s) longer than {MAX_SEAT_ID_LENGTH} characters: {", ".join(too_long)}'
        )

    seen: set[str] = set()
    duplicates: list[str] = []
    for seat_id in seat_ids:
        if seat_id in seen and seat_id not in duplicates:
            duplicates.append(seat_id)
        seen.add(seat_id)
    if duplicates:
        raise ValidationError(f'Duplicate seat id(s) in request: {", ".join(duplicates)}')


@attrs.define
class Booking:
    show_id: UUID
    seat_code: str
    booked_by: str
    status: BookingStatus = BookingStatus.CONFIRMED
    id: UUID = attrs.field(factory=uuid7)
    booking_time: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(cls, *, show_id: UUID, seat_ids: List[str], booked_by: str) -> 'Booking':
        validate_seat_request(seat_ids=seat_ids, booked_by=booked_by)
        return cls(
            show_id=show_id,
            # New writes always use the array encoding
            seat_code=encode_seat_code(seat_ids),
            booked_by=booked_by.strip(),
            status=BookingStatus.CONFIRMED,
            booking_time=datetime.now(timezone.utc),
        )

    @property
    def seat_ids(self) -> List[str]:
        return decode_seat_code(self.seat_code)

    @Logger.io
    def cancel(self) -> 'Booking':
        """
        Cancel booking (Domain validation)

        Raises:
            DomainError: When the booking is already cancelled
        """
        if self.status == BookingStatus.CANCELLED:
            raise DomainError('Booking already cancelled')
        return attrs.evolve(self, status=BookingStatus.CANCELLED)
