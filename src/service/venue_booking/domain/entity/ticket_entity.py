from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Optional
from uuid import UUID

import attrs
from uuid_utils.compat import uuid7

from src.service.venue_booking.domain.enum.ticket_status import TicketStatus


def build_ticket_code(*, show_date: date, booking_id: UUID, seat_id: str) -> str:
    """
    TKT-{YYYYMMDD}-{booking}-{seat}

    The booking part is the last 12 hex digits of the booking id (the random tail of a
    UUID7); a booking holds each seat once, so codes are unique per booking.
    """
    return f'TKT-{show_date.strftime("%Y%m%d")}-{booking_id.hex[-12:].upper()}-{seat_id}'


@attrs.define
class Ticket:
    booking_id: UUID
    show_id: UUID
    seat_code: str
    ticket_code: str
    price: Decimal
    status: TicketStatus = TicketStatus.ACTIVE
    generated_by: Optional[str] = None
    generated_at: Optional[datetime] = None
    id: UUID = attrs.field(factory=uuid7)

    @classmethod
    def issue(
        cls,
        *,
        booking_id: UUID,
        show_id: UUID,
        show_date: date,
        seat_id: str,
        price: Decimal,
        generated_by: str,
    ) -> 'Ticket':
        return cls(
            booking_id=booking_id,
            show_id=show_id,
            seat_code=seat_id,
            ticket_code=build_ticket_code(
                show_date=show_date, booking_id=booking_id, seat_id=seat_id
            ),
            price=price,
            status=TicketStatus.ACTIVE,
            generated_by=generated_by,
            generated_at=datetime.now(timezone.utc),
        )
