from typing import List

import attrs

from src.service.venue_booking.domain.entity.booking_entity import Booking
from src.service.venue_booking.domain.entity.ticket_entity import Ticket


@attrs.frozen
class BookingDetail:
    """Booking with its decoded seats and issued tickets"""

    booking: Booking
    tickets: List[Ticket] = attrs.field(factory=list)

    @property
    def seat_ids(self) -> List[str]:
        return self.booking.seat_ids
