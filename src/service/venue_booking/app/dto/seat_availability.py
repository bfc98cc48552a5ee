import attrs

from src.service.venue_booking.domain.seat_inventory_domain import Seat


@attrs.frozen
class SeatAvailability:
    seat: Seat
    occupied: bool
