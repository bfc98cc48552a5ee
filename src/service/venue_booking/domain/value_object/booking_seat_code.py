from uuid import UUID

import attrs


@attrs.frozen
class BookingSeatCode:
    """Raw persisted seat_code of one booking, as read for occupancy"""

    booking_id: UUID
    seat_code: str | None
