from enum import StrEnum


class BookingStatus(StrEnum):
    CONFIRMED = 'CONFIRMED'
    CANCELLED = 'CANCELLED'
