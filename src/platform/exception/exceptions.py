from typing import Iterable


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def to_detail(self) -> dict:
        return {'detail': self.message}


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ValidationError(DomainError):
    """Malformed layout or seat request, rejected before any I/O"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class SeatConflictError(ConflictError):
    """Requested seats are already held by a confirmed booking; re-fetch and re-select"""

    def __init__(self, conflicting_seats: Iterable[str]) -> None:
        self.conflicting_seats = list(conflicting_seats)
        super().__init__(f'Seats already booked: {", ".join(self.conflicting_seats)}')

    def to_detail(self) -> dict:
        return {'detail': self.message, 'conflicting_seats': self.conflicting_seats}


class SeatReservationRaceError(ConflictError):
    """A concurrent booking committed one of the seats between our check and our insert"""

    def __init__(self, show_id: object) -> None:
        self.show_id = show_id
        super().__init__(f'Seat reservation race lost for show {show_id}')


class StorageError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 503)


class InvariantViolation(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 500)
