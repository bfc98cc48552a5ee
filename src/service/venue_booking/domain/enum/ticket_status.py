from enum import StrEnum


class TicketStatus(StrEnum):
    ACTIVE = 'ACTIVE'
    COMPLETED = 'COMPLETED'  # owning show reached SHOW_DONE
    REVOKED = 'REVOKED'  # owning booking was cancelled
