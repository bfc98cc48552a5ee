from enum import StrEnum


class ShowStatus(StrEnum):
    """Show lifecycle, driven by wall-clock time and occupancy"""

    ACTIVE = 'ACTIVE'
    HOUSE_FULL = 'HOUSE_FULL'
    SHOW_STARTED = 'SHOW_STARTED'
    SHOW_DONE = 'SHOW_DONE'  # terminal


# Edges the status machine may take; SHOW_DONE has none
ALLOWED_SHOW_TRANSITIONS: dict[ShowStatus, frozenset[ShowStatus]] = {
    ShowStatus.ACTIVE: frozenset(
        {ShowStatus.HOUSE_FULL, ShowStatus.SHOW_STARTED, ShowStatus.SHOW_DONE}
    ),
    ShowStatus.HOUSE_FULL: frozenset({ShowStatus.SHOW_DONE}),
    ShowStatus.SHOW_STARTED: frozenset({ShowStatus.SHOW_DONE}),
    ShowStatus.SHOW_DONE: frozenset(),
}

BOOKABLE_SHOW_STATUSES = frozenset({ShowStatus.ACTIVE, ShowStatus.SHOW_STARTED})
