"""
Show Status Machine

    ACTIVE -> HOUSE_FULL -> SHOW_DONE
    ACTIVE -> SHOW_STARTED -> SHOW_DONE
    ACTIVE -> SHOW_DONE              (grace window already over)

Rules, evaluated in order for one show (grace_end = show_start + grace window):

1. now > grace_end and status != SHOW_DONE          -> SHOW_DONE, complete tickets
2. show_start < now <= grace_end and status ACTIVE  -> SHOW_STARTED
3. now > show_start and status HOUSE_FULL           -> SHOW_DONE, complete tickets
4. status ACTIVE and occupied >= capacity           -> HOUSE_FULL

Rules 1-3 depend only on time and are `evaluate_time_transition`. Rule 4 needs
occupancy and is `evaluate_capacity_transition`; callers only consult it when
rules 1-3 produced nothing.
"""

from datetime import date, datetime, time, timedelta
from typing import Optional
from zoneinfo import ZoneInfo

import attrs

from src.service.venue_booking.domain.enum.show_status import ShowStatus


@attrs.frozen
class StatusTransition:
    from_status: ShowStatus
    to_status: ShowStatus
    complete_tickets: bool = False


def show_start_at(*, show_date: date, show_time: time, tz: ZoneInfo) -> datetime:
    """Shows store naive local wall-clock date and time; the start instant is that time in `tz`"""
    return datetime.combine(show_date, show_time.replace(tzinfo=None), tzinfo=tz)


def evaluate_time_transition(
    *,
    status: ShowStatus,
    show_start: datetime,
    now: datetime,
    grace_window: timedelta,
) -> Optional[StatusTransition]:
    grace_end = show_start + grace_window

    if now > grace_end and status != ShowStatus.SHOW_DONE:
        return StatusTransition(status, ShowStatus.SHOW_DONE, complete_tickets=True)

    if show_start < now <= grace_end and status == ShowStatus.ACTIVE:
        return StatusTransition(status, ShowStatus.SHOW_STARTED)

    # House full and started: no further seat activity is possible
    if now > show_start and status == ShowStatus.HOUSE_FULL:
        return StatusTransition(status, ShowStatus.SHOW_DONE, complete_tickets=True)

    return None


def evaluate_capacity_transition(
    *, status: ShowStatus, occupied: int, capacity: int
) -> Optional[StatusTransition]:
    if status == ShowStatus.ACTIVE and occupied >= capacity:
        return StatusTransition(status, ShowStatus.HOUSE_FULL)
    return None
