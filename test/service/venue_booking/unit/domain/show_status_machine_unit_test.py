"""
Unit tests for the show status machine

Rules are evaluated in precedence order; grace window is 30 minutes.
"""

from datetime import date, datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from src.service.venue_booking.domain.enum.show_status import ShowStatus
from src.service.venue_booking.domain.show_status_machine import (
    StatusTransition,
    evaluate_capacity_transition,
    evaluate_time_transition,
    show_start_at,
)


GRACE = timedelta(minutes=30)
START = datetime(2026, 3, 1, 14, 0, tzinfo=timezone.utc)


def _evaluate(status: ShowStatus, now: datetime) -> StatusTransition | None:
    return evaluate_time_transition(status=status, show_start=START, now=now, grace_window=GRACE)


@pytest.mark.unit
class TestEvaluateTimeTransition:
    @pytest.mark.parametrize(
        'status', [ShowStatus.ACTIVE, ShowStatus.HOUSE_FULL, ShowStatus.SHOW_STARTED]
    )
    def test_after_grace_window_any_open_status_is_done(self, status: ShowStatus) -> None:
        transition = _evaluate(status, START + GRACE + timedelta(seconds=1))

        assert transition == StatusTransition(status, ShowStatus.SHOW_DONE, complete_tickets=True)

    def test_done_stays_done(self) -> None:
        assert _evaluate(ShowStatus.SHOW_DONE, START + timedelta(days=1)) is None

    @pytest.mark.parametrize('offset', [timedelta(seconds=1), timedelta(minutes=15), GRACE])
    def test_active_within_grace_window_is_started(self, offset: timedelta) -> None:
        transition = _evaluate(ShowStatus.ACTIVE, START + offset)

        assert transition == StatusTransition(ShowStatus.ACTIVE, ShowStatus.SHOW_STARTED)
        assert not transition.complete_tickets

    def test_house_full_within_grace_window_is_done_directly(self) -> None:
        transition = _evaluate(ShowStatus.HOUSE_FULL, START + timedelta(minutes=5))

        assert transition == StatusTransition(
            ShowStatus.HOUSE_FULL, ShowStatus.SHOW_DONE, complete_tickets=True
        )

    def test_started_within_grace_window_is_unchanged(self) -> None:
        assert _evaluate(ShowStatus.SHOW_STARTED, START + timedelta(minutes=10)) is None

    @pytest.mark.parametrize('status', list(ShowStatus))
    def test_nothing_happens_before_start(self, status: ShowStatus) -> None:
        assert _evaluate(status, START) is None
        assert _evaluate(status, START - timedelta(hours=2)) is None


@pytest.mark.unit
class TestEvaluateCapacityTransition:
    def test_active_show_at_capacity_is_house_full(self) -> None:
        assert evaluate_capacity_transition(
            status=ShowStatus.ACTIVE, occupied=10, capacity=10
        ) == StatusTransition(ShowStatus.ACTIVE, ShowStatus.HOUSE_FULL)

    def test_active_show_below_capacity_is_unchanged(self) -> None:
        assert (
            evaluate_capacity_transition(status=ShowStatus.ACTIVE, occupied=9, capacity=10)
            is None
        )

    def test_only_active_shows_become_house_full(self) -> None:
        assert (
            evaluate_capacity_transition(status=ShowStatus.SHOW_STARTED, occupied=10, capacity=10)
            is None
        )


@pytest.mark.unit
def test_show_start_is_local_wall_clock_in_venue_timezone() -> None:
    start = show_start_at(
        show_date=date(2026, 3, 1), show_time=time(19, 30), tz=ZoneInfo('Asia/Kolkata')
    )

    assert start == datetime(2026, 3, 1, 14, 0, tzinfo=timezone.utc)
