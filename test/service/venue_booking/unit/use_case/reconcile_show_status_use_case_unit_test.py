"""
Unit tests for ReconcileShowStatusUseCase

Tests:
- Time rules: started inside the grace window, done after it (tickets completed)
- House full reaching start time is done directly
- Capacity rule marks a full ACTIVE show HOUSE_FULL
- One failing show does not stop the rest of the batch
"""

from datetime import date, datetime, time, timedelta, timezone
from typing import Callable
from unittest.mock import MagicMock

import pytest

from src.service.venue_booking.app.command.reconcile_show_status_use_case import (
    ReconcileShowStatusUseCase,
)
from src.service.venue_booking.domain.entity.booking_entity import Booking
from src.service.venue_booking.domain.entity.show_entity import Show
from src.service.venue_booking.domain.entity.ticket_entity import Ticket
from src.service.venue_booking.domain.enum.show_status import ShowStatus
from src.service.venue_booking.domain.enum.ticket_status import TicketStatus
from test.service.venue_booking.fakes import InMemoryStore


SHOW_DATE = date(2026, 3, 1)
SHOW_TIME = time(19, 30)
# 19:30 in Asia/Kolkata
SHOW_START = datetime(2026, 3, 1, 14, 0, tzinfo=timezone.utc)


def _book_with_tickets(store: InMemoryStore, show: Show, seat_ids: list[str]) -> Booking:
    booking = store.seed_booking(
        Booking.create(show_id=show.id, seat_ids=seat_ids, booked_by='ops')
    )
    for seat_id in seat_ids:
        ticket = Ticket.issue(
            booking_id=booking.id,
            show_id=show.id,
            show_date=show.date,
            seat_id=seat_id,
            price=show.price,
            generated_by='ops',
        )
        store.tickets[ticket.id] = ticket
    return booking


@pytest.mark.unit
class TestTimeTransitions:
    @pytest.mark.asyncio
    async def test_active_show_inside_grace_window_is_started(
        self,
        store: InMemoryStore,
        make_show: Callable[..., Show],
        reconciler: ReconcileShowStatusUseCase,
        mock_metrics: MagicMock,
    ) -> None:
        # Arrange
        show = make_show(show_date=SHOW_DATE, show_time=SHOW_TIME)

        # Act
        [result] = await reconciler.execute(
            shows=[show], now=SHOW_START + timedelta(minutes=10)
        )

        # Assert
        assert result.status == ShowStatus.SHOW_STARTED
        assert store.shows[show.id].status == ShowStatus.SHOW_STARTED
        mock_metrics.record_status_transition.assert_called_once_with(
            from_status=ShowStatus.ACTIVE, to_status=ShowStatus.SHOW_STARTED
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'status', [ShowStatus.ACTIVE, ShowStatus.HOUSE_FULL, ShowStatus.SHOW_STARTED]
    )
    async def test_after_grace_window_show_is_done_and_tickets_completed(
        self,
        store: InMemoryStore,
        make_show: Callable[..., Show],
        reconciler: ReconcileShowStatusUseCase,
        status: ShowStatus,
    ) -> None:
        # Arrange
        show = make_show(show_date=SHOW_DATE, show_time=SHOW_TIME, status=status)
        booking = _book_with_tickets(store, show, ['North-A-1', 'North-A-2'])
        cancelled = _book_with_tickets(store, show, ['North-B-1'])
        store.bookings[cancelled.id] = cancelled.cancel()
        revoked = store.tickets_of(cancelled.id)[0]
        store.tickets[revoked.id] = Ticket(
            booking_id=revoked.booking_id,
            show_id=revoked.show_id,
            seat_code=revoked.seat_code,
            ticket_code=revoked.ticket_code,
            price=revoked.price,
            status=TicketStatus.REVOKED,
            id=revoked.id,
        )

        # Act
        [result] = await reconciler.execute(shows=[show], now=SHOW_START + timedelta(hours=1))

        # Assert
        assert result.status == ShowStatus.SHOW_DONE
        assert {t.status for t in store.tickets_of(booking.id)} == {TicketStatus.COMPLETED}
        assert store.tickets[revoked.id].status == TicketStatus.REVOKED

    @pytest.mark.asyncio
    async def test_house_full_show_is_done_at_start(
        self,
        store: InMemoryStore,
        make_show: Callable[..., Show],
        reconciler: ReconcileShowStatusUseCase,
    ) -> None:
        show = make_show(show_date=SHOW_DATE, show_time=SHOW_TIME, status=ShowStatus.HOUSE_FULL)

        [result] = await reconciler.execute(shows=[show], now=SHOW_START + timedelta(minutes=1))

        assert result.status == ShowStatus.SHOW_DONE

    @pytest.mark.asyncio
    async def test_done_show_is_left_alone(
        self,
        store: InMemoryStore,
        make_show: Callable[..., Show],
        reconciler: ReconcileShowStatusUseCase,
        mock_metrics: MagicMock,
    ) -> None:
        show = make_show(show_date=SHOW_DATE, show_time=SHOW_TIME, status=ShowStatus.SHOW_DONE)

        [result] = await reconciler.execute(shows=[show], now=SHOW_START + timedelta(days=3))

        assert result.status == ShowStatus.SHOW_DONE
        assert store.commits == 0
        mock_metrics.record_status_transition.assert_not_called()


@pytest.mark.unit
class TestCapacityTransition:
    @pytest.mark.asyncio
    async def test_full_active_show_becomes_house_full(
        self,
        store: InMemoryStore,
        make_show: Callable[..., Show],
        reconciler: ReconcileShowStatusUseCase,
    ) -> None:
        # Arrange: one legacy comma-joined booking and one array booking cover all 4 seats
        show = make_show()
        store.seed_booking(
            Booking(show_id=show.id, seat_code='North-A-1,North-A-2', booked_by='legacy')
        )
        _book_with_tickets(store, show, ['North-B-1', 'North-B-2'])

        # Act
        [result] = await reconciler.execute(shows=[show])

        # Assert
        assert result.status == ShowStatus.HOUSE_FULL
        assert store.shows[show.id].status == ShowStatus.HOUSE_FULL

    @pytest.mark.asyncio
    async def test_partly_booked_show_stays_active(
        self,
        store: InMemoryStore,
        make_show: Callable[..., Show],
        reconciler: ReconcileShowStatusUseCase,
    ) -> None:
        show = make_show()
        _book_with_tickets(store, show, ['North-A-1', 'North-A-2', 'North-B-1'])

        [result] = await reconciler.execute(shows=[show])

        assert result.status == ShowStatus.ACTIVE
        assert store.commits == 0

    @pytest.mark.asyncio
    async def test_started_show_is_never_marked_house_full(
        self,
        store: InMemoryStore,
        make_show: Callable[..., Show],
        reconciler: ReconcileShowStatusUseCase,
    ) -> None:
        show = make_show(status=ShowStatus.SHOW_STARTED)
        _book_with_tickets(store, show, ['North-A-1', 'North-A-2', 'North-B-1', 'North-B-2'])

        [result] = await reconciler.execute(shows=[show])

        assert result.status == ShowStatus.SHOW_STARTED


@pytest.mark.unit
class TestBatchIsolation:
    @pytest.mark.asyncio
    async def test_failing_show_is_returned_unchanged_and_others_proceed(
        self,
        store: InMemoryStore,
        make_show: Callable[..., Show],
        reconciler: ReconcileShowStatusUseCase,
        mock_metrics: MagicMock,
    ) -> None:
        # Arrange
        broken = make_show(show_date=SHOW_DATE, show_time=SHOW_TIME, title='Broken')
        healthy = make_show(show_date=SHOW_DATE, show_time=SHOW_TIME, title='Healthy')
        store.failing_show_ids.add(broken.id)

        # Act
        results = await reconciler.execute(
            shows=[broken, healthy], now=SHOW_START + timedelta(hours=2)
        )

        # Assert
        assert [show.id for show in results] == [broken.id, healthy.id]
        assert results[0].status == ShowStatus.ACTIVE
        assert results[1].status == ShowStatus.SHOW_DONE
        assert store.shows[broken.id].status == ShowStatus.ACTIVE
        assert store.shows[healthy.id].status == ShowStatus.SHOW_DONE
        mock_metrics.record_reconcile_failure.assert_called_once()
