"""
Concurrent bookings on overlapping seats

Every booking suspends between its occupancy read and its insert, so all callers pass
the read-time check together; the seat reservation claim decides the winner and the
losers retry, then fail with the seats they lost.
"""

from typing import Callable

import anyio
import pytest

from src.platform.exception.exceptions import SeatConflictError
from src.service.venue_booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.venue_booking.app.dto.booking_detail import BookingDetail
from src.service.venue_booking.domain.entity.show_entity import Show
from test.service.venue_booking.fakes import InMemoryStore


async def _book_all(
    make_booking_use_case: Callable[[], CreateBookingUseCase],
    show: Show,
    requests: list[list[str]],
) -> tuple[list[BookingDetail], list[tuple[list[str], SeatConflictError]]]:
    confirmed: list[BookingDetail] = []
    conflicts: list[tuple[list[str], SeatConflictError]] = []

    async def book(seat_ids: list[str]) -> None:
        try:
            confirmed.append(
                await make_booking_use_case().execute(
                    show_id=show.id, seat_ids=seat_ids, booked_by='ops'
                )
            )
        except SeatConflictError as e:
            conflicts.append((seat_ids, e))

    async with anyio.create_task_group() as tg:
        for seat_ids in requests:
            tg.start_soon(book, seat_ids)

    return confirmed, conflicts


@pytest.mark.unit
class TestConcurrentBooking:
    @pytest.mark.asyncio
    async def test_same_seat_is_booked_once(
        self,
        store: InMemoryStore,
        make_show: Callable[..., Show],
        make_booking_use_case: Callable[[], CreateBookingUseCase],
        mock_metrics,
    ) -> None:
        # Arrange
        show = make_show()
        store.yield_on_read = True

        # Act
        confirmed, conflicts = await _book_all(
            make_booking_use_case, show, [['North-A-1']] * 5
        )

        # Assert
        assert len(confirmed) == 1
        assert len(conflicts) == 4
        assert all(error.conflicting_seats == ['North-A-1'] for _, error in conflicts)
        assert len(store.bookings) == 1
        assert len(store.tickets) == 1
        assert mock_metrics.record_race_retried.call_count == 4

    @pytest.mark.asyncio
    async def test_overlapping_requests_never_share_a_seat(
        self,
        store: InMemoryStore,
        make_show: Callable[..., Show],
        make_booking_use_case: Callable[[], CreateBookingUseCase],
    ) -> None:
        # Arrange
        show = make_show()
        store.yield_on_read = True
        requests = [
            ['North-A-1', 'North-A-2'],
            ['North-A-2', 'North-B-1'],
            ['North-B-1', 'North-B-2'],
            ['North-B-2'],
        ]

        # Act
        confirmed, conflicts = await _book_all(make_booking_use_case, show, requests)

        # Assert
        booked = [seat for detail in confirmed for seat in detail.seat_ids]
        assert len(booked) == len(set(booked))
        assert sorted(booked) == sorted(
            seat for (show_id, seat) in store.reservations if show_id == show.id
        )
        for seat_ids, error in conflicts:
            # Seats held when the loser checked, in request order; holdings only grow
            assert error.conflicting_seats
            assert set(error.conflicting_seats) <= set(seat_ids) & set(booked)
            assert error.conflicting_seats == [
                seat for seat in seat_ids if seat in error.conflicting_seats
            ]
        assert len(confirmed) + len(conflicts) == len(requests)
        assert sum(len(store.tickets_of(detail.booking.id)) for detail in confirmed) == len(
            booked
        )
