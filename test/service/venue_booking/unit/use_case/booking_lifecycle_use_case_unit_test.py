"""
Unit tests for CancelBookingUseCase, GetBookingUseCase, CreateLayoutUseCase,
CreateShowUseCase and ReencodeSeatCodesUseCase
"""

from datetime import date, time
from decimal import Decimal
from typing import Callable

import pytest
from uuid_utils.compat import uuid7

from src.platform.exception.exceptions import DomainError, NotFoundError, ValidationError
from src.service.venue_booking.app.command.cancel_booking_use_case import CancelBookingUseCase
from src.service.venue_booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.venue_booking.app.command.create_layout_use_case import CreateLayoutUseCase
from src.service.venue_booking.app.command.create_show_use_case import CreateShowUseCase
from src.service.venue_booking.app.command.reencode_seat_codes_use_case import (
    ReencodeReport,
    ReencodeSeatCodesUseCase,
)
from src.service.venue_booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.venue_booking.domain.entity.booking_entity import Booking
from src.service.venue_booking.domain.entity.layout_entity import Layout
from src.service.venue_booking.domain.entity.show_entity import Show
from src.service.venue_booking.domain.enum.booking_status import BookingStatus
from src.service.venue_booking.domain.enum.show_status import ShowStatus
from src.service.venue_booking.domain.enum.ticket_status import TicketStatus
from test.service.venue_booking.fakes import InMemoryStore, InMemoryUnitOfWork


@pytest.mark.unit
class TestCancelBooking:
    @pytest.mark.asyncio
    async def test_cancel_revokes_tickets_and_releases_seats(
        self,
        store: InMemoryStore,
        uow: InMemoryUnitOfWork,
        make_show: Callable[..., Show],
        make_booking_use_case: Callable[[], CreateBookingUseCase],
    ) -> None:
        # Arrange
        show = make_show()
        booked = await make_booking_use_case().execute(
            show_id=show.id, seat_ids=['North-A-1', 'North-A-2'], booked_by='ops'
        )

        # Act
        detail = await CancelBookingUseCase(uow=uow).execute(booking_id=booked.booking.id)

        # Assert
        assert detail.booking.status == BookingStatus.CANCELLED
        assert {ticket.status for ticket in detail.tickets} == {TicketStatus.REVOKED}
        assert store.bookings[booked.booking.id].status == BookingStatus.CANCELLED
        assert store.reservations == {}

        # Seats can be booked again
        rebooked = await make_booking_use_case().execute(
            show_id=show.id, seat_ids=['North-A-1'], booked_by='ops-2'
        )
        assert rebooked.seat_ids == ['North-A-1']

    @pytest.mark.asyncio
    async def test_cancel_twice_is_rejected_and_nothing_changes(
        self, store: InMemoryStore, uow: InMemoryUnitOfWork, make_show: Callable[..., Show]
    ) -> None:
        show = make_show()
        booking = store.seed_booking(
            Booking.create(show_id=show.id, seat_ids=['North-A-1'], booked_by='ops').cancel()
        )

        with pytest.raises(DomainError, match='already cancelled'):
            await CancelBookingUseCase(uow=uow).execute(booking_id=booking.id)

        assert store.commits == 0

    @pytest.mark.asyncio
    async def test_cancel_unknown_booking(self, uow: InMemoryUnitOfWork) -> None:
        with pytest.raises(NotFoundError, match='Booking not found'):
            await CancelBookingUseCase(uow=uow).execute(booking_id=uuid7())


@pytest.mark.unit
class TestGetBooking:
    @pytest.mark.asyncio
    async def test_returns_booking_with_tickets(
        self,
        uow: InMemoryUnitOfWork,
        make_show: Callable[..., Show],
        make_booking_use_case: Callable[[], CreateBookingUseCase],
    ) -> None:
        show = make_show()
        booked = await make_booking_use_case().execute(
            show_id=show.id, seat_ids=['North-B-1'], booked_by='ops'
        )

        detail = await GetBookingUseCase(uow=uow).execute(booking_id=booked.booking.id)

        assert detail.booking.id == booked.booking.id
        assert detail.seat_ids == ['North-B-1']
        assert [ticket.ticket_code for ticket in detail.tickets] == [
            ticket.ticket_code for ticket in booked.tickets
        ]

    @pytest.mark.asyncio
    async def test_unknown_booking(self, uow: InMemoryUnitOfWork) -> None:
        with pytest.raises(NotFoundError):
            await GetBookingUseCase(uow=uow).execute(booking_id=uuid7())


@pytest.mark.unit
class TestCreateLayoutAndShow:
    @pytest.mark.asyncio
    async def test_create_layout_persists_on_commit(
        self, store: InMemoryStore, uow: InMemoryUnitOfWork
    ) -> None:
        layout = await CreateLayoutUseCase(uow=uow).execute(
            name='Main Hall',
            structure={'sections': [{'name': 'South', 'rows': 5, 'seatsPerRow': 8}]},
        )

        assert store.layouts[layout.id].name == 'Main Hall'
        assert layout.created_at is not None

    @pytest.mark.asyncio
    async def test_invalid_layout_writes_nothing(
        self, store: InMemoryStore, uow: InMemoryUnitOfWork
    ) -> None:
        with pytest.raises(ValidationError):
            await CreateLayoutUseCase(uow=uow).execute(
                name='Main Hall', structure={'sections': [{'name': 'South', 'rows': -1}]}
            )

        assert store.layouts == {}

    @pytest.mark.asyncio
    async def test_create_show_snapshots_layout(
        self, store: InMemoryStore, uow: InMemoryUnitOfWork, north_layout: Layout
    ) -> None:
        show = await CreateShowUseCase(uow=uow).execute(
            title='Evening Concert',
            show_date=date(2099, 6, 1),
            show_time=time(19, 30),
            price=Decimal('100'),
            layout_id=north_layout.id,
            description='Strings and brass',
        )

        stored = store.shows[show.id]
        assert stored.status == ShowStatus.ACTIVE
        assert stored.layout_structure == north_layout.normalize().to_structure()
        assert stored.description == 'Strings and brass'

    @pytest.mark.asyncio
    async def test_create_show_on_unknown_layout(self, uow: InMemoryUnitOfWork) -> None:
        with pytest.raises(NotFoundError, match='Layout not found'):
            await CreateShowUseCase(uow=uow).execute(
                title='Evening Concert',
                show_date=date(2099, 6, 1),
                show_time=time(19, 30),
                price=Decimal('100'),
                layout_id=uuid7(),
            )


@pytest.mark.unit
class TestReencodeSeatCodes:
    @pytest.fixture
    def seeded(self, store: InMemoryStore) -> dict[str, Booking]:
        show_id = uuid7()
        codes = {
            'single': 'North-A-1',
            'comma': 'North-A-2, North-B-1',
            'array': '["North-B-2"]',
            'corrupt': '["North-C-1"',
        }
        return {
            name: store.seed_booking(
                Booking(show_id=show_id, seat_code=code, booked_by='legacy'), reserve=False
            )
            for name, code in codes.items()
        }

    @pytest.mark.asyncio
    async def test_rewrites_legacy_codes_as_arrays(
        self, store: InMemoryStore, uow: InMemoryUnitOfWork, seeded: dict[str, Booking]
    ) -> None:
        report = await ReencodeSeatCodesUseCase(uow=uow).execute()

        assert report == ReencodeReport(scanned=4, rewritten=2, unresolvable=1)
        assert store.bookings[seeded['single'].id].seat_code == '["North-A-1"]'
        assert store.bookings[seeded['comma'].id].seat_code == '["North-A-2","North-B-1"]'
        assert store.bookings[seeded['array'].id].seat_code == '["North-B-2"]'
        assert store.bookings[seeded['corrupt'].id].seat_code == '["North-C-1"'

    @pytest.mark.asyncio
    async def test_dry_run_changes_nothing(
        self, store: InMemoryStore, uow: InMemoryUnitOfWork, seeded: dict[str, Booking]
    ) -> None:
        report = await ReencodeSeatCodesUseCase(uow=uow).execute(dry_run=True)

        assert report.rewritten == 2
        assert store.bookings[seeded['single'].id].seat_code == 'North-A-1'
        assert store.commits == 0
