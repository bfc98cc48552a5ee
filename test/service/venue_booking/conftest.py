"""
Fixtures for venue booking tests: an in-memory store, a unit of work over it and
the "North" layout (2 rows x 2 seats) most scenarios book against.
"""

from datetime import date, time
from decimal import Decimal
from typing import Callable
from unittest.mock import MagicMock

import pytest

from src.service.venue_booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.venue_booking.app.command.reconcile_show_status_use_case import (
    ReconcileShowStatusUseCase,
)
from src.service.venue_booking.domain.entity.layout_entity import Layout
from src.service.venue_booking.domain.entity.show_entity import Show
from src.service.venue_booking.domain.enum.show_status import ShowStatus
from test.service.venue_booking.constants import FUTURE_SHOW_DATE, GRACE_WINDOW, VENUE_TIMEZONE
from test.service.venue_booking.fakes import InMemoryStore, InMemoryUnitOfWork


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def uow(store: InMemoryStore) -> InMemoryUnitOfWork:
    return InMemoryUnitOfWork(store)


@pytest.fixture
def north_layout(store: InMemoryStore) -> Layout:
    return store.seed_layout(
        Layout.create(
            name='North Hall',
            structure={
                'sections': [
                    {
                        'name': 'North',
                        'rows': [{'rowNumber': 1, 'seats': 2}, {'rowNumber': 2, 'seats': 2}],
                    }
                ]
            },
        )
    )


@pytest.fixture
def make_show(store: InMemoryStore, north_layout: Layout) -> Callable[..., Show]:
    def _make_show(
        *,
        show_date: date = FUTURE_SHOW_DATE,
        show_time: time = time(19, 30),
        status: ShowStatus = ShowStatus.ACTIVE,
        price: Decimal = Decimal('100'),
        layout: Layout | None = None,
        title: str = 'Evening Concert',
    ) -> Show:
        show = Show.create(
            title=title,
            date=show_date,
            time=show_time,
            price=price,
            layout=layout or north_layout,
        )
        show.status = status
        return store.seed_show(show)

    return _make_show


@pytest.fixture
def reconciler(uow: InMemoryUnitOfWork, mock_metrics: MagicMock) -> ReconcileShowStatusUseCase:
    return ReconcileShowStatusUseCase(
        uow=uow, venue_timezone=VENUE_TIMEZONE, grace_window=GRACE_WINDOW, metrics=mock_metrics
    )


@pytest.fixture
def make_booking_use_case(
    store: InMemoryStore, mock_metrics: MagicMock
) -> Callable[[], CreateBookingUseCase]:
    """One use case per caller, each with its own unit of work, like one per request"""

    def _make() -> CreateBookingUseCase:
        uow = InMemoryUnitOfWork(store)
        return CreateBookingUseCase(
            uow=uow,
            reconciler=ReconcileShowStatusUseCase(
                uow=uow,
                venue_timezone=VENUE_TIMEZONE,
                grace_window=GRACE_WINDOW,
                metrics=mock_metrics,
            ),
            metrics=mock_metrics,
        )

    return _make
