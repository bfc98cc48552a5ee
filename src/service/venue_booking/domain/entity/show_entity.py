from datetime import date, datetime, time
from decimal import Decimal
from typing import Optional
from uuid import UUID
from zoneinfo import ZoneInfo

import attrs
from uuid_utils.compat import uuid7

from src.platform.exception.exceptions import DomainError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.domain.entity.layout_entity import (
    Layout,
    NormalizedLayout,
    normalize,
)
from src.service.venue_booking.domain.enum.show_status import (
    ALLOWED_SHOW_TRANSITIONS,
    BOOKABLE_SHOW_STATUSES,
    ShowStatus,
)
from src.service.venue_booking.domain.show_status_machine import show_start_at


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise ValidationError(f'Show {attribute.name} cannot be empty')


def _validate_price(instance: object, attribute: attrs.Attribute, value: Decimal) -> None:
    if value < 0:
        raise ValidationError('Show price cannot be negative')


@attrs.define
class Show:
    title: str = attrs.field(validator=_validate_non_empty_string)
    date: date
    time: time
    price: Decimal = attrs.field(converter=Decimal, validator=_validate_price)
    layout_id: Optional[UUID]
    status: ShowStatus = ShowStatus.ACTIVE
    description: Optional[str] = None
    # Seating used for inventory math: snapshot taken at creation, else the live layout
    layout_structure: Optional[dict] = None
    id: UUID = attrs.field(factory=uuid7)
    created_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        title: str,
        date: date,
        time: time,
        price: Decimal,
        layout: Layout,
        description: Optional[str] = None,
    ) -> 'Show':
        """New shows start ACTIVE and copy the normalized layout as their seating snapshot"""
        return cls(
            title=title.strip() if title else title,
            date=date,
            time=time,
            price=price,
            layout_id=layout.id,
            status=ShowStatus.ACTIVE,
            description=description,
            layout_structure=layout.normalize().to_structure(),
        )

    def start_at(self, *, tz: ZoneInfo) -> datetime:
        return show_start_at(show_date=self.date, show_time=self.time, tz=tz)

    def normalized_layout(self) -> Optional[NormalizedLayout]:
        if self.layout_structure is None:
            return None
        return normalize(self.layout_structure)

    def is_bookable(self) -> bool:
        return self.status in BOOKABLE_SHOW_STATUSES

    def transition_to(self, status: ShowStatus) -> 'Show':
        if status not in ALLOWED_SHOW_TRANSITIONS[self.status]:
            raise DomainError(f'Illegal show status transition {self.status} -> {status}')
        return attrs.evolve(self, status=status)
