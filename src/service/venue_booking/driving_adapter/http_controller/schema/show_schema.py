from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Dict, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from src.service.venue_booking.domain.enum.show_status import ShowStatus


class LayoutCreateRequest(BaseModel):
    name: str
    structure: Dict[str, Any]

    model_config = {
        'json_schema_extra': {
            'examples': [
                {
                    'name': 'Main Hall',
                    'structure': {
                        'sections': [
                            {
                                'name': 'North',
                                'rows': [
                                    {'rowNumber': 1, 'seats': 10},
                                    {'rowNumber': 2, 'seats': 12},
                                ],
                            },
                            {'name': 'South', 'rows': 5, 'seatsPerRow': 8},
                        ]
                    },
                }
            ]
        }
    }


class LayoutResponse(BaseModel):
    id: UUID
    name: str
    structure: Dict[str, Any]
    seat_count: int
    created_at: Optional[datetime] = None


class ShowCreateRequest(BaseModel):
    title: str
    date: date
    time: time
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    layout_id: UUID
    description: Optional[str] = None

    model_config = {
        'json_schema_extra': {
            'examples': [
                {
                    'title': 'Evening Concert',
                    'date': '2026-12-31',
                    'time': '19:30:00',
                    'price': '100.00',
                    'layout_id': '01936d8f-5e73-7c4e-a9c5-123456789abc',
                }
            ]
        }
    }


class ShowResponse(BaseModel):
    id: UUID
    title: str
    date: date
    time: time
    price: Decimal
    layout_id: Optional[UUID] = None
    status: ShowStatus
    description: Optional[str] = None
    capacity: Optional[int] = None


class SeatResponse(BaseModel):
    seat_id: str
    display_name: str
    section: str
    row_letter: str
    seat_number: int
    price: Decimal
    occupied: bool
