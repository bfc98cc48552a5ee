from datetime import datetime
from decimal import Decimal
from typing import List, Literal, Optional
from uuid import UUID

from pydantic import BaseModel

from src.service.venue_booking.domain.enum.booking_status import BookingStatus
from src.service.venue_booking.domain.enum.ticket_status import TicketStatus


class BookingCreateRequest(BaseModel):
    show_id: UUID
    seat_ids: List[str]
    booked_by: str

    model_config = {
        'json_schema_extra': {
            'examples': [
                {
                    'show_id': '01936d8f-5e73-7c4e-a9c5-123456789abc',
                    'seat_ids': ['North-A-1', 'North-A-2'],
                    'booked_by': 'box-office-1',
                }
            ]
        }
    }


class BookingStatusUpdateRequest(BaseModel):
    status: Literal['CANCELLED']


class TicketResponse(BaseModel):
    id: UUID
    seat_code: str
    ticket_code: str
    price: Decimal
    status: TicketStatus
    generated_by: Optional[str] = None
    generated_at: Optional[datetime] = None


class BookingResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'id': '01936d8f-5e73-7c4e-a9c5-123456789abc',  # UUID7
                'show_id': '01936d8f-1111-7c4e-a9c5-123456789abc',
                'seat_ids': ['North-A-1', 'North-A-2'],
                'booked_by': 'box-office-1',
                'status': 'CONFIRMED',
                'booking_time': '2026-01-10T10:30:00Z',
                'tickets': [],
            }
        },
    }

    id: UUID
    show_id: UUID
    seat_ids: List[str]
    booked_by: str
    status: BookingStatus
    booking_time: Optional[datetime] = None
    tickets: List[TicketResponse] = []


class SeatConflictResponse(BaseModel):
    detail: str
    conflicting_seats: List[str]
