from datetime import date
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.app.command.create_show_use_case import CreateShowUseCase
from src.service.venue_booking.app.query.list_available_seats_use_case import (
    ListAvailableSeatsUseCase,
)
from src.service.venue_booking.app.query.list_shows_use_case import ListShowsUseCase
from src.service.venue_booking.domain.entity.show_entity import Show
from src.service.venue_booking.domain.enum.show_status import ShowStatus
from src.service.venue_booking.domain.seat_inventory_domain import capacity_of
from src.service.venue_booking.driving_adapter.http_controller.schema.show_schema import (
    SeatResponse,
    ShowCreateRequest,
    ShowResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


def _to_show_response(show: Show) -> ShowResponse:
    layout = show.normalized_layout()
    return ShowResponse(
        id=show.id,
        title=show.title,
        date=show.date,
        time=show.time,
        price=show.price,
        layout_id=show.layout_id,
        status=show.status,
        description=show.description,
        capacity=capacity_of(layout) if layout is not None else None,
    )


@router.get('')
@Logger.io(truncate_content=True)
async def list_shows(
    show_status: List[ShowStatus] = Query(default=[], alias='status'),
    from_date: Optional[date] = None,
    use_case: ListShowsUseCase = Depends(ListShowsUseCase.depends),
) -> List[ShowResponse]:
    """List shows; statuses are reconciled against the clock and occupancy first."""
    shows = await use_case.execute(statuses=show_status or None, from_date=from_date)
    return [_to_show_response(show) for show in shows]


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_show(
    request: ShowCreateRequest,
    use_case: CreateShowUseCase = Depends(CreateShowUseCase.depends),
) -> ShowResponse:
    show = await use_case.execute(
        title=request.title,
        show_date=request.date,
        show_time=request.time,
        price=request.price,
        layout_id=request.layout_id,
        description=request.description,
    )
    return _to_show_response(show)


@router.get('/{show_id}/seats')
@Logger.io(truncate_content=True)
async def list_available_seats(
    show_id: UUID,
    use_case: ListAvailableSeatsUseCase = Depends(ListAvailableSeatsUseCase.depends),
) -> List[SeatResponse]:
    with tracer.start_as_current_span('controller.list_available_seats') as span:
        span.set_attribute('show_id', str(show_id))
        seats = await use_case.execute(show_id=show_id)
        return [
            SeatResponse(
                seat_id=item.seat.seat_id,
                display_name=item.seat.display_name,
                section=item.seat.section,
                row_letter=item.seat.row_letter,
                seat_number=item.seat.seat_number,
                price=item.seat.price,
                occupied=item.occupied,
            )
            for item in seats
        ]
