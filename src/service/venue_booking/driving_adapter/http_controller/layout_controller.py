from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.app.command.create_layout_use_case import CreateLayoutUseCase
from src.service.venue_booking.driving_adapter.http_controller.schema.show_schema import (
    LayoutCreateRequest,
    LayoutResponse,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_layout(
    request: LayoutCreateRequest,
    use_case: CreateLayoutUseCase = Depends(CreateLayoutUseCase.depends),
) -> LayoutResponse:
    layout = await use_case.execute(name=request.name, structure=request.structure)
    return LayoutResponse(
        id=layout.id,
        name=layout.name,
        structure=layout.structure,
        seat_count=layout.normalize().seat_count,
        created_at=layout.created_at,
    )
