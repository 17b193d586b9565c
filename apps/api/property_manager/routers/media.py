"""Photo and maintenance ticket endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.session import get_session
from ..models import MaintenanceTicket, Photo, TicketStatus
from ..repositories import base as repo
from ..repositories import loaders
from ..schemas import media as schemas
from ..services import media as media_service
from ..services import records

router = APIRouter()


@router.get("/photos", response_model=list[schemas.PhotoRead])
async def list_photos(
    property_id: int | None = Query(default=None, ge=1, le=repo.MAX_ID),
    unit_id: int | None = Query(default=None, ge=1, le=repo.MAX_ID),
    session: AsyncSession = Depends(get_session),
) -> list[schemas.PhotoRead]:
    return await media_service.list_photos(session, property_id=property_id, unit_id=unit_id)


@router.get("/photos/{photo_id}", response_model=schemas.PhotoRead)
async def get_photo(photo_id: int, session: AsyncSession = Depends(get_session)) -> schemas.PhotoRead:
    return await repo.get_or_404(session, Photo, photo_id)


@router.post("/photos", response_model=schemas.PhotoRead, status_code=status.HTTP_201_CREATED)
async def create_photo(
    payload: schemas.PhotoCreate,
    session: AsyncSession = Depends(get_session),
) -> schemas.PhotoRead:
    """Attach a photo to a property or a unit; a new primary photo demotes the old one."""

    return await media_service.create_photo(payload, session)


@router.put("/photos/{photo_id}", response_model=schemas.PhotoRead)
async def update_photo(
    photo_id: int,
    payload: schemas.PhotoUpdate,
    session: AsyncSession = Depends(get_session),
) -> schemas.PhotoRead:
    return await media_service.update_photo(photo_id, payload, session)


@router.delete("/photos/{photo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_photo(photo_id: int, session: AsyncSession = Depends(get_session)) -> Response:
    await records.delete_record(session, Photo, photo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/maintenance", response_model=list[schemas.TicketRead])
async def list_tickets(
    unit_id: int | None = Query(default=None, ge=1, le=repo.MAX_ID),
    ticket_status: TicketStatus | None = Query(default=None, alias="status"),
    session: AsyncSession = Depends(get_session),
) -> list[schemas.TicketRead]:
    return await media_service.list_tickets(session, unit_id=unit_id, status=ticket_status)


@router.get("/maintenance/{ticket_id}", response_model=schemas.TicketRead)
async def get_ticket(ticket_id: int, session: AsyncSession = Depends(get_session)) -> schemas.TicketRead:
    return await repo.get_or_404(session, MaintenanceTicket, ticket_id, options=loaders.TICKET)


@router.post("/maintenance", response_model=schemas.TicketRead, status_code=status.HTTP_201_CREATED)
async def create_ticket(
    payload: schemas.TicketCreate,
    session: AsyncSession = Depends(get_session),
) -> schemas.TicketRead:
    return await media_service.create_ticket(payload, session)


@router.put("/maintenance/{ticket_id}", response_model=schemas.TicketRead)
async def update_ticket(
    ticket_id: int,
    payload: schemas.TicketUpdate,
    session: AsyncSession = Depends(get_session),
) -> schemas.TicketRead:
    """Update a ticket; moving it to resolved or closed stamps ``resolved_at``."""

    return await media_service.update_ticket(ticket_id, payload, session)


@router.delete("/maintenance/{ticket_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_ticket(ticket_id: int, session: AsyncSession = Depends(get_session)) -> Response:
    await records.delete_record(session, MaintenanceTicket, ticket_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
