"""Photo and maintenance ticket writes."""
from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.errors import RequestRejectedError
from ..models import MaintenanceTicket, Photo, Property, TicketStatus, Unit
from ..repositories import base as repo
from ..repositories import loaders
from ..schemas import media as schemas

PHOTO_REFERENCES = {"property_id": Property, "unit_id": Unit}
CLOSED_STATUSES = {TicketStatus.RESOLVED, TicketStatus.CLOSED}


async def create_photo(payload: schemas.PhotoCreate, session: AsyncSession) -> Photo:
    data = payload.model_dump()
    if data["property_id"] is None and data["unit_id"] is None:
        raise RequestRejectedError("A photo needs a property_id or a unit_id")
    async with session.begin():
        await repo.ensure_references(session, data, PHOTO_REFERENCES)
        if data["is_primary"]:
            await _clear_primary_photo(session, data["property_id"], data["unit_id"])
        photo = Photo(**data)
        session.add(photo)
        await session.flush()
        photo_id = photo.id
    return await repo.get_or_404(session, Photo, photo_id)


async def update_photo(photo_id: int, payload: schemas.PhotoUpdate, session: AsyncSession) -> Photo:
    changes = payload.model_dump(exclude_unset=True)
    async with session.begin():
        photo = await repo.get_or_404(session, Photo, photo_id)
        await repo.ensure_references(session, changes, PHOTO_REFERENCES)
        property_id = changes.get("property_id", photo.property_id)
        unit_id = changes.get("unit_id", photo.unit_id)
        if property_id is None and unit_id is None:
            raise RequestRejectedError("A photo needs a property_id or a unit_id")
        if changes.get("is_primary"):
            await _clear_primary_photo(session, property_id, unit_id, keep=photo_id)
        repo.apply_changes(photo, changes)
    return await repo.get_or_404(session, Photo, photo_id)


async def list_photos(
    session: AsyncSession, *, property_id: int | None = None, unit_id: int | None = None
) -> list[Photo]:
    where = []
    if property_id is not None:
        where.append(Photo.property_id == property_id)
    if unit_id is not None:
        where.append(Photo.unit_id == unit_id)
    return await repo.list_all(session, Photo, where=where)


async def _clear_primary_photo(
    session: AsyncSession, property_id: int | None, unit_id: int | None, keep: int | None = None
) -> None:
    """Demote the current primary photo of the same unit, or of the property when unit-less."""

    if unit_id is not None:
        scope = Photo.unit_id == unit_id
    else:
        scope = (Photo.property_id == property_id) & Photo.unit_id.is_(None)
    stmt = update(Photo).where(scope, Photo.is_primary.is_(True))
    if keep is not None:
        stmt = stmt.where(Photo.id != keep)
    await session.execute(stmt.values(is_primary=False))


async def list_tickets(
    session: AsyncSession, *, unit_id: int | None = None, status: TicketStatus | None = None
) -> list[MaintenanceTicket]:
    where = []
    if unit_id is not None:
        where.append(MaintenanceTicket.unit_id == unit_id)
    if status is not None:
        where.append(MaintenanceTicket.status == status)
    return await repo.list_all(session, MaintenanceTicket, options=loaders.TICKET, where=where)


async def create_ticket(payload: schemas.TicketCreate, session: AsyncSession) -> MaintenanceTicket:
    data = payload.model_dump()
    async with session.begin():
        await repo.ensure_references(session, data, {"unit_id": Unit})
        ticket = MaintenanceTicket(**data)
        _stamp_resolution(ticket)
        session.add(ticket)
        await session.flush()
        ticket_id = ticket.id
    return await repo.get_or_404(session, MaintenanceTicket, ticket_id, options=loaders.TICKET)


async def update_ticket(
    ticket_id: int, payload: schemas.TicketUpdate, session: AsyncSession
) -> MaintenanceTicket:
    changes = payload.model_dump(exclude_unset=True)
    if "status" in changes and changes["status"] is None:
        raise RequestRejectedError("status cannot be null")
    if "priority" in changes and changes["priority"] is None:
        raise RequestRejectedError("priority cannot be null")
    async with session.begin():
        ticket = await repo.get_or_404(session, MaintenanceTicket, ticket_id)
        await repo.ensure_references(session, changes, {"unit_id": Unit})
        repo.apply_changes(ticket, changes)
        _stamp_resolution(ticket)
    return await repo.get_or_404(session, MaintenanceTicket, ticket_id, options=loaders.TICKET)


def _stamp_resolution(ticket: MaintenanceTicket) -> None:
    """Keep ``resolved_at`` in step with the ticket status."""

    if ticket.status in CLOSED_STATUSES:
        if ticket.resolved_at is None:
            ticket.resolved_at = datetime.now(timezone.utc)
    else:
        ticket.resolved_at = None
