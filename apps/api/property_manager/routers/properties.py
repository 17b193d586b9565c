"""Property endpoints, including the nested address sub-resource."""
from __future__ import annotations

from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.session import get_session
from ..schemas import properties as schemas
from ..services import properties as properties_service

router = APIRouter()


# Address routes first so "/addresses/{id}" is never read as a property id.
@router.put("/addresses/{address_id}", response_model=schemas.AddressRead)
async def update_address(
    address_id: int,
    payload: schemas.AddressUpdate,
    session: AsyncSession = Depends(get_session),
) -> schemas.AddressRead:
    """Update one address; marking it primary demotes its siblings."""

    return await properties_service.update_address(address_id, payload, session)


@router.delete("/addresses/{address_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_address(address_id: int, session: AsyncSession = Depends(get_session)) -> Response:
    """Delete one address together with its units and their tenants."""

    await properties_service.delete_address(address_id, session)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("", response_model=list[schemas.PropertyRead])
async def list_properties(session: AsyncSession = Depends(get_session)) -> list[schemas.PropertyRead]:
    return await properties_service.list_properties(session)


@router.get("/{property_id}", response_model=schemas.PropertyRead)
async def get_property(property_id: int, session: AsyncSession = Depends(get_session)) -> schemas.PropertyRead:
    return await properties_service.get_property(session, property_id)


@router.post("", response_model=schemas.PropertyRead, status_code=status.HTTP_201_CREATED)
async def create_property(
    payload: schemas.PropertyCreate,
    session: AsyncSession = Depends(get_session),
) -> schemas.PropertyRead:
    """Create a property with optional nested addresses and photos in one transaction."""

    return await properties_service.create_property(payload, session)


@router.put("/{property_id}", response_model=schemas.PropertyRead)
async def update_property(
    property_id: int,
    payload: schemas.PropertyUpdate,
    session: AsyncSession = Depends(get_session),
) -> schemas.PropertyRead:
    """Update a property and reconcile any supplied address or photo list."""

    return await properties_service.update_property(property_id, payload, session)


@router.delete("/{property_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_property(property_id: int, session: AsyncSession = Depends(get_session)) -> Response:
    """Delete a property with its addresses, units, tenants and other dependants."""

    await properties_service.delete_property(property_id, session)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{property_id}/addresses", response_model=list[schemas.AddressRead])
async def list_addresses(
    property_id: int, session: AsyncSession = Depends(get_session)
) -> list[schemas.AddressRead]:
    return await properties_service.list_addresses(session, property_id)


@router.post(
    "/{property_id}/addresses",
    response_model=schemas.AddressRead,
    status_code=status.HTTP_201_CREATED,
)
async def add_address(
    property_id: int,
    payload: schemas.AddressCreate,
    session: AsyncSession = Depends(get_session),
) -> schemas.AddressRead:
    return await properties_service.add_address(property_id, payload, session)


@router.put("/{property_id}/addresses", response_model=list[schemas.AddressRead])
async def replace_addresses(
    property_id: int,
    addresses: list[schemas.AddressInput] = Body(...),
    session: AsyncSession = Depends(get_session),
) -> list[schemas.AddressRead]:
    """Replace the full address list; the first entry becomes primary."""

    return await properties_service.replace_addresses(property_id, addresses, session)
