"""Unit and tenant endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.session import get_session
from ..models import Tenant, Unit
from ..repositories import base as repo
from ..repositories import loaders
from ..schemas import units as schemas
from ..services import units as units_service

router = APIRouter()


@router.get("/units", response_model=list[schemas.UnitRead])
async def list_units(session: AsyncSession = Depends(get_session)) -> list[schemas.UnitRead]:
    return await repo.list_all(session, Unit, options=loaders.UNIT)


@router.get("/units/{unit_id}", response_model=schemas.UnitRead)
async def get_unit(unit_id: int, session: AsyncSession = Depends(get_session)) -> schemas.UnitRead:
    return await repo.get_or_404(session, Unit, unit_id, options=loaders.UNIT)


@router.post("/units", response_model=schemas.UnitRead, status_code=status.HTTP_201_CREATED)
async def create_unit(
    payload: schemas.UnitCreate,
    session: AsyncSession = Depends(get_session),
) -> schemas.UnitRead:
    """Create a unit at a property, or at one of its addresses."""

    return await units_service.create_unit(payload, session)


@router.put("/units/{unit_id}", response_model=schemas.UnitRead)
async def update_unit(
    unit_id: int,
    payload: schemas.UnitUpdate,
    session: AsyncSession = Depends(get_session),
) -> schemas.UnitRead:
    return await units_service.update_unit(unit_id, payload, session)


@router.delete("/units/{unit_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_unit(unit_id: int, session: AsyncSession = Depends(get_session)) -> Response:
    """Delete a unit with its tenants, their payments, photos and tickets."""

    await units_service.delete_unit(unit_id, session)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/tenants", response_model=list[schemas.TenantRead])
async def list_tenants(session: AsyncSession = Depends(get_session)) -> list[schemas.TenantRead]:
    return await repo.list_all(session, Tenant, options=loaders.TENANT)


@router.get("/tenants/{tenant_id}", response_model=schemas.TenantRead)
async def get_tenant(tenant_id: int, session: AsyncSession = Depends(get_session)) -> schemas.TenantRead:
    return await repo.get_or_404(session, Tenant, tenant_id, options=loaders.TENANT)


@router.post("/tenants", response_model=schemas.TenantRead, status_code=status.HTTP_201_CREATED)
async def create_tenant(
    payload: schemas.TenantCreate,
    session: AsyncSession = Depends(get_session),
) -> schemas.TenantRead:
    return await units_service.create_tenant(payload, session)


@router.put("/tenants/{tenant_id}", response_model=schemas.TenantRead)
async def update_tenant(
    tenant_id: int,
    payload: schemas.TenantUpdate,
    session: AsyncSession = Depends(get_session),
) -> schemas.TenantRead:
    return await units_service.update_tenant(tenant_id, payload, session)


@router.delete("/tenants/{tenant_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tenant(tenant_id: int, session: AsyncSession = Depends(get_session)) -> Response:
    await units_service.delete_tenant(tenant_id, session)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
