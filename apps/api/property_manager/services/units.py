"""Unit and tenant writes with their placement and lease checks."""
from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from ..core.errors import InvalidReferenceError, RequestRejectedError
from ..models import Property, PropertyAddress, Tenant, Unit
from ..repositories import base as repo
from ..repositories import cascade
from ..repositories import loaders
from ..schemas import units as schemas

TENANT_REFERENCES = {"unit_id": Unit}


async def create_unit(payload: schemas.UnitCreate, session: AsyncSession) -> Unit:
    data = payload.model_dump()
    async with session.begin():
        data["property_id"] = await _resolve_placement(session, data["property_id"], data["address_id"])
        unit = Unit(**data)
        session.add(unit)
        await session.flush()
        unit_id = unit.id
    return await repo.get_or_404(session, Unit, unit_id, options=loaders.UNIT)


async def update_unit(unit_id: int, payload: schemas.UnitUpdate, session: AsyncSession) -> Unit:
    changes = payload.model_dump(exclude_unset=True)
    async with session.begin():
        unit = await repo.get_or_404(session, Unit, unit_id)
        if "property_id" in changes or "address_id" in changes:
            address_id = changes.get("address_id", unit.address_id)
            property_id = changes.get("property_id", unit.property_id)
            if "property_id" not in changes and address_id is not None:
                property_id = None
            elif "address_id" not in changes and property_id != unit.property_id:
                # Moving to another property detaches the unit from its old address.
                address_id = None
            changes["property_id"] = await _resolve_placement(session, property_id, address_id)
            changes["address_id"] = address_id
        repo.apply_changes(unit, changes)
    return await repo.get_or_404(session, Unit, unit_id, options=loaders.UNIT)


async def delete_unit(unit_id: int, session: AsyncSession) -> None:
    async with session.begin():
        await repo.get_or_404(session, Unit, unit_id)
        await cascade.delete_units(session, [unit_id])


async def create_tenant(payload: schemas.TenantCreate, session: AsyncSession) -> Tenant:
    data = payload.model_dump()
    _check_lease(data.get("lease_start_date"), data.get("lease_end_date"))
    async with session.begin():
        await repo.ensure_references(session, data, TENANT_REFERENCES)
        tenant = Tenant(**data)
        session.add(tenant)
        await session.flush()
        tenant_id = tenant.id
    return await repo.get_or_404(session, Tenant, tenant_id, options=loaders.TENANT)


async def update_tenant(tenant_id: int, payload: schemas.TenantUpdate, session: AsyncSession) -> Tenant:
    changes = payload.model_dump(exclude_unset=True)
    async with session.begin():
        tenant = await repo.get_or_404(session, Tenant, tenant_id)
        await repo.ensure_references(session, changes, TENANT_REFERENCES)
        _check_lease(
            changes.get("lease_start_date", tenant.lease_start_date),
            changes.get("lease_end_date", tenant.lease_end_date),
        )
        repo.apply_changes(tenant, changes)
    return await repo.get_or_404(session, Tenant, tenant_id, options=loaders.TENANT)


async def delete_tenant(tenant_id: int, session: AsyncSession) -> None:
    async with session.begin():
        await repo.get_or_404(session, Tenant, tenant_id)
        await cascade.delete_tenants(session, [tenant_id])


async def _resolve_placement(session: AsyncSession, property_id: int | None, address_id: int | None) -> int:
    """Return the property id for a unit placed at ``address_id`` and/or ``property_id``."""

    if address_id is not None:
        address = await repo.get_by_id(session, PropertyAddress, address_id)
        if address is None:
            raise InvalidReferenceError("address_id", "Property address", address_id)
        if property_id is not None and property_id != address.property_id:
            raise RequestRejectedError(
                f"Address {address_id} belongs to property {address.property_id}, not {property_id}"
            )
        return address.property_id

    if property_id is None:
        raise RequestRejectedError("Either property_id or address_id is required")
    if not await repo.exists(session, Property, property_id):
        raise InvalidReferenceError("property_id", "Property", property_id)
    return property_id


def _check_lease(start, end) -> None:
    if start is not None and end is not None and end < start:
        raise RequestRejectedError("lease_end_date must not be before lease_start_date")
