"""Explicit cascade deletes, children first.

Foreign keys also declare ``ON DELETE`` rules, but SQLite only honours them
with a pragma, so dependants are removed here in a fixed order. Callers own
the transaction.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import (
    Association,
    BoardMember,
    MaintenanceTicket,
    Payment,
    Photo,
    PortfolioProperty,
    Property,
    PropertyAddress,
    Tenant,
    Transaction,
    Unit,
)

logger = logging.getLogger(__name__)


async def _ids(session: AsyncSession, column, *where) -> list[int]:
    result = await session.execute(select(column).where(*where))
    return list(result.scalars().all())


async def delete_tenants(session: AsyncSession, tenant_ids: Sequence[int]) -> None:
    """Delete tenants and their payments."""

    if not tenant_ids:
        return
    payments = await session.execute(delete(Payment).where(Payment.tenant_id.in_(tenant_ids)))
    await session.execute(delete(Tenant).where(Tenant.id.in_(tenant_ids)))
    logger.info("Deleted %d tenant(s) and %d payment(s)", len(tenant_ids), payments.rowcount)


async def delete_units(session: AsyncSession, unit_ids: Sequence[int]) -> None:
    """Delete units with their tenants, photos and maintenance tickets."""

    if not unit_ids:
        return
    await delete_tenants(session, await _ids(session, Tenant.id, Tenant.unit_id.in_(unit_ids)))
    await session.execute(delete(MaintenanceTicket).where(MaintenanceTicket.unit_id.in_(unit_ids)))
    await session.execute(delete(Photo).where(Photo.unit_id.in_(unit_ids)))
    await session.execute(delete(Unit).where(Unit.id.in_(unit_ids)))
    logger.info("Deleted unit(s) %s", list(unit_ids))


async def delete_addresses(session: AsyncSession, address_ids: Sequence[int]) -> None:
    """Delete addresses and every unit located at them."""

    if not address_ids:
        return
    await delete_units(session, await _ids(session, Unit.id, Unit.address_id.in_(address_ids)))
    await session.execute(delete(PropertyAddress).where(PropertyAddress.id.in_(address_ids)))
    logger.info("Deleted address(es) %s", list(address_ids))


async def delete_associations(session: AsyncSession, association_ids: Sequence[int]) -> None:
    if not association_ids:
        return
    await session.execute(delete(BoardMember).where(BoardMember.association_id.in_(association_ids)))
    await session.execute(delete(Association).where(Association.id.in_(association_ids)))


async def delete_property(session: AsyncSession, property_id: int) -> None:
    """Delete a property and everything hanging off it.

    Ledger transactions survive with ``property_id`` cleared. The owner is the parent
    of the property and is never deleted here.
    """

    await delete_units(session, await _ids(session, Unit.id, Unit.property_id == property_id))
    await delete_addresses(
        session, await _ids(session, PropertyAddress.id, PropertyAddress.property_id == property_id)
    )
    await delete_associations(
        session, await _ids(session, Association.id, Association.property_id == property_id)
    )
    await session.execute(delete(Photo).where(Photo.property_id == property_id))
    await session.execute(delete(PortfolioProperty).where(PortfolioProperty.property_id == property_id))
    await session.execute(
        update(Transaction).where(Transaction.property_id == property_id).values(property_id=None)
    )
    await session.execute(delete(Property).where(Property.id == property_id))
    logger.info("Deleted property %s", property_id)
