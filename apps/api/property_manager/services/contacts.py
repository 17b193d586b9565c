"""Deletes for owners and associations, which detach or cascade dependants."""
from __future__ import annotations

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Association, Owner, Property
from ..repositories import base as repo
from ..repositories import cascade


async def delete_owner(owner_id: int, session: AsyncSession) -> None:
    """Delete an owner; its properties stay, without an owner."""

    async with session.begin():
        owner = await repo.get_or_404(session, Owner, owner_id)
        await session.execute(update(Property).where(Property.owner_id == owner_id).values(owner_id=None))
        await session.delete(owner)


async def delete_association(association_id: int, session: AsyncSession) -> None:
    async with session.begin():
        await repo.get_or_404(session, Association, association_id)
        await cascade.delete_associations(session, [association_id])
