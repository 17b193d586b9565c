"""Property writes, including the nested address and photo lists.

A property and its child lists are always written in one transaction: either
the parent row and every child change land together or nothing does.

Child lists are reconciled against the stored rows by id:

* an entry whose ``id`` matches a child of this property updates that child
  with the fields the client supplied;
* an entry without ``id``, or with an id belonging to something else, is
  inserted as a new row;
* stored children missing from the list are deleted (addresses take their
  units, tenants and payments with them).

The first entry of each list becomes the primary one; every other entry is
demoted regardless of the flag it was submitted with.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.errors import RequestRejectedError, ResourceNotFoundError
from ..models import Owner, Photo, Property, PropertyAddress
from ..repositories import base as repo
from ..repositories import cascade
from ..repositories import loaders
from ..schemas import properties as schemas

logger = logging.getLogger(__name__)

PROPERTY_REFERENCES = {"owner_id": Owner}
CHILD_LISTS = {"addresses", "photos"}


async def list_properties(session: AsyncSession) -> list[Property]:
    return await repo.list_all(session, Property, options=loaders.PROPERTY)


async def get_property(session: AsyncSession, property_id: int) -> Property:
    return await repo.get_or_404(session, Property, property_id, options=loaders.PROPERTY)


async def create_property(payload: schemas.PropertyCreate, session: AsyncSession) -> Property:
    """Insert a property together with its initial addresses and photos."""

    data = payload.model_dump(exclude=CHILD_LISTS)
    async with session.begin():
        await repo.ensure_references(session, data, PROPERTY_REFERENCES)
        prop = Property(**data)
        session.add(prop)
        await session.flush()
        property_id = prop.id
        await _sync_addresses(session, property_id, payload.addresses)
        await _sync_photos(session, property_id, payload.photos)

    logger.info(
        "Created property %s with %d address(es) and %d photo(s)",
        property_id,
        len(payload.addresses),
        len(payload.photos),
    )
    return await get_property(session, property_id)


async def update_property(
    property_id: int, payload: schemas.PropertyUpdate, session: AsyncSession
) -> Property:
    """Update a property; child lists are only reconciled when supplied."""

    changes = payload.model_dump(exclude_unset=True, exclude=CHILD_LISTS)
    async with session.begin():
        prop = await repo.get_or_404(session, Property, property_id)
        await repo.ensure_references(session, changes, PROPERTY_REFERENCES)
        repo.apply_changes(prop, changes)
        if payload.addresses is not None:
            await _sync_addresses(session, property_id, payload.addresses)
        if payload.photos is not None:
            await _sync_photos(session, property_id, payload.photos)

    return await get_property(session, property_id)


async def delete_property(property_id: int, session: AsyncSession) -> None:
    async with session.begin():
        await repo.get_or_404(session, Property, property_id)
        await cascade.delete_property(session, property_id)


async def list_addresses(session: AsyncSession, property_id: int) -> list[PropertyAddress]:
    if not await repo.exists(session, Property, property_id):
        raise ResourceNotFoundError("Property", property_id)
    return await repo.list_all(
        session,
        PropertyAddress,
        options=loaders.ADDRESS,
        where=[PropertyAddress.property_id == property_id],
    )


async def replace_addresses(
    property_id: int, addresses: Sequence[schemas.AddressInput], session: AsyncSession
) -> list[PropertyAddress]:
    """Reconcile the full address list of a property on its own."""

    async with session.begin():
        await repo.get_or_404(session, Property, property_id)
        await _sync_addresses(session, property_id, addresses)
    return await list_addresses(session, property_id)


async def add_address(
    property_id: int, payload: schemas.AddressCreate, session: AsyncSession
) -> PropertyAddress:
    """Append one address; it becomes primary if asked to or if it is the first."""

    async with session.begin():
        await repo.get_or_404(session, Property, property_id)
        has_addresses = await repo.count(session, PropertyAddress, PropertyAddress.property_id == property_id) > 0
        make_primary = payload.is_primary or not has_addresses
        if make_primary:
            await _clear_primary_address(session, property_id)
        address = PropertyAddress(property_id=property_id, **payload.model_dump(exclude={"is_primary"}))
        address.is_primary = make_primary
        session.add(address)
        await session.flush()
        address_id = address.id
    return await repo.get_or_404(session, PropertyAddress, address_id, options=loaders.ADDRESS)


async def update_address(
    address_id: int, payload: schemas.AddressUpdate, session: AsyncSession
) -> PropertyAddress:
    changes = payload.model_dump(exclude_unset=True)
    async with session.begin():
        address = await repo.get_or_404(session, PropertyAddress, address_id)
        if changes.pop("is_primary", None):
            await _clear_primary_address(session, address.property_id, keep=address_id)
            address.is_primary = True
        elif "is_primary" in payload.model_fields_set and address.is_primary:
            raise RequestRejectedError(
                "Cannot unset the primary address; mark another address as primary instead"
            )
        repo.apply_changes(address, changes)
    return await repo.get_or_404(session, PropertyAddress, address_id, options=loaders.ADDRESS)


async def delete_address(address_id: int, session: AsyncSession) -> None:
    """Delete one address with its units and promote a new primary if needed."""

    async with session.begin():
        address = await repo.get_or_404(session, PropertyAddress, address_id)
        property_id, was_primary = address.property_id, address.is_primary
        await cascade.delete_addresses(session, [address_id])
        if was_primary:
            await _promote_first_address(session, property_id)


async def _sync_addresses(
    session: AsyncSession, property_id: int, submitted: Sequence[schemas.AddressInput]
) -> None:
    existing = {
        address.id: address
        for address in await repo.list_all(
            session, PropertyAddress, where=[PropertyAddress.property_id == property_id]
        )
    }
    kept: set[int] = set()

    for index, item in enumerate(submitted):
        address = existing.get(item.id) if item.id is not None else None
        if address is None:
            address = PropertyAddress(
                property_id=property_id, **item.model_dump(exclude={"id", "is_primary"})
            )
            session.add(address)
        else:
            kept.add(address.id)
            repo.apply_changes(address, item.model_dump(exclude_unset=True, exclude={"id", "is_primary"}))
        address.is_primary = index == 0

    removed = [address_id for address_id in existing if address_id not in kept]
    await cascade.delete_addresses(session, removed)
    await session.flush()


async def _sync_photos(
    session: AsyncSession, property_id: int, submitted: Sequence[schemas.PhotoInput]
) -> None:
    existing = {
        photo.id: photo
        for photo in await repo.list_all(
            session, Photo, where=[Photo.property_id == property_id, Photo.unit_id.is_(None)]
        )
    }
    kept: set[int] = set()

    for index, item in enumerate(submitted):
        photo = existing.get(item.id) if item.id is not None else None
        if photo is None:
            if not item.url:
                raise RequestRejectedError(f"photos[{index}].url is required for new photos")
            photo = Photo(property_id=property_id, **item.model_dump(exclude={"id", "is_primary"}))
            session.add(photo)
        else:
            kept.add(photo.id)
            repo.apply_changes(photo, item.model_dump(exclude_unset=True, exclude={"id", "is_primary"}))
        photo.is_primary = index == 0

    for photo_id, photo in existing.items():
        if photo_id not in kept:
            await session.delete(photo)
    await session.flush()


async def _clear_primary_address(session: AsyncSession, property_id: int, keep: int | None = None) -> None:
    stmt = update(PropertyAddress).where(
        PropertyAddress.property_id == property_id, PropertyAddress.is_primary.is_(True)
    )
    if keep is not None:
        stmt = stmt.where(PropertyAddress.id != keep)
    await session.execute(stmt.values(is_primary=False))


async def _promote_first_address(session: AsyncSession, property_id: int) -> None:
    result = await session.execute(
        select(PropertyAddress)
        .where(PropertyAddress.property_id == property_id)
        .order_by(PropertyAddress.id.asc())
        .limit(1)
    )
    successor = result.scalar_one_or_none()
    if successor is not None:
        successor.is_primary = True
        logger.info("Address %s promoted to primary for property %s", successor.id, property_id)
