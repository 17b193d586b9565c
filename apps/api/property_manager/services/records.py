"""Plain create/update/delete flows for entities without extra business rules.

Each write runs in its own transaction and the response row is re-read with
its declared relations once the transaction has committed.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TypeVar

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.interfaces import ORMOption

from ..models.base import Base
from ..repositories import base as repo

ModelT = TypeVar("ModelT", bound=Base)

NO_REFERENCES: Mapping[str, type[Base]] = {}


async def create_record(
    session: AsyncSession,
    model: type[ModelT],
    payload: BaseModel,
    *,
    references: Mapping[str, type[Base]] = NO_REFERENCES,
    options: Sequence[ORMOption] = (),
) -> ModelT:
    """Insert a row from ``payload`` after checking its foreign keys."""

    data = payload.model_dump()
    async with session.begin():
        await repo.ensure_references(session, data, references)
        obj = model(**data)
        session.add(obj)
        await session.flush()
        ident = obj.id  # type: ignore[attr-defined]
    return await repo.get_or_404(session, model, ident, options=options)


async def update_record(
    session: AsyncSession,
    model: type[ModelT],
    ident: int,
    payload: BaseModel,
    *,
    references: Mapping[str, type[Base]] = NO_REFERENCES,
    options: Sequence[ORMOption] = (),
) -> ModelT:
    """Overwrite the fields present in ``payload``; 404 when the row is missing."""

    changes = payload.model_dump(exclude_unset=True)
    async with session.begin():
        obj = await repo.get_or_404(session, model, ident)
        await repo.ensure_references(session, changes, references)
        repo.apply_changes(obj, changes)
    return await repo.get_or_404(session, model, ident, options=options)


async def delete_record(session: AsyncSession, model: type[Base], ident: int) -> None:
    """Hard-delete a row that has no dependants needing a cascade."""

    async with session.begin():
        obj = await repo.get_or_404(session, model, ident)
        await session.delete(obj)
