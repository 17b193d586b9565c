"""Generic read/write helpers shared by every entity repository."""
from __future__ import annotations

import re
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, TypeVar

from sqlalchemy import Select, func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.interfaces import ORMOption

from ..core.errors import InvalidReferenceError, RequestRejectedError, ResourceNotFoundError
from ..models.base import Base

ModelT = TypeVar("ModelT", bound=Base)

# Integer primary keys are 32-bit on PostgreSQL.
MAX_ID = 2**31 - 1


def in_id_range(ident: int) -> bool:
    return 1 <= ident <= MAX_ID


def label(model: type[Base]) -> str:
    """Human-readable resource name used in error messages."""

    return re.sub(r"(?<!^)(?=[A-Z])", " ", model.__name__).capitalize()


async def list_all(
    session: AsyncSession,
    model: type[ModelT],
    *,
    options: Sequence[ORMOption] = (),
    where: Iterable[Any] = (),
) -> list[ModelT]:
    """Return all rows of ``model`` ordered by id with the given loader options."""

    stmt: Select[tuple[ModelT]] = (
        select(model)
        .where(*where)
        .options(*options)
        .order_by(model.id.asc())  # type: ignore[attr-defined]
        .execution_options(populate_existing=True)
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_by_id(
    session: AsyncSession,
    model: type[ModelT],
    ident: int,
    *,
    options: Sequence[ORMOption] = (),
) -> ModelT | None:
    """Return a single row by primary key, refreshing any identity-mapped copy."""

    if not in_id_range(ident):
        return None
    stmt = (
        select(model)
        .where(model.id == ident)  # type: ignore[attr-defined]
        .options(*options)
        .execution_options(populate_existing=True)
    )
    result = await session.execute(stmt)
    return result.scalar_one_or_none()


async def get_or_404(
    session: AsyncSession,
    model: type[ModelT],
    ident: int,
    *,
    options: Sequence[ORMOption] = (),
) -> ModelT:
    """Return a row or raise ``ResourceNotFoundError``."""

    obj = await get_by_id(session, model, ident, options=options)
    if obj is None:
        raise ResourceNotFoundError(label(model), ident)
    return obj


async def exists(session: AsyncSession, model: type[Base], ident: int) -> bool:
    if not in_id_range(ident):
        return False
    stmt = select(func.count()).select_from(model).where(model.id == ident)  # type: ignore[attr-defined]
    return (await session.execute(stmt)).scalar_one() > 0


async def count(session: AsyncSession, model: type[Base], *where: Any) -> int:
    stmt = select(func.count()).select_from(model).where(*where)
    return (await session.execute(stmt)).scalar_one()


async def ensure_references(
    session: AsyncSession,
    data: Mapping[str, Any],
    references: Mapping[str, type[Base]],
) -> None:
    """Raise ``InvalidReferenceError`` for any non-null foreign key without a parent row."""

    for field, parent in references.items():
        ident = data.get(field)
        if ident is None:
            continue
        if not await exists(session, parent, ident):
            raise InvalidReferenceError(field, label(parent), ident)


def apply_changes(obj: ModelT, changes: Mapping[str, Any]) -> ModelT:
    """Overwrite the supplied attributes on ``obj``.

    An explicit ``null`` for a NOT NULL column is rejected before anything is set.
    """

    columns = inspect(obj).mapper.column_attrs
    for key, value in changes.items():
        if value is None and key in columns and not columns[key].columns[0].nullable:
            raise RequestRejectedError(f"{key} cannot be null")
    for key, value in changes.items():
        setattr(obj, key, value)
    return obj
