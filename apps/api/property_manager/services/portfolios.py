"""Portfolios and their property memberships."""
from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.errors import ConflictError, InvalidReferenceError, ResourceNotFoundError
from ..models import Portfolio, PortfolioProperty, Property
from ..repositories import base as repo
from ..repositories import loaders
from ..schemas import portfolios as schemas


async def list_portfolios(session: AsyncSession, *, user_id: str | None = None) -> list[Portfolio]:
    where = [Portfolio.user_id == user_id] if user_id is not None else []
    return await repo.list_all(session, Portfolio, options=loaders.PORTFOLIO, where=where)


async def get_portfolio(session: AsyncSession, portfolio_id: int) -> Portfolio:
    return await repo.get_or_404(session, Portfolio, portfolio_id, options=loaders.PORTFOLIO)


async def create_portfolio(payload: schemas.PortfolioCreate, session: AsyncSession) -> Portfolio:
    async with session.begin():
        portfolio = Portfolio(**payload.model_dump(exclude={"property_ids"}))
        session.add(portfolio)
        await session.flush()
        portfolio_id = portfolio.id
        await _link(session, portfolio_id, dict.fromkeys(payload.property_ids))
    return await get_portfolio(session, portfolio_id)


async def delete_portfolio(portfolio_id: int, session: AsyncSession) -> None:
    async with session.begin():
        portfolio = await repo.get_or_404(session, Portfolio, portfolio_id)
        await session.execute(delete(PortfolioProperty).where(PortfolioProperty.portfolio_id == portfolio_id))
        await session.delete(portfolio)


async def add_property(portfolio_id: int, property_id: int, session: AsyncSession) -> Portfolio:
    async with session.begin():
        await repo.get_or_404(session, Portfolio, portfolio_id)
        if await _get_link(session, portfolio_id, property_id) is not None:
            raise ConflictError(f"Property {property_id} is already in portfolio {portfolio_id}")
        await _link(session, portfolio_id, [property_id])
    return await get_portfolio(session, portfolio_id)


async def remove_property(portfolio_id: int, property_id: int, session: AsyncSession) -> None:
    async with session.begin():
        await repo.get_or_404(session, Portfolio, portfolio_id)
        link = await _get_link(session, portfolio_id, property_id)
        if link is None:
            raise ResourceNotFoundError(f"Property {property_id} in portfolio", portfolio_id)
        await session.delete(link)


async def _get_link(session: AsyncSession, portfolio_id: int, property_id: int) -> PortfolioProperty | None:
    if not repo.in_id_range(property_id):
        return None
    return await session.get(PortfolioProperty, (portfolio_id, property_id))


async def _link(session: AsyncSession, portfolio_id: int, property_ids: Iterable[int]) -> None:
    for property_id in property_ids:
        if not await repo.exists(session, Property, property_id):
            raise InvalidReferenceError("property_id", "Property", property_id)
        session.add(PortfolioProperty(portfolio_id=portfolio_id, property_id=property_id))
    await session.flush()


async def list_properties(session: AsyncSession, portfolio_id: int) -> list[Property]:
    portfolio = await get_portfolio(session, portfolio_id)
    return list(portfolio.properties)
