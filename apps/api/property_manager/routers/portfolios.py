"""Portfolio endpoints with nested property membership."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.session import get_session
from ..models import Portfolio
from ..repositories import loaders
from ..schemas import portfolios as schemas
from ..schemas.common import PropertySummary
from ..services import portfolios as portfolios_service
from ..services import records

router = APIRouter()


@router.get("", response_model=list[schemas.PortfolioRead])
async def list_portfolios(
    user_id: str | None = Query(default=None),
    session: AsyncSession = Depends(get_session),
) -> list[schemas.PortfolioRead]:
    return await portfolios_service.list_portfolios(session, user_id=user_id)


@router.get("/{portfolio_id}", response_model=schemas.PortfolioRead)
async def get_portfolio(portfolio_id: int, session: AsyncSession = Depends(get_session)) -> schemas.PortfolioRead:
    return await portfolios_service.get_portfolio(session, portfolio_id)


@router.post("", response_model=schemas.PortfolioRead, status_code=status.HTTP_201_CREATED)
async def create_portfolio(
    payload: schemas.PortfolioCreate,
    session: AsyncSession = Depends(get_session),
) -> schemas.PortfolioRead:
    return await portfolios_service.create_portfolio(payload, session)


@router.put("/{portfolio_id}", response_model=schemas.PortfolioRead)
async def update_portfolio(
    portfolio_id: int,
    payload: schemas.PortfolioUpdate,
    session: AsyncSession = Depends(get_session),
) -> schemas.PortfolioRead:
    return await records.update_record(session, Portfolio, portfolio_id, payload, options=loaders.PORTFOLIO)


@router.delete("/{portfolio_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_portfolio(portfolio_id: int, session: AsyncSession = Depends(get_session)) -> Response:
    """Delete a portfolio; its properties are untouched."""

    await portfolios_service.delete_portfolio(portfolio_id, session)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{portfolio_id}/properties", response_model=list[PropertySummary])
async def list_properties(
    portfolio_id: int, session: AsyncSession = Depends(get_session)
) -> list[PropertySummary]:
    return await portfolios_service.list_properties(session, portfolio_id)


@router.post(
    "/{portfolio_id}/properties",
    response_model=schemas.PortfolioRead,
    status_code=status.HTTP_201_CREATED,
)
async def add_property(
    portfolio_id: int,
    payload: schemas.PortfolioPropertyAdd,
    session: AsyncSession = Depends(get_session),
) -> schemas.PortfolioRead:
    return await portfolios_service.add_property(portfolio_id, payload.property_id, session)


@router.delete("/{portfolio_id}/properties/{property_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_property(
    portfolio_id: int,
    property_id: int,
    session: AsyncSession = Depends(get_session),
) -> Response:
    await portfolios_service.remove_property(portfolio_id, property_id, session)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
