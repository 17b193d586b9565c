"""Subscription plan and subscription endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.session import get_session
from ..models import Subscription, SubscriptionPlan
from ..repositories import base as repo
from ..repositories import loaders
from ..schemas import subscriptions as schemas
from ..services import records
from ..services import subscriptions as subscriptions_service

router = APIRouter()


@router.get("/subscription/plans", response_model=list[schemas.PlanRead])
async def list_plans(
    include_inactive: bool = Query(default=False),
    session: AsyncSession = Depends(get_session),
) -> list[schemas.PlanRead]:
    return await subscriptions_service.list_plans(session, include_inactive=include_inactive)


@router.get("/subscription/plans/{plan_id}", response_model=schemas.PlanRead)
async def get_plan(plan_id: int, session: AsyncSession = Depends(get_session)) -> schemas.PlanRead:
    return await repo.get_or_404(session, SubscriptionPlan, plan_id)


@router.post("/subscription/plans", response_model=schemas.PlanRead, status_code=status.HTTP_201_CREATED)
async def create_plan(
    payload: schemas.PlanCreate,
    session: AsyncSession = Depends(get_session),
) -> schemas.PlanRead:
    return await records.create_record(session, SubscriptionPlan, payload)


@router.put("/subscription/plans/{plan_id}", response_model=schemas.PlanRead)
async def update_plan(
    plan_id: int,
    payload: schemas.PlanUpdate,
    session: AsyncSession = Depends(get_session),
) -> schemas.PlanRead:
    return await records.update_record(session, SubscriptionPlan, plan_id, payload)


@router.delete("/subscription/plans/{plan_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_plan(plan_id: int, session: AsyncSession = Depends(get_session)) -> Response:
    """Delete a plan nobody has subscribed to; 409 otherwise."""

    await subscriptions_service.delete_plan(plan_id, session)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/subscriptions", response_model=list[schemas.SubscriptionRead])
async def list_subscriptions(
    user_id: str | None = Query(default=None),
    session: AsyncSession = Depends(get_session),
) -> list[schemas.SubscriptionRead]:
    return await subscriptions_service.list_subscriptions(session, user_id=user_id)


@router.get("/subscriptions/{subscription_id}", response_model=schemas.SubscriptionRead)
async def get_subscription(
    subscription_id: int, session: AsyncSession = Depends(get_session)
) -> schemas.SubscriptionRead:
    return await repo.get_or_404(session, Subscription, subscription_id, options=loaders.SUBSCRIPTION)


@router.post("/subscriptions", response_model=schemas.SubscriptionRead, status_code=status.HTTP_201_CREATED)
async def create_subscription(
    payload: schemas.SubscriptionCreate,
    session: AsyncSession = Depends(get_session),
) -> schemas.SubscriptionRead:
    """Subscribe a user to an active plan; a user holds at most one active subscription."""

    return await subscriptions_service.create_subscription(payload, session)


@router.put("/subscriptions/{subscription_id}", response_model=schemas.SubscriptionRead)
async def update_subscription(
    subscription_id: int,
    payload: schemas.SubscriptionUpdate,
    session: AsyncSession = Depends(get_session),
) -> schemas.SubscriptionRead:
    return await subscriptions_service.update_subscription(subscription_id, payload, session)


@router.post("/subscriptions/{subscription_id}/cancel", response_model=schemas.SubscriptionRead)
async def cancel_subscription(
    subscription_id: int, session: AsyncSession = Depends(get_session)
) -> schemas.SubscriptionRead:
    return await subscriptions_service.cancel_subscription(subscription_id, session)


@router.delete("/subscriptions/{subscription_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_subscription(subscription_id: int, session: AsyncSession = Depends(get_session)) -> Response:
    await records.delete_record(session, Subscription, subscription_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
