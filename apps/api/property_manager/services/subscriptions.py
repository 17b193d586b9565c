"""Subscription plans and the one-active-subscription-per-user rule."""
from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.errors import ConflictError, InvalidReferenceError, RequestRejectedError
from ..models import Subscription, SubscriptionPlan, SubscriptionStatus
from ..repositories import base as repo
from ..repositories import loaders
from ..schemas import subscriptions as schemas

logger = logging.getLogger(__name__)


async def list_plans(session: AsyncSession, *, include_inactive: bool = False) -> list[SubscriptionPlan]:
    where = [] if include_inactive else [SubscriptionPlan.is_active.is_(True)]
    return await repo.list_all(session, SubscriptionPlan, where=where)


async def delete_plan(plan_id: int, session: AsyncSession) -> None:
    async with session.begin():
        plan = await repo.get_or_404(session, SubscriptionPlan, plan_id)
        in_use = await repo.count(session, Subscription, Subscription.plan_id == plan_id)
        if in_use:
            raise ConflictError(f"Plan {plan_id} has {in_use} subscription(s); deactivate it instead")
        await session.delete(plan)


async def list_subscriptions(session: AsyncSession, *, user_id: str | None = None) -> list[Subscription]:
    where = [Subscription.user_id == user_id] if user_id is not None else []
    return await repo.list_all(session, Subscription, options=loaders.SUBSCRIPTION, where=where)


async def create_subscription(payload: schemas.SubscriptionCreate, session: AsyncSession) -> Subscription:
    try:
        async with session.begin():
            await _require_active_plan(session, payload.plan_id)
            await _ensure_no_active(session, payload.user_id)
            subscription = Subscription(
                user_id=payload.user_id,
                plan_id=payload.plan_id,
                status=SubscriptionStatus.ACTIVE,
                started_at=datetime.now(timezone.utc),
            )
            session.add(subscription)
            await session.flush()
            subscription_id = subscription.id
    except IntegrityError as exc:
        # A concurrent request won the race past the count check.
        raise _already_active(payload.user_id) from exc

    logger.info("User %s subscribed to plan %s", payload.user_id, payload.plan_id)
    return await repo.get_or_404(session, Subscription, subscription_id, options=loaders.SUBSCRIPTION)


async def update_subscription(
    subscription_id: int, payload: schemas.SubscriptionUpdate, session: AsyncSession
) -> Subscription:
    """Switch plan and/or status; reactivation re-checks the one-active rule."""

    changes = payload.model_dump(exclude_unset=True)
    user_id = None
    try:
        async with session.begin():
            subscription = await repo.get_or_404(session, Subscription, subscription_id)
            user_id = subscription.user_id
            if changes.get("plan_id") is not None:
                await _require_active_plan(session, changes["plan_id"])
                subscription.plan_id = changes["plan_id"]

            status = changes.get("status")
            if status is SubscriptionStatus.ACTIVE and subscription.status is not SubscriptionStatus.ACTIVE:
                await _ensure_no_active(session, user_id)
                subscription.status = SubscriptionStatus.ACTIVE
                subscription.cancelled_at = None
            elif status is SubscriptionStatus.CANCELLED and subscription.status is not SubscriptionStatus.CANCELLED:
                _cancel(subscription)
    except IntegrityError as exc:
        raise _already_active(user_id) from exc

    return await repo.get_or_404(session, Subscription, subscription_id, options=loaders.SUBSCRIPTION)


async def cancel_subscription(subscription_id: int, session: AsyncSession) -> Subscription:
    async with session.begin():
        subscription = await repo.get_or_404(session, Subscription, subscription_id)
        if subscription.status is SubscriptionStatus.CANCELLED:
            raise ConflictError(f"Subscription {subscription_id} is already cancelled")
        _cancel(subscription)

    logger.info("Subscription %s cancelled", subscription_id)
    return await repo.get_or_404(session, Subscription, subscription_id, options=loaders.SUBSCRIPTION)


async def _require_active_plan(session: AsyncSession, plan_id: int) -> None:
    plan = await repo.get_by_id(session, SubscriptionPlan, plan_id)
    if plan is None:
        raise InvalidReferenceError("plan_id", "Subscription plan", plan_id)
    if not plan.is_active:
        raise RequestRejectedError(f"Plan {plan_id} is not available for new subscriptions")


async def _ensure_no_active(session: AsyncSession, user_id: str) -> None:
    active = await repo.count(
        session,
        Subscription,
        Subscription.user_id == user_id,
        Subscription.status == SubscriptionStatus.ACTIVE,
    )
    if active:
        raise _already_active(user_id)


def _already_active(user_id: str | None) -> ConflictError:
    return ConflictError(f"User {user_id} already has an active subscription")


def _cancel(subscription: Subscription) -> None:
    subscription.status = SubscriptionStatus.CANCELLED
    subscription.cancelled_at = datetime.now(timezone.utc)
