"""Schemas for subscription plans and subscriptions."""
from __future__ import annotations

from pydantic import BaseModel, Field

from ..models.subscription import SubscriptionStatus
from .common import PlanSummary, SubscriptionSummary, Timestamps


class PlanCreate(BaseModel):
    name: str
    price: float = Field(ge=0)
    interval: str = "month"
    features: list[str] = Field(default_factory=list)
    is_active: bool = True


class PlanUpdate(BaseModel):
    name: str | None = None
    price: float | None = Field(default=None, ge=0)
    interval: str | None = None
    features: list[str] | None = None
    is_active: bool | None = None


class PlanRead(PlanSummary, Timestamps):
    pass


class SubscriptionCreate(BaseModel):
    user_id: str
    plan_id: int


class SubscriptionUpdate(BaseModel):
    plan_id: int | None = None
    status: SubscriptionStatus | None = None


class SubscriptionRead(SubscriptionSummary, Timestamps):
    plan: PlanSummary

