"""Schemas for portfolios and their property memberships."""
from __future__ import annotations

from pydantic import BaseModel, Field

from .common import PortfolioSummary, PropertySummary, Timestamps


class PortfolioCreate(BaseModel):
    user_id: str
    name: str
    description: str | None = None
    property_ids: list[int] = Field(default_factory=list)


class PortfolioUpdate(BaseModel):
    name: str | None = None
    description: str | None = None


class PortfolioRead(PortfolioSummary, Timestamps):
    properties: list[PropertySummary] = Field(default_factory=list)


class PortfolioPropertyAdd(BaseModel):
    property_id: int
