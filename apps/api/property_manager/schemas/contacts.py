"""Schemas for owners, associations and board members."""
from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, Field

from .common import AssociationSummary, BoardMemberSummary, OwnerSummary, PropertySummary, Timestamps


class OwnerCreate(BaseModel):
    name: str
    email: str | None = None
    phone: str | None = None


class OwnerUpdate(BaseModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None


class OwnerRead(OwnerSummary, Timestamps):
    properties: list[PropertySummary] = Field(default_factory=list)


class AssociationCreate(BaseModel):
    property_id: int
    name: str
    contact_info: str | None = None
    fee: float | None = None
    due_date: dt.date | None = None


class AssociationUpdate(BaseModel):
    property_id: int | None = None
    name: str | None = None
    contact_info: str | None = None
    fee: float | None = None
    due_date: dt.date | None = None


class AssociationRead(AssociationSummary, Timestamps):
    property: PropertySummary
    board_members: list[BoardMemberSummary] = Field(default_factory=list)


class BoardMemberCreate(BaseModel):
    association_id: int
    name: str
    email: str | None = None
    phone: str | None = None


class BoardMemberUpdate(BaseModel):
    association_id: int | None = None
    name: str | None = None
    email: str | None = None
    phone: str | None = None


class BoardMemberRead(BoardMemberSummary, Timestamps):
    association: AssociationSummary
