"""Schemas for units and tenants."""
from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, Field

from .common import (
    AddressSummary,
    PaymentSummary,
    PhotoSummary,
    PropertySummary,
    TenantSummary,
    TicketSummary,
    Timestamps,
    UnitSummary,
)


class UnitCreate(BaseModel):
    property_id: int | None = Field(default=None, description="Derived from address_id when omitted")
    address_id: int | None = None
    unit_number: str
    rent_amount: float | None = None
    status: str | None = "vacant"


class UnitUpdate(BaseModel):
    property_id: int | None = None
    address_id: int | None = None
    unit_number: str | None = None
    rent_amount: float | None = None
    status: str | None = None


class UnitRead(UnitSummary, Timestamps):
    property: PropertySummary
    address: AddressSummary | None = None
    tenants: list[TenantSummary] = Field(default_factory=list)
    photos: list[PhotoSummary] = Field(default_factory=list)
    maintenance_tickets: list[TicketSummary] = Field(default_factory=list)


class TenantCreate(BaseModel):
    unit_id: int
    name: str
    email: str | None = None
    phone: str | None = None
    lease_start_date: dt.date | None = None
    lease_end_date: dt.date | None = None
    rent: float | None = None


class TenantUpdate(BaseModel):
    unit_id: int | None = None
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    lease_start_date: dt.date | None = None
    lease_end_date: dt.date | None = None
    rent: float | None = None


class TenantRead(TenantSummary, Timestamps):
    unit: UnitSummary
    payments: list[PaymentSummary] = Field(default_factory=list)
