"""Flat record shapes shared by the nested read schemas."""
from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from ..models.maintenance import TicketPriority, TicketStatus
from ..models.subscription import SubscriptionStatus


class ORMModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class Timestamps(ORMModel):
    created_at: dt.datetime
    updated_at: dt.datetime


class OwnerSummary(ORMModel):
    id: int
    name: str
    email: str | None = None
    phone: str | None = None


class PropertySummary(ORMModel):
    id: int
    name: str
    type: str | None = None
    status: str | None = None
    value: float | None = None
    owner_id: int | None = None


class AddressSummary(ORMModel):
    id: int
    property_id: int
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    is_primary: bool = False


class UnitSummary(ORMModel):
    id: int
    property_id: int
    address_id: int | None = None
    unit_number: str
    rent_amount: float | None = None
    status: str | None = None


class TenantSummary(ORMModel):
    id: int
    unit_id: int
    name: str
    email: str | None = None
    phone: str | None = None
    lease_start_date: dt.date | None = None
    lease_end_date: dt.date | None = None
    rent: float | None = None


class PaymentSummary(ORMModel):
    id: int
    tenant_id: int
    amount: float
    date: dt.date | None = None
    status: str | None = None


class AssociationSummary(ORMModel):
    id: int
    property_id: int
    name: str
    contact_info: str | None = None
    fee: float | None = None
    due_date: dt.date | None = None


class BoardMemberSummary(ORMModel):
    id: int
    association_id: int
    name: str
    email: str | None = None
    phone: str | None = None


class AccountTypeSummary(ORMModel):
    id: int
    name: str


class AccountSummary(ORMModel):
    id: int
    name: str
    account_type_id: int


class TransactionTypeSummary(ORMModel):
    id: int
    name: str


class TransactionSummary(ORMModel):
    id: int
    account_id: int
    transaction_type_id: int | None = None
    property_id: int | None = None
    amount: float
    date: dt.date | None = None
    description: str | None = None


class PhotoSummary(ORMModel):
    id: int
    url: str
    name: str | None = None
    is_primary: bool = False
    property_id: int | None = None
    unit_id: int | None = None


class TicketSummary(ORMModel):
    id: int
    unit_id: int
    title: str
    description: str | None = None
    status: TicketStatus
    priority: TicketPriority
    resolved_at: dt.datetime | None = None


class PlanSummary(ORMModel):
    id: int
    name: str
    price: float
    interval: str
    features: list[str] = Field(default_factory=list)
    is_active: bool = True


class SubscriptionSummary(ORMModel):
    id: int
    user_id: str
    plan_id: int
    status: SubscriptionStatus
    started_at: dt.datetime
    cancelled_at: dt.datetime | None = None


class PortfolioSummary(ORMModel):
    id: int
    user_id: str
    name: str
    description: str | None = None
