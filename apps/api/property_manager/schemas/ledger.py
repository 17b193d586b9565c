"""Schemas for the ledger and rent payments."""
from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, Field

from .common import (
    AccountSummary,
    AccountTypeSummary,
    PaymentSummary,
    PropertySummary,
    TenantSummary,
    Timestamps,
    TransactionSummary,
    TransactionTypeSummary,
)


class NamedCreate(BaseModel):
    name: str


class NamedUpdate(BaseModel):
    name: str | None = None


class AccountTypeRead(AccountTypeSummary, Timestamps):
    pass


class TransactionTypeRead(TransactionTypeSummary, Timestamps):
    pass


class AccountCreate(BaseModel):
    name: str
    account_type_id: int


class AccountUpdate(BaseModel):
    name: str | None = None
    account_type_id: int | None = None


class AccountRead(AccountSummary, Timestamps):
    account_type: AccountTypeSummary
    transactions: list[TransactionSummary] = Field(default_factory=list)


class TransactionCreate(BaseModel):
    account_id: int
    transaction_type_id: int | None = None
    property_id: int | None = None
    amount: float
    date: dt.date | None = None
    description: str | None = None


class TransactionUpdate(BaseModel):
    account_id: int | None = None
    transaction_type_id: int | None = None
    property_id: int | None = None
    amount: float | None = None
    date: dt.date | None = None
    description: str | None = None


class TransactionRead(TransactionSummary, Timestamps):
    account: AccountSummary
    transaction_type: TransactionTypeSummary | None = None
    property: PropertySummary | None = None


class PaymentCreate(BaseModel):
    tenant_id: int
    amount: float
    date: dt.date | None = None
    status: str | None = "pending"


class PaymentUpdate(BaseModel):
    tenant_id: int | None = None
    amount: float | None = None
    date: dt.date | None = None
    status: str | None = None


class PaymentRead(PaymentSummary, Timestamps):
    tenant: TenantSummary
