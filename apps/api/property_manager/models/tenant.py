"""Tenant and rent payment models."""
from __future__ import annotations

import datetime as dt
from typing import TYPE_CHECKING

from sqlalchemy import Date, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .unit import Unit


class Tenant(TimestampMixin, Base):
    """Leaseholder of a unit."""

    __tablename__ = "tenants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    unit_id: Mapped[int] = mapped_column(ForeignKey("units.id", ondelete="CASCADE"), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    email: Mapped[str | None] = mapped_column(String)
    phone: Mapped[str | None] = mapped_column(String)
    lease_start_date: Mapped[dt.date | None] = mapped_column(Date)
    lease_end_date: Mapped[dt.date | None] = mapped_column(Date)
    rent: Mapped[float | None] = mapped_column(Float)

    unit: Mapped["Unit"] = relationship("Unit", back_populates="tenants")
    payments: Mapped[list["Payment"]] = relationship(
        "Payment", back_populates="tenant", order_by="Payment.id", passive_deletes=True
    )


class Payment(TimestampMixin, Base):
    """Rent payment made by a tenant."""

    __tablename__ = "payments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tenant_id: Mapped[int] = mapped_column(ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False, index=True)
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    date: Mapped[dt.date | None] = mapped_column(Date)
    status: Mapped[str | None] = mapped_column(String, default="pending")

    tenant: Mapped["Tenant"] = relationship("Tenant", back_populates="payments")
