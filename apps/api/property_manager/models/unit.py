"""Unit model."""
from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .maintenance import MaintenanceTicket
    from .photo import Photo
    from .property import Property, PropertyAddress
    from .tenant import Tenant


class Unit(TimestampMixin, Base):
    """Individual rental unit located at one of a property's addresses."""

    __tablename__ = "units"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    property_id: Mapped[int] = mapped_column(
        ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, index=True
    )
    address_id: Mapped[int | None] = mapped_column(
        ForeignKey("property_addresses.id", ondelete="CASCADE"), index=True
    )
    unit_number: Mapped[str] = mapped_column(String, nullable=False)
    rent_amount: Mapped[float | None] = mapped_column(Float)
    status: Mapped[str | None] = mapped_column(String, default="vacant")

    property: Mapped["Property"] = relationship("Property", back_populates="units")
    address: Mapped["PropertyAddress | None"] = relationship("PropertyAddress", back_populates="units")
    tenants: Mapped[list["Tenant"]] = relationship(
        "Tenant", back_populates="unit", order_by="Tenant.id", passive_deletes=True
    )
    photos: Mapped[list["Photo"]] = relationship(
        "Photo", back_populates="unit", order_by="Photo.id", passive_deletes=True
    )
    maintenance_tickets: Mapped[list["MaintenanceTicket"]] = relationship(
        "MaintenanceTicket", back_populates="unit", order_by="MaintenanceTicket.id", passive_deletes=True
    )
