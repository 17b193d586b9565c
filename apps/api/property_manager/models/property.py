"""Property and property address models."""
from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .association import Association
    from .ledger import Transaction
    from .owner import Owner
    from .photo import Photo
    from .portfolio import Portfolio
    from .unit import Unit


class Property(TimestampMixin, Base):
    """Represents a managed property with one or more street addresses."""

    __tablename__ = "properties"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    type: Mapped[str | None] = mapped_column(String)
    status: Mapped[str | None] = mapped_column(String, default="active")
    value: Mapped[float | None] = mapped_column(Float)
    owner_id: Mapped[int | None] = mapped_column(ForeignKey("owners.id", ondelete="SET NULL"), index=True)

    owner: Mapped["Owner | None"] = relationship("Owner", back_populates="properties")
    addresses: Mapped[list["PropertyAddress"]] = relationship(
        "PropertyAddress", back_populates="property", order_by="PropertyAddress.id", passive_deletes=True
    )
    units: Mapped[list["Unit"]] = relationship(
        "Unit", back_populates="property", order_by="Unit.id", passive_deletes=True
    )
    associations: Mapped[list["Association"]] = relationship(
        "Association", back_populates="property", order_by="Association.id", passive_deletes=True
    )
    transactions: Mapped[list["Transaction"]] = relationship(
        "Transaction", back_populates="property", order_by="Transaction.id", passive_deletes=True
    )
    photos: Mapped[list["Photo"]] = relationship(
        "Photo", back_populates="property", order_by="Photo.id", passive_deletes=True
    )
    portfolios: Mapped[list["Portfolio"]] = relationship(
        "Portfolio",
        secondary="portfolio_properties",
        order_by="Portfolio.id",
        viewonly=True,
    )


class PropertyAddress(TimestampMixin, Base):
    """Street address of a property; at most one per property is primary."""

    __tablename__ = "property_addresses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    property_id: Mapped[int] = mapped_column(
        ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, index=True
    )
    street: Mapped[str | None] = mapped_column(String)
    city: Mapped[str | None] = mapped_column(String)
    state: Mapped[str | None] = mapped_column(String)
    zip: Mapped[str | None] = mapped_column(String)
    is_primary: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    property: Mapped["Property"] = relationship("Property", back_populates="addresses")
    units: Mapped[list["Unit"]] = relationship(
        "Unit", back_populates="address", order_by="Unit.id", passive_deletes=True
    )
