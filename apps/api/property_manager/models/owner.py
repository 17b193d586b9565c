"""Owner model."""
from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .property import Property


class Owner(TimestampMixin, Base):
    """Person or entity owning one or more properties."""

    __tablename__ = "owners"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    email: Mapped[str | None] = mapped_column(String)
    phone: Mapped[str | None] = mapped_column(String)

    properties: Mapped[list["Property"]] = relationship(
        "Property", back_populates="owner", order_by="Property.id", passive_deletes=True
    )
