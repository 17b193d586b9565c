"""Homeowners' association and board member models."""
from __future__ import annotations

import datetime as dt
from typing import TYPE_CHECKING

from sqlalchemy import Date, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .property import Property


class Association(TimestampMixin, Base):
    """HOA contact and fee record attached to a property."""

    __tablename__ = "associations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    property_id: Mapped[int] = mapped_column(
        ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String, nullable=False)
    contact_info: Mapped[str | None] = mapped_column(String)
    fee: Mapped[float | None] = mapped_column(Float)
    due_date: Mapped[dt.date | None] = mapped_column(Date)

    property: Mapped["Property"] = relationship("Property", back_populates="associations")
    board_members: Mapped[list["BoardMember"]] = relationship(
        "BoardMember", back_populates="association", order_by="BoardMember.id", passive_deletes=True
    )


class BoardMember(TimestampMixin, Base):
    __tablename__ = "board_members"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    association_id: Mapped[int] = mapped_column(
        ForeignKey("associations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String, nullable=False)
    email: Mapped[str | None] = mapped_column(String)
    phone: Mapped[str | None] = mapped_column(String)

    association: Mapped["Association"] = relationship("Association", back_populates="board_members")
