"""Schemas for photos and maintenance tickets."""
from __future__ import annotations

from pydantic import BaseModel

from ..models.maintenance import TicketPriority, TicketStatus
from .common import PhotoSummary, TicketSummary, Timestamps, UnitSummary


class PhotoCreate(BaseModel):
    url: str
    name: str | None = None
    is_primary: bool = False
    property_id: int | None = None
    unit_id: int | None = None


class PhotoUpdate(BaseModel):
    url: str | None = None
    name: str | None = None
    is_primary: bool | None = None
    property_id: int | None = None
    unit_id: int | None = None


class PhotoRead(PhotoSummary, Timestamps):
    pass


class TicketCreate(BaseModel):
    unit_id: int
    title: str
    description: str | None = None
    status: TicketStatus = TicketStatus.OPEN
    priority: TicketPriority = TicketPriority.MEDIUM


class TicketUpdate(BaseModel):
    unit_id: int | None = None
    title: str | None = None
    description: str | None = None
    status: TicketStatus | None = None
    priority: TicketPriority | None = None


class TicketRead(TicketSummary, Timestamps):
    unit: UnitSummary
