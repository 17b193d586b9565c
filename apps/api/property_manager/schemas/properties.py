"""Schemas for properties, their addresses and the composite write payloads."""
from __future__ import annotations

from pydantic import BaseModel, Field

from .common import (
    AddressSummary,
    AssociationSummary,
    OwnerSummary,
    PhotoSummary,
    PortfolioSummary,
    PropertySummary,
    Timestamps,
    TransactionSummary,
    UnitSummary,
)


class AddressInput(BaseModel):
    """Address entry inside a composite property write.

    ``id`` identifies an existing address of the property to update; entries
    without one are inserted. ``is_primary`` is accepted but the first entry in
    the list always becomes the primary address.
    """

    id: int | None = None
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    is_primary: bool | None = None


class PhotoInput(BaseModel):
    """Photo entry inside a composite property write."""

    id: int | None = None
    url: str | None = None
    name: str | None = None
    is_primary: bool | None = None


class PropertyCreate(BaseModel):
    name: str
    type: str | None = None
    status: str | None = "active"
    value: float | None = None
    owner_id: int | None = None
    addresses: list[AddressInput] = Field(default_factory=list)
    photos: list[PhotoInput] = Field(default_factory=list)


class PropertyUpdate(BaseModel):
    name: str | None = None
    type: str | None = None
    status: str | None = None
    value: float | None = None
    owner_id: int | None = None
    addresses: list[AddressInput] | None = Field(
        default=None, description="Full replacement list; omit to leave addresses untouched"
    )
    photos: list[PhotoInput] | None = Field(
        default=None, description="Full replacement list; omit to leave photos untouched"
    )


class AddressCreate(BaseModel):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    is_primary: bool = False


class AddressUpdate(BaseModel):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    is_primary: bool | None = None


class AddressRead(AddressSummary, Timestamps):
    units: list[UnitSummary] = Field(default_factory=list)


class PropertyRead(PropertySummary, Timestamps):
    owner: OwnerSummary | None = None
    addresses: list[AddressRead] = Field(default_factory=list)
    photos: list[PhotoSummary] = Field(default_factory=list)
    associations: list[AssociationSummary] = Field(default_factory=list)
    transactions: list[TransactionSummary] = Field(default_factory=list)
    portfolios: list[PortfolioSummary] = Field(default_factory=list)
