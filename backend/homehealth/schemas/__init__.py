"""Pydantic schemas for API request/response validation."""
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None


# === Property Schemas ===
class PropertyBase(BaseModel):
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    sqft: Optional[int] = Field(default=None, ge=0)
    year_built: Optional[int] = Field(default=None, ge=1600, le=2100)
    primary_contact_email: Optional[str] = None
    occupants_adults: Optional[int] = Field(default=None, ge=0)
    occupants_children: Optional[int] = Field(default=None, ge=0)
    occupants_animals: Optional[int] = Field(default=None, ge=0)
    occupants_allergies: Optional[bool] = None
    occupants_asthma: Optional[bool] = None


class PropertyCreate(PropertyBase):
    """Schema for creating a new property."""

    @field_validator("address", "city", "state", "zip", "primary_contact_email")
    @classmethod
    def strip_text(cls, v):
        return _clean(v)

    @field_validator("primary_contact_email")
    @classmethod
    def validate_email(cls, v):
        if v is not None and "@" not in v:
            raise ValueError("primary_contact_email must be an email address")
        return v


class PropertyResponse(PropertyBase):
    id: UUID
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# === Room Schemas ===
class RoomCreate(BaseModel):
    name: str
    order_index: Optional[int] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        cleaned = _clean(v)
        if not cleaned:
            raise ValueError("name must not be empty")
        return cleaned


class RoomResponse(BaseModel):
    id: UUID
    property_id: UUID
    name: str
    order_index: Optional[int] = None

    class Config:
        from_attributes = True


# === Measurement Schemas ===
class MeasurementCreate(BaseModel):
    """A technician reading. metric may be a catalog key or a known alias."""
    metric: str
    value: float
    room_id: Optional[UUID] = None
    unit: Optional[str] = None
    notes: Optional[str] = None
    taken_at: Optional[datetime] = None

    @field_validator("metric")
    @classmethod
    def validate_metric(cls, v):
        cleaned = _clean(v)
        if not cleaned:
            raise ValueError("metric must not be empty")
        return cleaned

    @field_validator("unit", "notes")
    @classmethod
    def strip_text(cls, v):
        return _clean(v)


class MeasurementResponse(BaseModel):
    id: UUID
    property_id: UUID
    room_id: Optional[UUID] = None
    metric: str
    value: float
    unit: Optional[str] = None
    notes: Optional[str] = None
    taken_at: Optional[datetime] = None

    class Config:
        from_attributes = True
