"""All SQLAlchemy models – re-exported for Alembic and app use."""

from homehealth.models.property import Property, Room
from homehealth.models.measurement import Measurement

__all__ = [
    "Property", "Room",
    "Measurement",
]
