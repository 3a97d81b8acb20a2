from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Uuid, text
from sqlalchemy.orm import relationship
import uuid
from homehealth.database import Base


class Property(Base):
    """A residence under assessment."""

    __tablename__ = "property"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    address = Column(String(255), nullable=True)
    city = Column(String(100), nullable=True)
    state = Column(String(50), nullable=True)
    zip = Column(String(20), nullable=True)

    # Household profile (descriptive, never scored)
    sqft = Column(Integer, nullable=True)
    year_built = Column(Integer, nullable=True)
    primary_contact_email = Column(String(255), nullable=True)
    occupants_adults = Column(Integer, nullable=True)
    occupants_children = Column(Integer, nullable=True)
    occupants_animals = Column(Integer, nullable=True)
    occupants_allergies = Column(Boolean, nullable=True)
    occupants_asthma = Column(Boolean, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=text("CURRENT_TIMESTAMP"))

    # Relationships
    rooms = relationship("Room", back_populates="property", cascade="all, delete-orphan", order_by="Room.order_index")
    measurements = relationship("Measurement", back_populates="property", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Property(id={self.id}, address='{self.address}')>"


class Room(Base):
    """A room inside a property; measurements may be tied to one."""

    __tablename__ = "room"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    property_id = Column(Uuid, ForeignKey("property.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    order_index = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=text("CURRENT_TIMESTAMP"))

    # Relationships
    property = relationship("Property", back_populates="rooms")
    measurements = relationship("Measurement", back_populates="room")

    def __repr__(self):
        return f"<Room(id={self.id}, name='{self.name}')>"
