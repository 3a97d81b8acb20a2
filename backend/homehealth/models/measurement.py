from sqlalchemy import Column, DateTime, Float, ForeignKey, String, Text, Uuid, text
from sqlalchemy.orm import relationship
import uuid
from homehealth.database import Base


class Measurement(Base):
    """One technician reading. Immutable once recorded."""

    __tablename__ = "measurement"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    property_id = Column(Uuid, ForeignKey("property.id", ondelete="CASCADE"), nullable=False, index=True)
    room_id = Column(Uuid, ForeignKey("room.id", ondelete="SET NULL"), nullable=True, index=True)
    metric = Column(String(50), nullable=False)  # canonical catalog key, e.g. "PM25"
    value = Column(Float, nullable=False)
    unit = Column(String(20), nullable=True)
    notes = Column(Text, nullable=True)
    taken_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=text("CURRENT_TIMESTAMP"))

    # Relationships
    property = relationship("Property", back_populates="measurements")
    room = relationship("Room", back_populates="measurements")

    def __repr__(self):
        return f"<Measurement(metric='{self.metric}', value={self.value})>"
