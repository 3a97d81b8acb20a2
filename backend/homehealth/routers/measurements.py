"""Measurement endpoints: technicians record readings, one value at a time."""
from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID
import logging

from homehealth.config import get_settings
from homehealth.database import get_db
from homehealth.dependencies import get_scoring_config
from homehealth.models import Measurement, Room
from homehealth.routers.properties import get_property_or_404
from homehealth.schemas import MeasurementCreate, MeasurementResponse
from homehealth.scoring import InvalidValue, ScoringConfig, UnknownMetric
from homehealth.scoring.metric_scorer import validate_value

router = APIRouter(prefix="/properties/{property_id}/measurements", tags=["measurements"])

logger = logging.getLogger(__name__)

# Rate limiter for the recording endpoint
limiter = Limiter(key_func=get_remote_address)


@router.get("", response_model=List[MeasurementResponse])
def list_measurements(property_id: UUID, db: Session = Depends(get_db)):
    """All measurements for a property, in recording order."""
    get_property_or_404(db, property_id)
    return db.query(Measurement).filter(
        Measurement.property_id == property_id
    ).order_by(Measurement.created_at).all()


@router.post("", response_model=MeasurementResponse, status_code=201)
@limiter.limit(get_settings().measurement_rate_limit)
def record_measurement(
    request: Request,
    property_id: UUID,
    data: MeasurementCreate,
    db: Session = Depends(get_db),
    config: ScoringConfig = Depends(get_scoring_config),
):
    """
    Record one reading.

    - metric may be a catalog key or an alias ("PM2.5" -> "PM25")
    - room_id must belong to the property; omit it for whole-home readings
    - unit defaults to the catalog unit
    """
    get_property_or_404(db, property_id)

    try:
        definition = config.catalog.resolve(data.metric)
        value = validate_value(definition.key, data.value)
    except (UnknownMetric, InvalidValue) as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    if data.room_id is not None:
        room = db.query(Room).filter(
            Room.id == data.room_id,
            Room.property_id == property_id
        ).first()
        if not room:
            raise HTTPException(status_code=404, detail="Room not found")

    measurement = Measurement(
        property_id=property_id,
        room_id=data.room_id,
        metric=definition.key,
        value=value,
        unit=data.unit or definition.unit or None,
        notes=data.notes,
        taken_at=data.taken_at,
    )
    try:
        db.add(measurement)
        db.commit()
        db.refresh(measurement)
    except Exception:
        db.rollback()
        raise

    logger.info(f"Recorded {definition.key}={value} for property {property_id}")
    return measurement
