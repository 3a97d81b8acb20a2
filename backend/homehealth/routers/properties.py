"""Property and room endpoints: the minimal record store behind a report."""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID
import logging

from homehealth.database import get_db
from homehealth.models import Measurement, Property, Room
from homehealth.schemas import PropertyCreate, PropertyResponse, RoomCreate, RoomResponse

router = APIRouter(prefix="/properties", tags=["properties"])

logger = logging.getLogger(__name__)


def get_property_or_404(db: Session, property_id: UUID) -> Property:
    prop = db.query(Property).filter(Property.id == property_id).first()
    if not prop:
        raise HTTPException(status_code=404, detail="Property not found")
    return prop


@router.get("", response_model=List[PropertyResponse])
def list_properties(db: Session = Depends(get_db)):
    """List properties, newest first."""
    return db.query(Property).order_by(Property.created_at.desc()).all()


@router.post("", response_model=PropertyResponse, status_code=201)
def create_property(data: PropertyCreate, db: Session = Depends(get_db)):
    prop = Property(**data.model_dump())
    try:
        db.add(prop)
        db.commit()
        db.refresh(prop)
    except Exception:
        db.rollback()
        raise
    return prop


@router.get("/{property_id}", response_model=PropertyResponse)
def get_property(property_id: UUID, db: Session = Depends(get_db)):
    return get_property_or_404(db, property_id)


@router.get("/{property_id}/rooms", response_model=List[RoomResponse])
def list_rooms(property_id: UUID, db: Session = Depends(get_db)):
    get_property_or_404(db, property_id)
    return db.query(Room).filter(
        Room.property_id == property_id
    ).order_by(Room.order_index, Room.created_at).all()


@router.post("/{property_id}/rooms", response_model=RoomResponse, status_code=201)
def create_room(property_id: UUID, data: RoomCreate, db: Session = Depends(get_db)):
    get_property_or_404(db, property_id)

    order_index = data.order_index
    if order_index is None:
        order_index = db.query(Room).filter(Room.property_id == property_id).count()

    room = Room(property_id=property_id, name=data.name, order_index=order_index)
    try:
        db.add(room)
        db.commit()
        db.refresh(room)
    except Exception:
        db.rollback()
        raise
    return room


@router.delete("/{property_id}/rooms/{room_id}", status_code=204)
def delete_room(property_id: UUID, room_id: UUID, db: Session = Depends(get_db)):
    """Delete a room; its readings stay on the property as whole-home readings."""
    get_property_or_404(db, property_id)
    room = db.query(Room).filter(
        Room.id == room_id,
        Room.property_id == property_id
    ).first()
    if not room:
        raise HTTPException(status_code=404, detail="Room not found")

    try:
        db.query(Measurement).filter(
            Measurement.room_id == room_id
        ).update({Measurement.room_id: None}, synchronize_session=False)
        db.delete(room)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(f"Deleted room {room_id} from property {property_id}")
