"""
Seed data script for the Home Health database.
Creates one demo property with a few rooms and a full set of readings,
including one room that pushes PM2.5 and CO2 past their fair bounds.
"""
from datetime import datetime, timedelta, timezone

from sqlalchemy.orm import sessionmaker

from homehealth.database import engine
from homehealth.models import Measurement, Property, Room

DEMO_ADDRESS = "1200 Westheimer Rd"

# room name -> {metric: value}
DEMO_ROOMS = {
    "Primary Bedroom": {"CO2": 1150, "PM25": 7.5, "PM10": 18, "VOCs": 140, "Humidity": 52, "Temp": 73,
                        "MagField": 0.6, "ElectricField": 0.4, "RF": 0.08},
    "Kitchen": {"CO2": 1420, "PM25": 24, "PM10": 41, "VOCs": 380, "Humidity": 58, "Temp": 77,
                "TDS": 310, "Cl": 1.1, "pH": 7.8, "MagField": 2.6},
    "Living Room": {"CO2": 880, "PM25": 9.5, "PM10": 22, "Humidity": 49, "Temp": 74,
                    "ElectricField": 0.9, "RF": 0.6},
    "Primary Bath": {"TDS": 290, "Cl": 0.9, "pH": 7.6},
}


def seed_database():
    """Seed the database with a demo assessment."""
    Session = sessionmaker(bind=engine)
    session = Session()

    # Check if already seeded
    if session.query(Property).filter(Property.address == DEMO_ADDRESS).first():
        print("Database already seeded, skipping...")
        session.close()
        return

    print("Seeding database...")

    prop = Property(
        address=DEMO_ADDRESS, city="Houston", state="TX", zip="77006",
        sqft=2400, year_built=1994,
        occupants_adults=2, occupants_children=2, occupants_animals=1,
        occupants_allergies=True, occupants_asthma=False,
    )
    session.add(prop)
    session.flush()

    taken_at = datetime.now(timezone.utc) - timedelta(hours=2)
    for order_index, (name, readings) in enumerate(DEMO_ROOMS.items()):
        room = Room(property_id=prop.id, name=name, order_index=order_index)
        session.add(room)
        session.flush()

        for metric, value in readings.items():
            session.add(Measurement(
                property_id=prop.id,
                room_id=room.id,
                metric=metric,
                value=value,
                taken_at=taken_at,
            ))
            taken_at += timedelta(minutes=2)

    session.commit()
    print(f"✓ Seeded property {prop.id}")
    print(f"✓ Seeded {session.query(Room).filter(Room.property_id == prop.id).count()} rooms")
    print(f"✓ Seeded {session.query(Measurement).filter(Measurement.property_id == prop.id).count()} measurements")
    print("Database seeding complete!")

    session.close()


if __name__ == "__main__":
    seed_database()
