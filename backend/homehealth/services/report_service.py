"""
Report service

Bridges the record store and the pure scoring engine:
- loads every measurement of a property in one query
- converts rows to scoring Readings
- builds the report and shapes it for the API
"""
import logging
from typing import Dict, List, Mapping, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from homehealth.models import Measurement, Property, Room
from homehealth.schemas.report import (
    CategoryReport, ComparisonPoint, MetricReport, ReportResponse, RoomReport, SkippedReadingReport,
)
from homehealth.scoring import (
    CATEGORIES, INSUFFICIENT_DATA, PropertyReport, Reading, ReferenceBaseline, ScoringConfig,
    build_report, humidity_caution,
)

logger = logging.getLogger(__name__)

UNASSIGNED_ROOM = "Whole-home / Unassigned"


def _score_or_none(score) -> Optional[int]:
    return None if score is INSUFFICIENT_DATA else score


def _room_id(value: Optional[str]) -> Optional[UUID]:
    return UUID(value) if value else None


def load_readings(db: Session, property_id: UUID) -> List[Reading]:
    """All readings recorded for a property, oldest first."""
    rows = db.query(Measurement).filter(
        Measurement.property_id == property_id
    ).order_by(Measurement.created_at, Measurement.taken_at).all()

    return [
        Reading(
            property_id=str(row.property_id),
            metric_key=row.metric,
            value=row.value,
            room_id=str(row.room_id) if row.room_id else None,
            taken_at=row.taken_at,
        )
        for row in rows
    ]


def to_response(
    property_id: UUID,
    report: PropertyReport,
    room_names: Mapping[str, str],
) -> ReportResponse:
    """Shape a PropertyReport for JSON; INSUFFICIENT_DATA becomes null plus a flag."""
    categories = [
        CategoryReport(
            category=result.category,
            score=_score_or_none(result.score),
            insufficient_data=result.insufficient_data,
            label=result.label,
            summary=result.summary,
        )
        for result in report.categories.values()
    ]

    metrics = [
        MetricReport(
            key=m.key,
            label=m.label,
            category=m.category,
            unit=m.unit,
            value=m.value,
            score=m.score,
            status=m.status,
        )
        for m in report.metrics.values()
    ]

    comparisons: Dict[str, List[ComparisonPoint]] = {
        key: [ComparisonPoint(name=name, value=value) for name, value in rows]
        for key, rows in report.comparisons.items()
    }

    # every known room is listed, in room order; unassigned readings come last
    by_room = {room.room_id: room for room in report.rooms}
    room_ids = list(room_names) + [r for r in by_room if r is not None and r not in room_names]
    if None in by_room:
        room_ids.append(None)

    rooms = []
    for room_id in room_ids:
        room = by_room.get(room_id)
        if room_id is None:
            name = UNASSIGNED_ROOM
        else:
            name = room_names.get(room_id, "Unknown room")
        room_categories = room.categories if room else {c: INSUFFICIENT_DATA for c in CATEGORIES}
        rooms.append(RoomReport(
            room_id=_room_id(room_id),
            name=name,
            reading_count=room.reading_count if room else 0,
            scores={c: _score_or_none(room_categories[c]) for c in CATEGORIES},
            insufficient_data=[c for c in CATEGORIES if room_categories[c] is INSUFFICIENT_DATA],
        ))

    skipped = [
        SkippedReadingReport(
            metric=item.reading.metric_key,
            value=item.reading.value,
            room_id=_room_id(item.reading.room_id),
            reason=str(item.error),
        )
        for item in report.skipped
    ]

    return ReportResponse(
        property_id=property_id,
        overall_score=_score_or_none(report.overall),
        overall_label=report.overall_label,
        insufficient_data=report.insufficient_categories,
        humidity_caution=humidity_caution(report.values.get("Humidity")),
        categories=categories,
        metrics=metrics,
        comparisons=comparisons,
        rooms=rooms,
        skipped=skipped,
    )


def build_property_report(
    db: Session,
    prop: Property,
    config: ScoringConfig,
    baselines: Mapping[str, ReferenceBaseline],
) -> ReportResponse:
    readings = load_readings(db, prop.id)
    report = build_report(readings, config, baselines)

    if report.skipped:
        logger.warning(f"Report for property {prop.id}: skipped {len(report.skipped)} of {len(readings)} readings")
    logger.info(
        f"Built report for property {prop.id}: {len(readings)} readings, "
        f"overall={report.overall_label}, insufficient={report.insufficient_categories}"
    )

    rooms = db.query(Room).filter(
        Room.property_id == prop.id
    ).order_by(Room.order_index, Room.created_at).all()
    room_names = {str(room.id): room.name for room in rooms}
    return to_response(prop.id, report, room_names)
