"""
Worst-case aggregation of readings.

A property has many readings per metric (one per room, repeated
measurements, whole-home spot checks). The report shows one value per
metric: the most concerning one. Averaging would let one hazardous room
disappear behind several healthy ones.
"""
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple

from homehealth.scoring.catalog import MetricCatalog
from homehealth.scoring.errors import InvalidValue, ScoringError, UnknownMetric
from homehealth.scoring.metric_scorer import validate_value

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Reading:
    """A single recorded value. room_id None means whole-home / unassigned."""
    property_id: str
    metric_key: str
    value: float
    room_id: Optional[str] = None
    taken_at: Optional[datetime] = None


class SkippedReading(NamedTuple):
    reading: Reading
    error: ScoringError


def partition_readings(readings: Iterable[Reading], catalog: MetricCatalog):
    """
    Split readings into usable (key, value, reading) triples and skipped ones.

    Metric aliases are resolved to canonical keys here.
    """
    usable = []
    skipped: List[SkippedReading] = []
    for reading in readings:
        try:
            definition = catalog.resolve(reading.metric_key)
            value = validate_value(definition.key, reading.value)
        except (UnknownMetric, InvalidValue) as exc:
            skipped.append(SkippedReading(reading, exc))
            continue
        usable.append((definition.key, value, reading))
    return usable, skipped


def aggregate(
    readings: Iterable[Reading],
    catalog: MetricCatalog,
    skipped: Optional[List[SkippedReading]] = None,
) -> Dict[str, Optional[float]]:
    """
    Reduce readings to one representative value per catalog metric.

    Every catalog key is present in the result; metrics without a valid
    reading map to None. Unknown metrics and invalid values are skipped and
    logged (and appended to `skipped` when a list is given).
    """
    usable, rejected = partition_readings(readings, catalog)
    for item in rejected:
        logger.warning(f"Skipping reading {item.reading.metric_key}={item.reading.value!r}: {item.error}")
    if skipped is not None:
        skipped.extend(rejected)

    result: Dict[str, Optional[float]] = {key: None for key in catalog.keys()}
    severity: Dict[str, Tuple[float, float]] = {}
    for key, value, _ in usable:
        definition = catalog.get(key)
        # two-sided metrics rank by distance from the ideal band, not raw size;
        # equal distances resolve to the higher raw value so input order never matters
        rank = (definition.one_sided_value(value), value)
        if key not in severity or rank > severity[key]:
            severity[key] = rank
            result[key] = value
    return result


def group_by_room(readings: Iterable[Reading]) -> Dict[Optional[str], List[Reading]]:
    """Group readings by room id, keeping first-seen room order."""
    groups: Dict[Optional[str], List[Reading]] = {}
    for reading in readings:
        groups.setdefault(reading.room_id, []).append(reading)
    return groups
