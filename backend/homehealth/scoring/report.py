"""
Report assembly for one property snapshot.

Runs the full pipeline over an in-memory list of readings:
aggregate -> score metrics -> score categories -> overall -> labels.
No I/O happens here; the caller fetches readings first.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from homehealth.scoring.aggregator import Reading, SkippedReading, aggregate, group_by_room, partition_readings
from homehealth.scoring.baselines import ReferenceBaseline, comparison_for
from homehealth.scoring.catalog import CATEGORIES
from homehealth.scoring.category import CategoryScore, score_category, score_metrics
from homehealth.scoring.config import ScoringConfig
from homehealth.scoring.errors import INSUFFICIENT_DATA
from homehealth.scoring.labels import label_for, status_for, summarize
from homehealth.scoring.overall import score_overall

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MetricResult:
    key: str
    label: str
    category: str
    unit: str
    value: Optional[float]
    score: Optional[int]
    status: str


@dataclass(frozen=True)
class CategoryResult:
    category: str
    score: CategoryScore
    label: str
    summary: str

    @property
    def insufficient_data(self) -> bool:
        return self.score is INSUFFICIENT_DATA


@dataclass(frozen=True)
class RoomResult:
    room_id: Optional[str]
    reading_count: int
    values: Dict[str, Optional[float]]
    categories: Dict[str, CategoryScore]


@dataclass(frozen=True)
class PropertyReport:
    values: Dict[str, Optional[float]]
    metrics: Dict[str, MetricResult]
    categories: Dict[str, CategoryResult]
    overall: CategoryScore
    overall_label: str
    comparisons: Dict[str, List[Tuple[str, Optional[float]]]]
    rooms: List[RoomResult] = field(default_factory=list)
    skipped: List[SkippedReading] = field(default_factory=list)

    @property
    def insufficient_categories(self) -> List[str]:
        return [c.category for c in self.categories.values() if c.insufficient_data]


def category_scores(
    metric_scores: Mapping[str, Optional[int]],
    config: ScoringConfig,
) -> Dict[str, CategoryScore]:
    return {
        category: score_category(metric_scores, config.weights_for(category))
        for category in CATEGORIES
    }


def _room_result(
    room_id: Optional[str],
    readings: List[Reading],
    valid: List[Reading],
    config: ScoringConfig,
) -> RoomResult:
    values = aggregate(valid, config.catalog)
    return RoomResult(
        room_id=room_id,
        reading_count=len(readings),
        values=values,
        categories=category_scores(score_metrics(values, config.catalog), config),
    )


def build_report(
    readings: Iterable[Reading],
    config: ScoringConfig,
    baselines: Optional[Mapping[str, ReferenceBaseline]] = None,
) -> PropertyReport:
    readings = list(readings)
    catalog = config.catalog

    usable, skipped = partition_readings(readings, catalog)
    for item in skipped:
        logger.warning(f"Skipping reading {item.reading.metric_key}={item.reading.value!r}: {item.error}")
    valid = [reading for _, _, reading in usable]

    values = aggregate(valid, catalog)
    scores = score_metrics(values, catalog)

    metrics = {}
    for definition in catalog:
        value = values[definition.key]
        metrics[definition.key] = MetricResult(
            key=definition.key,
            label=definition.label,
            category=definition.category,
            unit=definition.unit,
            value=value,
            score=scores[definition.key],
            status=status_for(definition.key, value, scores[definition.key]),
        )

    per_category = category_scores(scores, config)
    categories = {
        category: CategoryResult(
            category=category,
            score=per_category[category],
            label=label_for(per_category[category]),
            summary=summarize(category, values),
        )
        for category in CATEGORIES
    }

    overall = score_overall(
        per_category["air"],
        per_category["water"],
        per_category["ether"],
        weights=config.overall_weights,
    )

    comparisons = {}
    if baselines:
        for key in baselines:
            if key in catalog:
                comparisons[key] = comparison_for(key, values[key], baselines)

    valid_by_room = group_by_room(valid)
    rooms = [
        _room_result(room_id, room_readings, valid_by_room.get(room_id, []), config)
        for room_id, room_readings in group_by_room(readings).items()
    ]

    return PropertyReport(
        values=values,
        metrics=metrics,
        categories=categories,
        overall=overall,
        overall_label=label_for(overall),
        comparisons=comparisons,
        rooms=rooms,
        skipped=skipped,
    )
