"""Response schemas for the catalog and the computed report."""
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel


# === Catalog ===
class MetricDefinitionResponse(BaseModel):
    key: str
    label: str
    category: str
    unit: str
    good_max: float
    fair_max: float
    ideal_low: Optional[float] = None
    ideal_high: Optional[float] = None
    weight: float


class CatalogResponse(BaseModel):
    metrics: List[MetricDefinitionResponse]
    overall_weights: Dict[str, float]


# === Report ===
class MetricReport(BaseModel):
    key: str
    label: str
    category: str
    unit: str
    value: Optional[float] = None
    score: Optional[int] = None
    status: str


class CategoryReport(BaseModel):
    category: str
    score: Optional[int] = None
    insufficient_data: bool
    label: str
    summary: str


class ComparisonPoint(BaseModel):
    name: str
    value: Optional[float] = None


class RoomReport(BaseModel):
    room_id: Optional[UUID] = None
    name: str
    reading_count: int
    scores: Dict[str, Optional[int]]
    insufficient_data: List[str]


class SkippedReadingReport(BaseModel):
    metric: str
    value: float
    room_id: Optional[UUID] = None
    reason: str


class ReportResponse(BaseModel):
    property_id: UUID
    overall_score: Optional[int] = None
    overall_label: str
    insufficient_data: List[str]
    humidity_caution: bool
    categories: List[CategoryReport]
    metrics: List[MetricReport]
    comparisons: Dict[str, List[ComparisonPoint]]
    rooms: List[RoomReport]
    skipped: List[SkippedReadingReport]
