"""Scoring and aggregation engine for home health reports."""

from homehealth.scoring.aggregator import Reading, SkippedReading, aggregate, group_by_room
from homehealth.scoring.baselines import REGIONAL_BASELINES, ReferenceBaseline, baselines_for, comparison_for
from homehealth.scoring.catalog import (
    CATEGORIES, MetricCatalog, MetricDefinition, OneSidedHigherWorse, TwoSidedIdeal,
)
from homehealth.scoring.category import score_category, score_metrics
from homehealth.scoring.config import (
    CATEGORY_WEIGHTS, OVERALL_WEIGHTS, ScoringConfig, build_scoring_config,
)
from homehealth.scoring.errors import (
    INSUFFICIENT_DATA, ConfigurationError, InsufficientData, InvalidValue, ScoringError, UnknownMetric,
)
from homehealth.scoring.labels import humidity_caution, label_for, status_for, summarize
from homehealth.scoring.metric_scorer import score, score_metric
from homehealth.scoring.overall import score_overall
from homehealth.scoring.report import CategoryResult, MetricResult, PropertyReport, RoomResult, build_report

__all__ = [
    "Reading", "SkippedReading", "aggregate", "group_by_room",
    "REGIONAL_BASELINES", "ReferenceBaseline", "baselines_for", "comparison_for",
    "CATEGORIES", "MetricCatalog", "MetricDefinition", "OneSidedHigherWorse", "TwoSidedIdeal",
    "score_category", "score_metrics",
    "CATEGORY_WEIGHTS", "OVERALL_WEIGHTS", "ScoringConfig", "build_scoring_config",
    "INSUFFICIENT_DATA", "ConfigurationError", "InsufficientData", "InvalidValue", "ScoringError", "UnknownMetric",
    "humidity_caution", "label_for", "status_for", "summarize",
    "score", "score_metric",
    "score_overall",
    "CategoryResult", "MetricResult", "PropertyReport", "RoomResult", "build_report",
]
