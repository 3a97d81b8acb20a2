"""
Per-metric scoring curve.

Piecewise linear, three segments:
- value <= good_max: 100
- good_max < value <= fair_max: 100 -> 60
- value > fair_max: 60 -> 0, reaching 0 at 2 * fair_max
"""
import math

from homehealth.scoring.catalog import MetricDefinition
from homehealth.scoring.errors import ConfigurationError, InvalidValue

GOOD_SCORE = 100
FAIR_SCORE = 60


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    return max(0, min(100, round_half_up(value)))


def score(value: float, good_max: float, fair_max: float) -> int:
    """Score a raw value against good/fair bounds on a 0-100 scale."""
    if good_max >= fair_max:
        raise ConfigurationError(f"good_max ({good_max}) must be below fair_max ({fair_max})")

    if value <= good_max:
        return GOOD_SCORE
    if value <= fair_max:
        t = (value - good_max) / (fair_max - good_max)
        return clamp_score(GOOD_SCORE - (GOOD_SCORE - FAIR_SCORE) * t)

    t = min(1.0, (value - fair_max) / fair_max)
    return clamp_score(FAIR_SCORE - FAIR_SCORE * t)


def validate_value(key: str, value) -> float:
    """Return value as float, or raise InvalidValue if it cannot be a reading."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidValue(key, value)
    if not math.isfinite(value) or value < 0:
        raise InvalidValue(key, value)
    return float(value)


def score_metric(value: float, definition: MetricDefinition) -> int:
    """Score one aggregated value using the metric's declared curve."""
    value = validate_value(definition.key, value)
    return score(definition.one_sided_value(value), definition.good_max, definition.fair_max)
