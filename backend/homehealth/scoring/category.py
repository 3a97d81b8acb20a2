"""Category roll-up: weighted average of the metric scores that have data."""
from typing import Dict, Mapping, Optional, Union

from homehealth.scoring.catalog import MetricCatalog
from homehealth.scoring.errors import INSUFFICIENT_DATA, InsufficientData
from homehealth.scoring.metric_scorer import clamp_score, score_metric

CategoryScore = Union[int, InsufficientData]


def score_category(
    metric_scores: Mapping[str, Optional[int]],
    weights: Mapping[str, float],
) -> CategoryScore:
    """
    Weighted average over the metrics in `weights` that have a score.

    Missing metrics are dropped from both numerator and denominator. When no
    weighted metric has a score the result is INSUFFICIENT_DATA, never 0.
    """
    total = 0.0
    weight_sum = 0.0
    for key, weight in weights.items():
        value = metric_scores.get(key)
        if value is None or weight <= 0:
            continue
        total += value * weight
        weight_sum += weight

    if weight_sum == 0:
        return INSUFFICIENT_DATA
    return clamp_score(total / weight_sum)


def score_metrics(
    values: Mapping[str, Optional[float]],
    catalog: MetricCatalog,
) -> Dict[str, Optional[int]]:
    """Score every aggregated value; absent values stay None."""
    return {
        key: None if value is None else score_metric(value, catalog.get(key))
        for key, value in values.items()
        if key in catalog
    }
