"""Overall score across the three categories."""
from typing import Mapping, Optional

from homehealth.scoring.category import CategoryScore
from homehealth.scoring.config import OVERALL_WEIGHTS
from homehealth.scoring.errors import INSUFFICIENT_DATA
from homehealth.scoring.metric_scorer import clamp_score


def score_overall(
    air: CategoryScore,
    water: CategoryScore,
    ether: CategoryScore,
    weights: Optional[Mapping[str, float]] = None,
) -> CategoryScore:
    """
    round(air*0.45 + water*0.35 + ether*0.20) with the default weights.

    Categories flagged INSUFFICIENT_DATA are left out and the remaining
    weights re-normalized, so a missing category never counts as 0.
    """
    weights = OVERALL_WEIGHTS if weights is None else weights
    available = {
        category: value
        for category, value in (("air", air), ("water", water), ("ether", ether))
        if value is not INSUFFICIENT_DATA and value is not None
    }
    weight_sum = sum(weights[category] for category in available)
    if not available or weight_sum <= 0:
        return INSUFFICIENT_DATA

    total = sum(value * weights[category] for category, value in available.items())
    return clamp_score(total / weight_sum)
