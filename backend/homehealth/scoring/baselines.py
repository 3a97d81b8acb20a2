"""
Regional reference baselines shown next to a property's readings.

Display only: nothing in here feeds a score.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class ReferenceBaseline:
    average_label: str
    average: float
    benchmark: float
    benchmark_label: str = "Target"


REGIONAL_BASELINES: Mapping[str, Mapping[str, ReferenceBaseline]] = MappingProxyType({
    "houston": MappingProxyType({
        # regional annual baseline vs EPA 2024 annual standard
        "PM25": ReferenceBaseline("Houston Avg", 12.0, 9.0),
        "PM10": ReferenceBaseline("Houston Avg", 40.0, 30.0),
        # work-from-home daytime typical
        "CO2": ReferenceBaseline("Typical Indoor", 950, 800),
    }),
})

HOME_LABEL = "Your Home"


def baselines_for(region: str) -> Mapping[str, ReferenceBaseline]:
    try:
        return REGIONAL_BASELINES[region.lower()]
    except KeyError:
        raise ValueError(f"No reference baselines for region '{region}'") from None


def comparison_for(
    metric_key: str,
    value: Optional[float],
    baselines: Mapping[str, ReferenceBaseline],
) -> List[Tuple[str, Optional[float]]]:
    """Chart rows for one metric: the home's value, regional average, target."""
    baseline = baselines.get(metric_key)
    if baseline is None:
        return []
    return [
        (HOME_LABEL, value),
        (baseline.average_label, baseline.average),
        (baseline.benchmark_label, baseline.benchmark),
    ]
