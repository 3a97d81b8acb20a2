"""Immutable scoring configuration: catalog plus category and overall weights."""
import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from homehealth.scoring.catalog import CATEGORIES, MetricCatalog
from homehealth.scoring.errors import ConfigurationError

WEIGHT_TOLERANCE = 1e-9

CATEGORY_WEIGHTS: Dict[str, Dict[str, float]] = {
    "air": {
        "CO2": 0.25,
        "PM25": 0.25,
        "PM10": 0.10,
        "VOCs": 0.20,
        "Humidity": 0.10,
        "Temp": 0.10,
    },
    "water": {
        "TDS": 0.40,
        "Cl": 0.30,
        "pH": 0.30,
    },
    "ether": {
        "MagField": 0.30,
        "ElectricField": 0.30,
        "RF": 0.40,
    },
}

OVERALL_WEIGHTS: Dict[str, float] = {
    "air": 0.45,
    "water": 0.35,
    "ether": 0.20,
}


def _freeze(weights: Mapping[str, float]) -> Mapping[str, float]:
    return MappingProxyType(dict(weights))


def validate_weights(name: str, weights: Mapping[str, float]) -> None:
    if not weights:
        raise ConfigurationError(f"{name} weights must not be empty")
    for key, weight in weights.items():
        if not isinstance(weight, (int, float)) or not math.isfinite(weight) or weight < 0:
            raise ConfigurationError(f"{name} weight for '{key}' must be a non-negative number")
    total = math.fsum(weights.values())
    if abs(total - 1.0) > WEIGHT_TOLERANCE:
        raise ConfigurationError(f"{name} weights must sum to 1.0 (got {total})")


@dataclass(frozen=True)
class ScoringConfig:
    catalog: MetricCatalog = field(default_factory=MetricCatalog)
    category_weights: Mapping[str, Mapping[str, float]] = field(
        default_factory=lambda: CATEGORY_WEIGHTS
    )
    overall_weights: Mapping[str, float] = field(default_factory=lambda: OVERALL_WEIGHTS)

    def __post_init__(self):
        if set(self.category_weights) != set(CATEGORIES):
            raise ConfigurationError("Category weights must cover exactly air, water and ether")
        if set(self.overall_weights) != set(CATEGORIES):
            raise ConfigurationError("Overall weights must cover exactly air, water and ether")

        frozen = {}
        for category, weights in self.category_weights.items():
            validate_weights(category, weights)
            for key in weights:
                if key not in self.catalog:
                    raise ConfigurationError(f"{category} weight references unknown metric '{key}'")
                if self.catalog.category_of(key) != category:
                    raise ConfigurationError(f"Metric '{key}' is weighted in {category} but belongs elsewhere")
            frozen[category] = _freeze(weights)
        validate_weights("overall", self.overall_weights)

        object.__setattr__(self, "category_weights", MappingProxyType(frozen))
        object.__setattr__(self, "overall_weights", _freeze(self.overall_weights))

    def weights_for(self, category: str) -> Mapping[str, float]:
        try:
            return self.category_weights[category]
        except KeyError:
            raise ValueError(f"Unknown category '{category}'") from None


def build_scoring_config(
    threshold_overrides: Optional[Dict[str, Dict[str, float]]] = None,
) -> ScoringConfig:
    """Build and validate the process-wide scoring config. Raises ConfigurationError."""
    catalog = MetricCatalog()
    if threshold_overrides:
        catalog = catalog.with_overrides(threshold_overrides)
    return ScoringConfig(catalog=catalog)
