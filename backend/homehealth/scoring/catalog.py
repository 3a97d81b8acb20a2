"""
Metric catalog

Static registry of the metrics a technician can record, their category,
display unit and the good/fair bounds used by the scoring curve.

Curve shapes:
- OneSidedHigherWorse: the larger the value, the worse (CO2, PM2.5, RF...)
- TwoSidedIdeal: an ideal band with falloff on both sides (pH)
"""
import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Union

from homehealth.scoring.errors import ConfigurationError, UnknownMetric

CATEGORIES = ("air", "water", "ether")


@dataclass(frozen=True)
class OneSidedHigherWorse:
    """Higher values are always more concerning."""

    def equivalent(self, value: float, good_max: float) -> float:
        return value


@dataclass(frozen=True)
class TwoSidedIdeal:
    """
    Ideal band [low, high]; values below the band are mirrored onto the
    upper side so the one-sided curve can score them.

    pH 6.0 with band [6.5, 8.5] scores like pH 9.0.
    """
    low: float
    high: float

    def equivalent(self, value: float, good_max: float) -> float:
        if value < self.low:
            return good_max + (self.low - value)
        if value <= self.high:
            return min(value, good_max)
        return value


Curve = Union[OneSidedHigherWorse, TwoSidedIdeal]


@dataclass(frozen=True)
class MetricDefinition:
    key: str
    category: str
    unit: str
    good_max: float
    fair_max: float
    label: str = ""
    curve: Curve = field(default_factory=OneSidedHigherWorse)

    def __post_init__(self):
        if self.category not in CATEGORIES:
            raise ConfigurationError(
                f"Metric '{self.key}' has unknown category '{self.category}'"
            )
        for name in ("good_max", "fair_max"):
            bound = getattr(self, name)
            if not isinstance(bound, (int, float)) or not math.isfinite(bound):
                raise ConfigurationError(f"Metric '{self.key}': {name} must be a finite number")
        if self.good_max >= self.fair_max:
            raise ConfigurationError(
                f"Metric '{self.key}': good_max ({self.good_max}) must be below fair_max ({self.fair_max})"
            )
        if isinstance(self.curve, TwoSidedIdeal):
            if not self.curve.low < self.curve.high <= self.good_max:
                raise ConfigurationError(
                    f"Metric '{self.key}': ideal band must satisfy low < high <= good_max"
                )
        if not self.label:
            object.__setattr__(self, "label", self.key)

    @property
    def two_sided(self) -> bool:
        return isinstance(self.curve, TwoSidedIdeal)

    def one_sided_value(self, value: float) -> float:
        """Map a raw value onto the higher-is-worse axis of this metric."""
        return self.curve.equivalent(value, self.good_max)


# Canonical table: one authoritative set of bounds for every report.
DEFAULT_DEFINITIONS = (
    # AIR
    MetricDefinition("CO2", "air", "ppm", 800, 1200, label="CO₂"),
    MetricDefinition("PM25", "air", "µg/m³", 9, 20, label="PM₂.₅"),
    MetricDefinition("PM10", "air", "µg/m³", 30, 50, label="PM₁₀"),
    MetricDefinition("VOCs", "air", "ppb", 200, 500, label="VOCs"),
    MetricDefinition("Humidity", "air", "%", 55, 65, label="Humidity"),
    MetricDefinition("Temp", "air", "°F", 75, 80, label="Temperature"),
    # WATER
    MetricDefinition("TDS", "water", "ppm", 300, 500, label="Total Dissolved Solids (TDS)"),
    MetricDefinition("Cl", "water", "ppm", 0.8, 1.5, label="Free Chlorine"),
    MetricDefinition("pH", "water", "", 8.5, 9.5, label="pH", curve=TwoSidedIdeal(6.5, 8.5)),
    # ETHER (precautionary bands)
    MetricDefinition("MagField", "ether", "mG", 2.0, 4.0, label="Magnetic Field (ELF)"),
    MetricDefinition("ElectricField", "ether", "V/m", 0.5, 1.5, label="Electric Field"),
    MetricDefinition("RF", "ether", "mW/m²", 0.1, 1.0, label="Radiofrequency (RF)"),
)

# Names the technician form stores -> canonical keys
DEFAULT_ALIASES = {
    "pm2.5": "PM25",
    "pm 2.5": "PM25",
    "temperature": "Temp",
    "free chlorine": "Cl",
    "chlorine": "Cl",
    "mag field": "MagField",
    "magnetic field": "MagField",
    "electric field": "ElectricField",
    "voc": "VOCs",
}


class MetricCatalog:
    """Read-only lookup of metric definitions by key or alias."""

    def __init__(
        self,
        definitions: Iterable[MetricDefinition] = DEFAULT_DEFINITIONS,
        aliases: Optional[Dict[str, str]] = None,
    ):
        self._definitions: Dict[str, MetricDefinition] = {}
        for definition in definitions:
            if definition.key in self._definitions:
                raise ConfigurationError(f"Duplicate metric key '{definition.key}'")
            self._definitions[definition.key] = definition

        self._lookup: Dict[str, str] = {key.lower(): key for key in self._definitions}
        for alias, key in (DEFAULT_ALIASES if aliases is None else aliases).items():
            if key not in self._definitions:
                raise ConfigurationError(f"Alias '{alias}' points to unknown metric '{key}'")
            self._lookup.setdefault(alias.strip().lower(), key)

    def __contains__(self, key: object) -> bool:
        return key in self._definitions

    def __iter__(self) -> Iterator[MetricDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)

    def keys(self) -> List[str]:
        return list(self._definitions)

    def get(self, key: str) -> MetricDefinition:
        try:
            return self._definitions[key]
        except KeyError:
            raise UnknownMetric(key) from None

    def resolve(self, raw_key: str) -> MetricDefinition:
        """Look up a metric by canonical key or any known alias."""
        if raw_key in self._definitions:
            return self._definitions[raw_key]
        key = self._lookup.get(str(raw_key).strip().lower())
        if key is None:
            raise UnknownMetric(raw_key)
        return self._definitions[key]

    def category_of(self, key: str) -> str:
        return self.get(key).category

    def metrics_for(self, category: str) -> List[MetricDefinition]:
        if category not in CATEGORIES:
            raise ValueError(f"Unknown category '{category}'")
        return [d for d in self._definitions.values() if d.category == category]

    def with_overrides(self, overrides: Dict[str, Dict[str, float]]) -> "MetricCatalog":
        """Return a new catalog with replaced good/fair bounds."""
        replaced = dict(self._definitions)
        for key, bounds in overrides.items():
            if key not in self._definitions:
                raise ConfigurationError(f"Override references unknown metric '{key}'")
            base = self._definitions[key]
            unexpected = set(bounds) - {"good_max", "fair_max"}
            if unexpected:
                raise ConfigurationError(
                    f"Override for '{key}' has unsupported fields: {', '.join(sorted(unexpected))}"
                )
            replaced[key] = MetricDefinition(
                key=base.key,
                category=base.category,
                unit=base.unit,
                good_max=bounds.get("good_max", base.good_max),
                fair_max=bounds.get("fair_max", base.fair_max),
                label=base.label,
                curve=base.curve,
            )
        aliases = {alias: key for alias, key in self._lookup.items() if alias != key.lower()}
        return MetricCatalog(replaced.values(), aliases=aliases)
