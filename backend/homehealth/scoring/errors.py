"""Error taxonomy for the scoring engine."""
import enum


class ScoringError(Exception):
    """Base class for all scoring engine errors."""


class UnknownMetric(ScoringError, KeyError):
    """A reading references a metric key that is not in the catalog."""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Unknown metric '{self.key}'"


class InvalidValue(ScoringError, ValueError):
    """A value is non-finite or physically impossible (negative)."""

    def __init__(self, key: str, value):
        super().__init__(key, value)
        self.key = key
        self.value = value

    def __str__(self) -> str:
        return f"Invalid value {self.value!r} for metric '{self.key}'"


class ConfigurationError(ScoringError, ValueError):
    """Malformed metric definition or weight table. Fatal at startup."""


class InsufficientData(enum.Enum):
    """Distinct state for a score that cannot be computed from the readings."""

    INSUFFICIENT_DATA = "insufficient_data"


INSUFFICIENT_DATA = InsufficientData.INSUFFICIENT_DATA
