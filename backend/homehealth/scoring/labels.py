"""
Display labels and category summaries.

Everything here is a table lookup over scores or raw aggregated values.
Absent values (None) are never treated as 0: they drop out of summaries and
show as "Not measured" in status badges.
"""
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from homehealth.scoring.errors import INSUFFICIENT_DATA, InsufficientData

NOT_ENOUGH_DATA = "Not enough data"
NOT_MEASURED = "Not measured"

SCORE_LABELS: Sequence[Tuple[int, str]] = (
    (90, "Excellent"),
    (75, "Good"),
    (60, "Fair"),
    (45, "Poor"),
)


def label_for(score: Union[int, InsufficientData, None]) -> str:
    if score is None or score is INSUFFICIENT_DATA:
        return NOT_ENOUGH_DATA
    for threshold, label in SCORE_LABELS:
        if score >= threshold:
            return label
    return "Very Poor"


def _band(value: float, bands: Sequence[Tuple[float, str]], fallback: str) -> str:
    """First label whose upper bound (inclusive) contains value."""
    for upper, label in bands:
        if value <= upper:
            return label
    return fallback


def _band_below(value: float, bands: Sequence[Tuple[float, str]], fallback: str) -> str:
    """First label whose upper bound (exclusive) contains value."""
    for upper, label in bands:
        if value < upper:
            return label
    return fallback


# --- Per-metric status badges ---

def humidity_caution(value: Optional[float]) -> bool:
    """Outside the 40-60 % comfort envelope."""
    if value is None:
        return False
    return value < 40 or value > 60


def _co2_status(v: float) -> str:
    return _band(v, (
        (700, "Excellent (Fresh Air)"),
        (1000, "Good (Acceptable)"),
        (1200, "Fair (Needs Attention)"),
        (1500, "Poor (Ventilation Recommended)"),
        (2000, "Very Poor (Unhealthy)"),
    ), "Severely Elevated (Action Required)")


def _ph_status(v: float) -> str:
    return "Ideal range" if 6.5 <= v <= 8.5 else "Outside recommended range"


STATUS_TABLES: Dict[str, Callable[[float], str]] = {
    "CO2": _co2_status,
    "PM25": lambda v: _band(v, ((9, "Excellent"), (20, "Moderate"), (35, "Poor")), "Very Poor"),
    "PM10": lambda v: _band(v, ((30, "Excellent"), (50, "Moderate")), "Poor"),
    "VOCs": lambda v: _band(v, ((200, "Low"), (500, "Moderate")), "Elevated"),
    "Temp": lambda v: _band(v, ((75, "Comfortable"), (80, "Warm")), "Hot"),
    "TDS": lambda v: _band(v, ((150, "Excellent"), (300, "Good"), (500, "High minerals")), "Very high"),
    "Cl": lambda v: _band(v, ((0.5, "Low"), (1.5, "Typical municipal"), (3, "High")), "Very high"),
    "pH": _ph_status,
    "MagField": lambda v: _band(v, ((1, "Very low"), (2, "Low"), (4, "Moderate")), "Elevated"),
    "ElectricField": lambda v: _band(v, ((0.5, "Very low"), (1, "Low"), (2, "Moderate")), "Elevated"),
    "RF": lambda v: _band(v, ((0.05, "Very low"), (0.1, "Low"), (1, "Moderate")), "Elevated"),
}


def status_for(metric_key: str, value: Optional[float], score: Optional[int] = None) -> str:
    """Short status badge for one metric's aggregated value."""
    if value is None:
        return NOT_MEASURED
    if metric_key == "Humidity":
        if humidity_caution(value):
            return "Outside optimal range"
        return "Comfortable" if score is not None and score >= 80 else "Monitor"
    table = STATUS_TABLES.get(metric_key)
    if table is None:
        return ""
    return table(value)


# --- Category summaries ---

def _join(parts: List[str]) -> str:
    return "; ".join(parts) + "."


def summarize_air(values: Mapping[str, Optional[float]]) -> Optional[str]:
    co2, pm25, pm10 = values.get("CO2"), values.get("PM25"), values.get("PM10")
    if None not in (co2, pm25, pm10) and co2 <= 700 and pm25 <= 9 and pm10 <= 30:
        return "Air quality is excellent across all measured pollutants."

    parts = []
    if co2 is not None:
        parts.append(_band(co2, (
            (700, "CO₂ excellent"),
            (1000, "CO₂ acceptable"),
            (1200, "CO₂ elevated"),
            (1500, "CO₂ high"),
        ), "CO₂ very high"))
    if pm25 is not None:
        parts.append(_band(pm25, (
            (9, "PM₂.₅ ideal"),
            (20, "PM₂.₅ moderately elevated"),
            (35, "PM₂.₅ elevated"),
        ), "PM₂.₅ high"))
    if pm10 is not None:
        parts.append(_band(pm10, ((30, "PM₁₀ ideal"), (50, "PM₁₀ moderate")), "PM₁₀ elevated"))
    if not parts and any(values.get(key) is not None for key in ("VOCs", "Humidity", "Temp")):
        parts.append("CO₂ and particulates not measured")
    return _join(parts) if parts else None


def summarize_water(values: Mapping[str, Optional[float]]) -> Optional[str]:
    tds, chlorine, ph = values.get("TDS"), values.get("Cl"), values.get("pH")
    if tds is not None and chlorine is not None and 150 <= tds <= 300 and chlorine <= 0.5:
        return "Mineral-balanced; excellent for taste and hydration."

    parts = []
    if tds is not None:
        if tds < 150:
            parts.append("Very low TDS (lacks beneficial minerals)")
        else:
            parts.append(_band(tds, (
                (300, "Mineral-balanced"),
                (450, "Moderate TDS (slightly mineral-forward)"),
                (600, "Hard water (suboptimal)"),
            ), "High TDS (taste and scaling impacted)"))
    if chlorine is not None:
        if chlorine > 1.5:
            parts.append("Chlorine elevated")
        elif chlorine > 0.8:
            parts.append("Chlorine moderate")
        else:
            parts.append("Chlorine low")
    if ph is not None:
        if ph < 6.5:
            parts.append("pH acidic")
        elif ph > 9:
            parts.append("pH alkaline")
        elif not parts:
            parts.append("pH within normal range")
    return _join(parts) if parts else None


def summarize_ether(values: Mapping[str, Optional[float]]) -> Optional[str]:
    mag, elec, rf = values.get("MagField"), values.get("ElectricField"), values.get("RF")
    if None not in (mag, elec, rf) and mag < 1 and elec < 5 and rf < 1:
        return "Magnetic, electric, and RF fields are all extremely low."

    parts = []
    if mag is not None:
        parts.append(_band_below(mag, (
            (1, "Magnetic fields low"),
            (3, "Magnetic fields moderately elevated"),
        ), "Magnetic fields elevated"))
    if elec is not None:
        parts.append(_band_below(elec, (
            (5, "Electric fields low"),
            (20, "Electric fields elevated"),
        ), "Electric fields high"))
    if rf is not None:
        parts.append(_band_below(rf, (
            (1, "RF exposure low"),
            (10, "RF moderately elevated"),
            (50, "RF elevated"),
        ), "RF high relative to typical indoor levels"))
    return _join(parts) if parts else None


SUMMARIZERS = {
    "air": summarize_air,
    "water": summarize_water,
    "ether": summarize_ether,
}


def summarize(category: str, values: Mapping[str, Optional[float]]) -> str:
    """One sentence describing a category from its aggregated raw values."""
    try:
        summarizer = SUMMARIZERS[category]
    except KeyError:
        raise ValueError(f"Unknown category '{category}'") from None
    summary = summarizer(values)
    if summary is None:
        return f"{NOT_ENOUGH_DATA} to assess {category} quality."
    return summary
