# vitalwatch/vitals/classifier.py
from __future__ import annotations

from typing import Dict, Literal, Optional, Tuple

from vitalwatch.vitals.reading import VITAL_KINDS, Reading, normalize_kind

Tier = Literal["normal", "warning", "critical"]

# kind -> ((critical_low, critical_high), (warning_low, warning_high))
# None means "no bound on that side"
THRESHOLDS: Dict[str, Tuple[Tuple[Optional[float], Optional[float]], Tuple[Optional[float], Optional[float]]]] = {
    "heart_rate": ((60, 100), (65, 95)),
    "blood_pressure_systolic": ((90, 140), (100, 130)),
    "blood_pressure_diastolic": ((60, 90), (65, 85)),
    "blood_oxygen": ((90, None), (95, None)),
    "glucose_level": ((70, 180), (80, 140)),
    "temperature": ((96, 100.4), (97, 99.5)),
}

_COLORS: Dict[str, str] = {
    "normal": "green",
    "warning": "yellow",
    "critical": "red",
}

_HEX: Dict[str, str] = {
    "green": "#22c55e",
    "yellow": "#facc15",
    "red": "#ef4444",
}


def _outside(value: float, low: Optional[float], high: Optional[float]) -> bool:
    if low is not None and value < low:
        return True
    if high is not None and value > high:
        return True
    return False


def classify(kind: str, value: float) -> Tier:
    """
    Severity tier for one vital value.
    Unknown kinds are not an error: they come back as "normal".
    """
    bands = THRESHOLDS.get(normalize_kind(kind))
    if bands is None:
        return "normal"

    (crit_lo, crit_hi), (warn_lo, warn_hi) = bands
    if _outside(value, crit_lo, crit_hi):
        return "critical"
    if _outside(value, warn_lo, warn_hi):
        return "warning"
    return "normal"


def classify_reading(reading: Reading) -> Dict[str, Tier]:
    return {k: classify(k, reading.value(k)) for k in VITAL_KINDS}


def color_for(tier: Tier) -> str:
    return _COLORS[tier]


def hex_for(tier: Tier) -> str:
    return _HEX[color_for(tier)]
