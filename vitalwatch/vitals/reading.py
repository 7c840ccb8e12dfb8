# vitalwatch/vitals/reading.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Literal, Tuple

VitalKind = Literal[
    "heart_rate",
    "blood_pressure_systolic",
    "blood_pressure_diastolic",
    "blood_oxygen",
    "glucose_level",
    "temperature",
]

VITAL_KINDS: Tuple[str, ...] = (
    "heart_rate",
    "blood_pressure_systolic",
    "blood_pressure_diastolic",
    "blood_oxygen",
    "glucose_level",
    "temperature",
)

# dashboard field names -> ours
CAMEL_NAMES: Dict[str, str] = {
    "heart_rate": "heartRate",
    "blood_pressure_systolic": "bloodPressureSystolic",
    "blood_pressure_diastolic": "bloodPressureDiastolic",
    "blood_oxygen": "bloodOxygen",
    "glucose_level": "glucoseLevel",
    "temperature": "temperature",
}

_DISPLAY_NAMES: Dict[str, str] = {
    "heart_rate": "Heart Rate",
    "blood_pressure_systolic": "Blood Pressure (Systolic)",
    "blood_pressure_diastolic": "Blood Pressure (Diastolic)",
    "blood_oxygen": "Blood Oxygen",
    "glucose_level": "Glucose Level",
    "temperature": "Temperature",
}

_UNITS: Dict[str, str] = {
    "heart_rate": "bpm",
    "blood_pressure_systolic": "mmHg",
    "blood_pressure_diastolic": "mmHg",
    "blood_oxygen": "%",
    "glucose_level": "mg/dL",
    "temperature": "°F",
}


def normalize_kind(kind: str) -> str:
    """Accepts either our snake_case kinds or the dashboard's camelCase ones."""
    for ours, camel in CAMEL_NAMES.items():
        if kind == camel:
            return ours
    return kind


def vital_name(kind: str) -> str:
    kind = normalize_kind(kind)
    return _DISPLAY_NAMES.get(kind, kind)


def vital_unit(kind: str) -> str:
    return _UNITS.get(normalize_kind(kind), "")


@dataclass(frozen=True)
class Reading:
    heart_rate: int                     # bpm
    blood_pressure_systolic: int        # mmHg
    blood_pressure_diastolic: int       # mmHg
    blood_oxygen: float                 # % saturation
    glucose_level: float                # mg/dL
    temperature: float                  # °F
    timestamp: datetime

    @property
    def has_spike(self) -> bool:
        return False

    def value(self, kind: str) -> float:
        kind = normalize_kind(kind)
        if kind not in VITAL_KINDS:
            raise KeyError(kind)
        return getattr(self, kind)

    def as_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {CAMEL_NAMES[k]: getattr(self, k) for k in VITAL_KINDS}
        d["timestamp"] = self.timestamp.isoformat()
        return d


@dataclass(frozen=True)
class SpikedReading(Reading):
    """First reading of a spike event; carries which vital is spiking."""
    spike_type: VitalKind = field(kw_only=True)

    @property
    def has_spike(self) -> bool:
        return True

    def as_dict(self) -> Dict[str, Any]:
        d = super().as_dict()
        d["hasSpike"] = True
        d["spikeType"] = CAMEL_NAMES[self.spike_type]
        return d
