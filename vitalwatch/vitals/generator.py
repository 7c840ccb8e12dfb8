# vitalwatch/vitals/generator.py
from __future__ import annotations

import logging
import random
import threading
from dataclasses import asdict, dataclass
from datetime import datetime, timedelta
from typing import Callable, Dict, List, Optional

from vitalwatch.vitals.reading import VITAL_KINDS, Reading, SpikedReading, VitalKind

logger = logging.getLogger(__name__)


RESTING: Dict[str, float] = {
    "heart_rate": 72,
    "blood_pressure_systolic": 120,
    "blood_pressure_diastolic": 80,
    "blood_oxygen": 98.0,
    "glucose_level": 95,
    "temperature": 98.6,
}

# half-widths of the per-reading noise around the baseline
NOISE: Dict[str, float] = {
    "heart_rate": 2,
    "blood_pressure_systolic": 3,
    "blood_pressure_diastolic": 2,
    "blood_oxygen": 0.3,
    "glucose_level": 3,
    "temperature": 0.2,
}

HISTORY_NOISE: Dict[str, float] = {
    "heart_rate": 3,
    "blood_pressure_systolic": 4,
    "blood_pressure_diastolic": 3,
    "blood_oxygen": 0.4,
    "glucose_level": 5,
    "temperature": 0.3,
}

# half-widths of the per-call baseline nudge
DRIFT: Dict[str, float] = {
    "heart_rate": 0.25,
    "blood_pressure_systolic": 0.25,
    "blood_pressure_diastolic": 0.15,
    "blood_oxygen": 0.05,
    "glucose_level": 0.5,
    "temperature": 0.05,
}

BASELINE_BANDS: Dict[str, tuple] = {
    "heart_rate": (65, 85),
    "blood_pressure_systolic": (115, 125),
    "blood_pressure_diastolic": (75, 85),
    "blood_oxygen": (97, 99),
    "glucose_level": (90, 105),
    "temperature": (98.2, 98.8),
}

# always in the "worse" direction
SPIKE_OFFSETS: Dict[str, float] = {
    "heart_rate": 35,
    "blood_pressure_systolic": 25,
    "blood_pressure_diastolic": 15,
    "blood_oxygen": -5,
    "glucose_level": 60,
    "temperature": 2.0,
}

SPIKE_TICKS = 3
SPIKE_INTENSITY: Dict[int, float] = {3: 1.5, 2: 1.0, 1: 0.5}
DEFAULT_SPIKE_PROBABILITY = 0.03

INTEGER_KINDS = ("heart_rate", "blood_pressure_systolic", "blood_pressure_diastolic")


@dataclass
class Baseline:
    heart_rate: float
    blood_pressure_systolic: float
    blood_pressure_diastolic: float
    blood_oxygen: float
    glucose_level: float
    temperature: float

    @classmethod
    def resting(cls) -> "Baseline":
        return cls(**RESTING)

    def drift(self, rng) -> None:
        for k in VITAL_KINDS:
            lo, hi = BASELINE_BANDS[k]
            v = getattr(self, k) + rng.uniform(-DRIFT[k], DRIFT[k])
            setattr(self, k, max(lo, min(hi, v)))


@dataclass
class SpikeSession:
    active_vital: Optional[VitalKind] = None
    remaining_ticks: int = 0

    @property
    def active(self) -> bool:
        return self.remaining_ticks > 0

    def start(self, kind: VitalKind) -> None:
        self.active_vital = kind
        self.remaining_ticks = SPIKE_TICKS

    def advance(self) -> None:
        self.remaining_ticks -= 1
        if self.remaining_ticks <= 0:
            self.remaining_ticks = 0
            self.active_vital = None


def _round(kind: str, value: float):
    if kind in INTEGER_KINDS:
        return int(round(value))
    return round(value, 1)


def _build(values: Dict[str, float], timestamp: datetime, spike_type: Optional[VitalKind] = None) -> Reading:
    fields = {k: _round(k, values[k]) for k in VITAL_KINDS}
    if spike_type is not None:
        return SpikedReading(timestamp=timestamp, spike_type=spike_type, **fields)
    return Reading(timestamp=timestamp, **fields)


class VitalsGenerator:
    """
    Simulated patient vitals.

    A slow-moving baseline (clamped to resting bands) plus per-reading noise.
    Now and then one vital spikes for 3 readings with fading intensity;
    only the first of those readings is a SpikedReading.

    rng:   anything with random(), uniform(a, b), choice(seq)
    clock: zero-arg callable returning a datetime
    """

    def __init__(
        self,
        rng=None,
        clock: Optional[Callable[[], datetime]] = None,
        spike_probability: float = DEFAULT_SPIKE_PROBABILITY,
    ):
        spike_probability = float(spike_probability)
        if not 0.0 <= spike_probability <= 1.0:
            raise ValueError(f"spike_probability must be within [0, 1], got {spike_probability}")

        self.rng = rng if rng is not None else random.Random()
        self.clock = clock or datetime.now
        self.spike_probability = spike_probability

        self._baseline: Optional[Baseline] = None
        self._spike = SpikeSession()
        self._lock = threading.Lock()

    # -----------------------
    # Inspection
    # -----------------------

    @property
    def baseline(self) -> Optional[Dict[str, float]]:
        if self._baseline is None:
            return None
        return asdict(self._baseline)

    @property
    def spike_active(self) -> bool:
        return self._spike.active

    @property
    def spike_vital(self) -> Optional[VitalKind]:
        return self._spike.active_vital

    def reset(self) -> None:
        with self._lock:
            self._baseline = None
            self._spike = SpikeSession()

    # -----------------------
    # Live readings
    # -----------------------

    def read(self) -> Reading:
        with self._lock:
            if self._baseline is None:
                self._baseline = Baseline.resting()
            base = self._baseline

            if self.rng.random() < self.spike_probability and not self._spike.active:
                self._spike.start(self.rng.choice(VITAL_KINDS))
                logger.debug("Spike started on %s", self._spike.active_vital)

            values = {
                k: getattr(base, k) + self.rng.uniform(-NOISE[k], NOISE[k])
                for k in VITAL_KINDS
            }

            spike_type = None
            if self._spike.active:
                kind = self._spike.active_vital
                values[kind] += SPIKE_OFFSETS[kind] * SPIKE_INTENSITY[self._spike.remaining_ticks]
                if self._spike.remaining_ticks == SPIKE_TICKS:
                    spike_type = kind
                self._spike.advance()

            # spikes only ever touch the returned reading
            base.drift(self.rng)

            return _build(values, self.clock(), spike_type)

    # -----------------------
    # Chart seeding
    # -----------------------

    def historical(self, hours: int = 24) -> List[Reading]:
        """
        hours + 1 readings, oldest first, one hour apart, the last one at now.
        Each point is drawn around a fresh resting baseline; live state is untouched.
        """
        if isinstance(hours, bool) or not isinstance(hours, int):
            raise ValueError(f"hours must be a positive integer, got {hours!r}")
        if hours <= 0:
            raise ValueError(f"hours must be a positive integer, got {hours}")

        now = self.clock()
        base = Baseline.resting()
        out: List[Reading] = []

        for i in range(hours, -1, -1):
            values = {
                k: getattr(base, k) + self.rng.uniform(-HISTORY_NOISE[k], HISTORY_NOISE[k])
                for k in VITAL_KINDS
            }
            out.append(_build(values, now - timedelta(hours=i)))

        return out
