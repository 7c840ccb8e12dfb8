# vitalwatch/vitals/sim_source.py
from __future__ import annotations

from typing import Any, Dict, List

from vitalwatch.vitals.generator import DEFAULT_SPIKE_PROBABILITY, VitalsGenerator
from vitalwatch.vitals.reading import Reading
from vitalwatch.vitals.vitals_api import VitalsSource


class SimulatedVitalsSource(VitalsSource):
    """
    VitalsSource backed by VitalsGenerator.
    Reading before start() starts it; stop() forgets the drifting baseline.
    """

    def __init__(
        self,
        generator: VitalsGenerator | None = None,
        spike_probability: float = DEFAULT_SPIKE_PROBABILITY,
    ):
        self.generator = generator or VitalsGenerator(spike_probability=spike_probability)
        self._running = False

    def start(self) -> None:
        self._running = True

    def stop(self) -> None:
        self._running = False
        self.generator.reset()

    def status(self) -> Dict[str, Any]:
        if self._running:
            return {"level": "ready", "message": "Simulated vitals", "ready": True}
        return {"level": "disconnected", "message": "Not started", "ready": False}

    def read_reading(self) -> Reading:
        if not self._running:
            self.start()
        return self.generator.read()

    def read_history(self, hours: int = 24) -> List[Reading]:
        return self.generator.historical(hours)
