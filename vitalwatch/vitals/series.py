# vitalwatch/vitals/series.py
from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from vitalwatch.vitals.reading import Reading


class RollingWindow:
    """Last `maxlen` readings for the live charts (oldest first)."""

    def __init__(self, maxlen: int = 24):
        if maxlen < 1:
            raise ValueError("maxlen must be >= 1")
        self.maxlen = int(maxlen)
        self._items: deque = deque(maxlen=self.maxlen)

    def seed(self, readings: Iterable[Reading]) -> None:
        self._items = deque(readings, maxlen=self.maxlen)

    def push(self, reading: Reading) -> None:
        self._items.append(reading)

    @property
    def latest(self) -> Optional[Reading]:
        return self._items[-1] if self._items else None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Reading]:
        return iter(self._items)


def series(readings: Sequence[Reading], kind: str) -> Tuple[np.ndarray, np.ndarray]:
    """x = POSIX timestamps, y = values of `kind`."""
    readings = list(readings)
    if not readings:
        return np.empty(0, dtype=np.float64), np.empty(0, dtype=np.float64)

    x = np.fromiter((r.timestamp.timestamp() for r in readings), dtype=np.float64, count=len(readings))
    y = np.fromiter((r.value(kind) for r in readings), dtype=np.float64, count=len(readings))
    return x, y


def time_labels(readings: Iterable[Reading]) -> List[str]:
    return [r.timestamp.strftime("%H:%M") for r in readings]
