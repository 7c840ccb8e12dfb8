from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from vitalwatch.vitals.reading import Reading


class VitalsSource(ABC):
    """Whatever the monitor polls for readings."""

    @abstractmethod
    def start(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def stop(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def status(self) -> Dict[str, Any]:
        """
        Must return:
          {
            'level': 'disconnected'|'ready',
            'message': str,
            'ready': bool
          }
        """
        raise NotImplementedError

    @abstractmethod
    def read_reading(self) -> Reading:
        raise NotImplementedError

    @abstractmethod
    def read_history(self, hours: int = 24) -> List[Reading]:
        """Chart seed: hours + 1 hourly readings ending now."""
        raise NotImplementedError
