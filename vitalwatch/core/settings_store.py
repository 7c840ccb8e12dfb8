import json
import math
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QStandardPaths

logger = logging.getLogger(__name__)


@dataclass
class MonitorSettings:
    poll_interval_ms: int = 5000
    history_hours: int = 24
    window_size: int = 24
    spike_probability: float = 0.03


def _in_range(name: str, value) -> bool:
    if name == "spike_probability":
        return 0.0 <= value <= 1.0
    return value >= 1


def settings_path() -> Path:
    base = Path(QStandardPaths.writableLocation(QStandardPaths.AppDataLocation))
    base.mkdir(parents=True, exist_ok=True)
    return base / "settings.json"


class SettingsStore:
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else settings_path()

    def load(self) -> MonitorSettings:
        if not self.path.exists():
            return MonitorSettings()
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Could not read %s, using defaults: %r", self.path, e)
            return MonitorSettings()
        if not isinstance(data, dict):
            logger.warning("Ignoring %s: expected a JSON object", self.path)
            return MonitorSettings()

        s = MonitorSettings()
        for f in fields(s):
            if f.name not in data:
                continue
            v = data[f.name]
            default = getattr(s, f.name)
            # bool is an int subclass; never accept it for a numeric field
            if isinstance(v, bool) or not isinstance(v, (int, float)):
                logger.warning("Ignoring setting %s=%r", f.name, v)
                continue
            # json.loads accepts NaN / Infinity
            if isinstance(v, float) and not math.isfinite(v):
                logger.warning("Ignoring non-finite setting %s=%r", f.name, v)
                continue
            v = type(default)(v)
            if not _in_range(f.name, v):
                logger.warning("Ignoring out-of-range setting %s=%r", f.name, v)
                continue
            setattr(s, f.name, v)
        return s

    def save(self, settings: MonitorSettings) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(".tmp")
        tmp.write_text(json.dumps(asdict(settings), indent=2), encoding="utf-8")
        tmp.replace(self.path)
