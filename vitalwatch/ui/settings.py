# vitalwatch/ui/settings.py

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QLabel, QHBoxLayout, QPushButton,
    QFormLayout, QDoubleSpinBox, QSpinBox
)
from PySide6.QtCore import Qt

from vitalwatch.core.settings_store import SettingsStore, MonitorSettings
from vitalwatch.ui.vital_card import card


class SettingsScreen(QWidget):
    """Edits MonitorSettings; Save writes them and goes back to the monitor."""

    def __init__(self, on_back, store: SettingsStore | None = None):
        super().__init__()
        self.on_back = on_back
        self.store = store or SettingsStore()
        self.settings = self.store.load()

        root = QVBoxLayout(self)
        root.setContentsMargins(22, 20, 22, 20)
        root.setSpacing(12)

        header = QHBoxLayout()
        title = QLabel("Settings")
        title.setStyleSheet("font-size: 24px; font-weight: 800;")
        header.addWidget(title, 1)

        back = QPushButton("Back")
        back.setCursor(Qt.PointingHandCursor)
        back.clicked.connect(self._cancel)
        header.addWidget(back, 0, Qt.AlignRight)
        root.addLayout(header)

        subtitle = QLabel("Saving restarts the monitor with the new values.")
        subtitle.setObjectName("muted")
        root.addWidget(subtitle)

        c = card()
        root.addWidget(c)
        root.addStretch(1)

        wrap = QVBoxLayout(c)
        wrap.setContentsMargins(16, 14, 16, 14)

        form = QFormLayout()
        form.setHorizontalSpacing(18)
        form.setVerticalSpacing(12)
        wrap.addLayout(form)

        self.poll_interval_ms = QSpinBox(); self.poll_interval_ms.setRange(500, 60000); self.poll_interval_ms.setSingleStep(500)
        self.history_hours = QSpinBox(); self.history_hours.setRange(1, 168)
        self.window_size = QSpinBox(); self.window_size.setRange(5, 240)
        self.spike_probability = QDoubleSpinBox(); self.spike_probability.setRange(0.0, 1.0); self.spike_probability.setSingleStep(0.01); self.spike_probability.setDecimals(2)

        form.addRow("Poll interval (ms)", self.poll_interval_ms)
        form.addRow("History to seed (hours)", self.history_hours)
        form.addRow("Chart window (readings)", self.window_size)
        form.addRow("Spike probability per reading", self.spike_probability)

        btns = QHBoxLayout()
        btns.addStretch(1)

        reset = QPushButton("Reset defaults")
        reset.setCursor(Qt.PointingHandCursor)
        reset.clicked.connect(self._reset)

        save = QPushButton("Save")
        save.setCursor(Qt.PointingHandCursor)
        save.clicked.connect(self._save)

        btns.addWidget(reset)
        btns.addWidget(save)
        wrap.addSpacing(10)
        wrap.addLayout(btns)

        self._load_into_ui(self.settings)

    def _load_into_ui(self, s: MonitorSettings):
        self.poll_interval_ms.setValue(int(s.poll_interval_ms))
        self.history_hours.setValue(int(s.history_hours))
        self.window_size.setValue(int(s.window_size))
        self.spike_probability.setValue(float(s.spike_probability))

    def _read_from_ui(self) -> MonitorSettings:
        return MonitorSettings(
            poll_interval_ms=int(self.poll_interval_ms.value()),
            history_hours=int(self.history_hours.value()),
            window_size=int(self.window_size.value()),
            spike_probability=float(self.spike_probability.value()),
        )

    def get_settings(self) -> MonitorSettings:
        return self.settings

    def _cancel(self):
        self._load_into_ui(self.settings)
        self.on_back(False)

    def _save(self):
        self.settings = self._read_from_ui()
        self.store.save(self.settings)
        self.on_back(True)

    def _reset(self):
        self._load_into_ui(MonitorSettings())
