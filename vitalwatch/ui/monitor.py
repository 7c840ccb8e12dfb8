import logging

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QLabel, QHBoxLayout, QGridLayout, QPushButton
)
from PySide6.QtCore import Qt, QTimer

import pyqtgraph as pg

from vitalwatch.core.settings_store import MonitorSettings
from vitalwatch.ui.style import ACCENT
from vitalwatch.ui.vital_card import VitalCard, card
from vitalwatch.vitals.reading import Reading, vital_name
from vitalwatch.vitals.series import RollingWindow, series
from vitalwatch.vitals.sim_source import SimulatedVitalsSource
from vitalwatch.vitals.vitals_api import VitalsSource

logger = logging.getLogger(__name__)

CARDS = (
    ("Heart Rate", "heart_rate"),
    ("BP Systolic", "blood_pressure_systolic"),
    ("BP Diastolic", "blood_pressure_diastolic"),
    ("Blood Oxygen", "blood_oxygen"),
    ("Glucose", "glucose_level"),
    ("Temperature", "temperature"),
)

CHARTS = (
    ("Heart Rate Trend", "heart_rate"),
    ("Blood Pressure Trend (Systolic)", "blood_pressure_systolic"),
    ("Blood Oxygen Saturation", "blood_oxygen"),
    ("Glucose Level Trend", "glucose_level"),
)


class MonitorScreen(QWidget):
    """
    Live vitals monitor
    - one card per vital, coloured normal/warning/critical
    - trend charts over a rolling window seeded from the hourly history
    - status line names the vital when a spike starts
    - Reset chart re-seeds the window (live baseline is left alone)
    """
    def __init__(self, settings: MonitorSettings, source: VitalsSource | None = None, on_settings=None):
        super().__init__()
        self.settings = settings
        self.source = source or SimulatedVitalsSource(
            spike_probability=float(self.settings.spike_probability)
        )
        self.source.start()

        self.history = RollingWindow(maxlen=int(self.settings.window_size))

        # --- Header
        header = QHBoxLayout()
        header.setSpacing(12)

        title = QLabel("Patient Vitals")
        title.setAlignment(Qt.AlignLeft)
        title.setStyleSheet("font-size: 24px; font-weight: 750; letter-spacing: 0.2px;")

        self.reset_btn = QPushButton("Reset chart")
        self.reset_btn.setCursor(Qt.PointingHandCursor)
        self.reset_btn.clicked.connect(self.reset_chart)

        header.addWidget(title, 1)
        header.addWidget(self.reset_btn, 0, Qt.AlignRight)

        if callable(on_settings):
            settings_btn = QPushButton("Settings")
            settings_btn.setCursor(Qt.PointingHandCursor)
            settings_btn.clicked.connect(on_settings)
            header.addWidget(settings_btn, 0, Qt.AlignRight)

        self.status = QLabel("Waiting for first reading…")
        self.status.setObjectName("muted")
        self.status.setAlignment(Qt.AlignLeft)

        # --- Cards
        cards_grid = QGridLayout()
        cards_grid.setSpacing(12)
        self.cards = {}
        for i, (label, kind) in enumerate(CARDS):
            c = VitalCard(label, kind)
            self.cards[kind] = c
            cards_grid.addWidget(c, i // 3, i % 3)

        # --- Charts
        charts_card = card()
        charts_layout = QGridLayout(charts_card)
        charts_layout.setContentsMargins(12, 12, 12, 12)
        charts_layout.setSpacing(10)

        pg.setConfigOptions(antialias=True)

        self.curves = {}
        for i, (chart_title, kind) in enumerate(CHARTS):
            plot = pg.PlotWidget(axisItems={"bottom": pg.DateAxisItem()})
            plot.setMinimumHeight(160)
            plot.setBackground(None)
            plot.showGrid(x=True, y=True, alpha=0.2)
            plot.setTitle(chart_title)
            self.curves[kind] = plot.plot([], [], pen=pg.mkPen(ACCENT, width=2), symbol="o", symbolSize=5)
            charts_layout.addWidget(plot, i // 2, i % 2)

        # --- Page layout
        root = QVBoxLayout(self)
        root.setContentsMargins(22, 20, 22, 20)
        root.setSpacing(12)

        root.addLayout(header)
        root.addWidget(self.status)
        root.addSpacing(6)
        root.addLayout(cards_grid)
        root.addWidget(charts_card, 1)

        self.reset_chart()

        # --- Timer tick
        self.timer = QTimer(self)
        self.timer.timeout.connect(self.update_vitals)
        self.timer.start(int(self.settings.poll_interval_ms))

    # -----------------------
    # Loop
    # -----------------------

    def reset_chart(self):
        self.history.seed(self.source.read_history(int(self.settings.history_hours)))
        self._redraw()
        if self.history.latest is not None:
            self._show_reading(self.history.latest)

    def update_vitals(self):
        try:
            r = self.source.read_reading()
            self.history.push(r)
            self._show_reading(r)
            self._redraw()

            if r.has_spike:
                logger.info("Spike in %s at %s", r.spike_type, r.timestamp.isoformat(timespec="seconds"))
                self.status.setObjectName("spike")
                self.status.setText(f"Spike detected: {vital_name(r.spike_type)}")
            else:
                self.status.setObjectName("muted")
                self.status.setText(f"Last update {r.timestamp.strftime('%H:%M:%S')}")
            # objectName change needs a re-polish to pick up the stylesheet
            self.status.style().unpolish(self.status)
            self.status.style().polish(self.status)

        except Exception:
            logger.exception("Monitor update error")

    def _show_reading(self, r: Reading):
        for kind, c in self.cards.items():
            c.set_value(r.value(kind))

    def _redraw(self):
        readings = list(self.history)
        for kind, curve in self.curves.items():
            x, y = series(readings, kind)
            curve.setData(x, y)

    def stop(self):
        if self.timer.isActive():
            self.timer.stop()
        try:
            self.source.stop()
        except Exception:
            logger.debug("Source stop failed", exc_info=True)

    def closeEvent(self, event):
        try:
            self.stop()
        finally:
            super().closeEvent(event)
