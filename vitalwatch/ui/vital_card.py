from PySide6.QtWidgets import QFrame, QLabel, QVBoxLayout
from PySide6.QtCore import Qt

from vitalwatch.vitals.classifier import classify, hex_for
from vitalwatch.vitals.reading import vital_unit

CARD_QSS = """
    QFrame {
        background: rgba(255,255,255,0.05);
        border: 1px solid rgba(255,255,255,0.08);
        border-radius: 16px;
    }
"""


def card() -> QFrame:
    f = QFrame()
    f.setStyleSheet(CARD_QSS)
    return f


class VitalCard(QFrame):
    """Title + value/unit, value coloured by its tier."""

    def __init__(self, title: str, kind: str):
        super().__init__()
        self.kind = kind
        self.unit = vital_unit(kind)
        self.tier = "normal"

        self.setStyleSheet(CARD_QSS)

        self.title = QLabel(title)
        self.title.setObjectName("muted")
        self.value = QLabel(f"-- {self.unit}")
        self.value.setStyleSheet("font-size: 22px; font-weight: 750;")

        lay = QVBoxLayout(self)
        lay.setContentsMargins(16, 14, 16, 14)
        lay.setSpacing(6)
        self.title.setAlignment(Qt.AlignLeft)
        self.value.setAlignment(Qt.AlignLeft)
        lay.addWidget(self.title)
        lay.addWidget(self.value)

    def set_value(self, value: float):
        self.tier = classify(self.kind, value)
        self.value.setText(f"{value} {self.unit}")
        self.value.setStyleSheet(
            f"font-size: 22px; font-weight: 750; color: {hex_for(self.tier)};"
        )
