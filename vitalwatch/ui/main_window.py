# vitalwatch/ui/main_window.py
import logging
import sys

from PySide6.QtWidgets import QApplication, QMainWindow, QStackedWidget

from vitalwatch.core.logger import configure_logging
from vitalwatch.core.settings_store import SettingsStore
from vitalwatch.ui.monitor import MonitorScreen
from vitalwatch.ui.settings import SettingsScreen
from vitalwatch.ui.style import APP_QSS

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, store: SettingsStore | None = None):
        super().__init__()

        self.setWindowTitle("VitalWatch")
        self.resize(1100, 760)

        self.store = store or SettingsStore()
        self.settings_screen = SettingsScreen(on_back=self.go_monitor, store=self.store)
        logger.info("Loaded settings from %s: %s", self.store.path, self.settings_screen.get_settings())

        self.stack = QStackedWidget()
        self.stack.addWidget(self.settings_screen)
        self.setCentralWidget(self.stack)

        self.monitor = None
        self._build_monitor()

    def _build_monitor(self):
        if self.monitor is not None:
            self.monitor.stop()
            self.stack.removeWidget(self.monitor)
            self.monitor.deleteLater()

        self.monitor = MonitorScreen(self.settings_screen.get_settings(), on_settings=self.go_settings)
        self.stack.addWidget(self.monitor)
        self.stack.setCurrentWidget(self.monitor)

    def go_settings(self):
        self.stack.setCurrentWidget(self.settings_screen)

    def go_monitor(self, saved: bool = False):
        if saved:
            logger.info("Settings saved: %s", self.settings_screen.get_settings())
            self._build_monitor()
        else:
            self.stack.setCurrentWidget(self.monitor)

    def closeEvent(self, event):
        try:
            self.monitor.stop()
        except Exception:
            pass

        super().closeEvent(event)


def launch_app():
    configure_logging()
    app = QApplication(sys.argv)
    app.setOrganizationName("VitalWatch")
    app.setApplicationName("VitalWatch")
    app.setStyleSheet(APP_QSS)
    window = MainWindow()
    window.show()
    sys.exit(app.exec())
