import faulthandler
import logging
import sys

from PySide6.QtWidgets import QApplication

from about_settings.gui.main_window import MainWindow
from about_settings.logging_setup import configure_logging
from about_settings.services.config_service import ConfigService


def run() -> None:
    faulthandler.enable()
    settings = ConfigService().load_settings()
    configure_logging(settings.log_level)
    logging.getLogger(__name__).debug("Loaded settings: %s", settings)

    app = QApplication(sys.argv)
    app.setApplicationName("About Settings")

    w = MainWindow(settings)
    w.show()

    raise SystemExit(app.exec())
