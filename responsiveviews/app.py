"""Application entry point and setup for Responsive Views."""

import logging
import os
import sys
from pathlib import Path

from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QApplication

from responsiveviews.core.config import load_config
from responsiveviews.ui.main_window import MainWindow

DEVICE_ENV = "RESPONSIVEVIEWS_DEVICE"
CONFIG_ENV = "RESPONSIVEVIEWS_CONFIG"


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Load the config, create the main window and start the event loop."""
    configure_logging()
    app = QApplication(sys.argv)

    config_path = os.environ.get(CONFIG_ENV)
    config = load_config(Path(config_path) if config_path else None)
    app.setApplicationName(config.title)
    app.setApplicationDisplayName(config.title)

    device = None
    device_name = os.environ.get(DEVICE_ENV)
    if device_name:
        try:
            device = config.device(device_name)
        except KeyError:
            logging.warning(
                "Unknown device profile %r (available: %s)",
                device_name,
                ", ".join(sorted(config.devices)) or "none",
            )

    window = MainWindow(config=config, is_round=device.is_round if device else False)
    if device is not None:
        logging.info("Using device profile %s (%dx%d)", device.name, device.width, device.height)
        window.resize(device.width, device.height)
    else:
        screen = QGuiApplication.primaryScreen()
        if screen is not None:
            window.setGeometry(screen.availableGeometry())
    window.show()

    sys.exit(app.exec())
