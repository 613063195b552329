import logging
import sys

from PySide6 import QtWidgets, QtGui, QtCore

from .config import ConfigManager
from .overlay import ClockOverlay
from .tray import SystemTrayIcon


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    QtGui.QGuiApplication.setHighDpiScaleFactorRoundingPolicy(
        QtCore.Qt.HighDpiScaleFactorRoundingPolicy.PassThrough)

    app = QtWidgets.QApplication(sys.argv)

    # Keep running in the tray when the clock window is hidden
    app.setQuitOnLastWindowClosed(False)

    config_manager = ConfigManager()
    clock = ClockOverlay(config_manager)

    # Loading re-applies the config to the clock through its hook
    config_manager.load()

    tray_icon = SystemTrayIcon(app, clock)

    clock.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
