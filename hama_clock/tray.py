from PySide6 import QtWidgets


class SystemTrayIcon(QtWidgets.QSystemTrayIcon):
    def __init__(self, app, clock):
        icon = app.style().standardIcon(QtWidgets.QStyle.StandardPixmap.SP_DesktopIcon)

        super().__init__(icon, app)

        self.app = app
        self.clock = clock

        # Create menu
        self.menu = QtWidgets.QMenu()

        self.show_clock_action = self.menu.addAction("Show/Hide Clock")
        self.show_clock_action.triggered.connect(self.toggle_clock)

        self.menu.addSeparator()

        self.settings_action = self.menu.addAction("Settings")
        self.settings_action.triggered.connect(self.clock.show_settings)

        self.menu.addSeparator()

        self.quit_action = self.menu.addAction("Quit")
        self.quit_action.triggered.connect(self.app.quit)

        self.setContextMenu(self.menu)
        self.show()

        # Clicking the tray icon shows/hides the clock
        self.activated.connect(self.on_activated)

    def toggle_clock(self):
        if self.clock.isVisible():
            self.clock.hide()
        else:
            self.clock.show()

    def on_activated(self, reason):
        if reason == QtWidgets.QSystemTrayIcon.DoubleClick or reason == QtWidgets.QSystemTrayIcon.Trigger:
            self.toggle_clock()
