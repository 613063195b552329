import logging

from PySide6 import QtWidgets, QtGui, QtCore

from .picker import CityPickerDialog
from .settings import SettingsWindow
from .timekeeping import hand_angles, meridiem, wall_clock

logger = logging.getLogger(__name__)

# Redraw cadence of the clock face
TICK_INTERVAL_MS = 500


class ClockFace(QtWidgets.QWidget):
    """Analog dial painted in a 200x200 logical box scaled to the widget."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setAttribute(QtCore.Qt.WA_TranslucentBackground)

        self.angles = hand_angles(0, 0, 0)
        self.meridiem_text = meridiem(0)
        self.label_font = QtGui.QFont()

    def set_time(self, hours, minutes, seconds):
        self.angles = hand_angles(hours, minutes, seconds)
        self.meridiem_text = meridiem(hours)
        self.update()

    def set_label_font(self, font):
        self.label_font = QtGui.QFont(font)
        self.update()

    def paintEvent(self, event):
        painter = QtGui.QPainter(self)
        painter.setRenderHint(QtGui.QPainter.Antialiasing)

        side = min(self.width(), self.height())
        painter.translate(self.width() / 2, self.height() / 2)
        painter.scale(side / 200.0, side / 200.0)

        # Dial
        painter.setPen(QtGui.QPen(QtGui.QColor(255, 255, 255, 200), 2))
        painter.setBrush(QtGui.QColor(20, 20, 28, 210))
        painter.drawEllipse(QtCore.QPointF(0, 0), 96, 96)

        # Markers, heavier at 12, 3, 6 and 9
        for i in range(12):
            painter.save()
            painter.rotate(i * 30)
            if i % 3 == 0:
                painter.setPen(QtGui.QPen(QtGui.QColor(255, 255, 255), 4, QtCore.Qt.SolidLine, QtCore.Qt.RoundCap))
                painter.drawLine(QtCore.QPointF(0, -88), QtCore.QPointF(0, -74))
            else:
                painter.setPen(QtGui.QPen(QtGui.QColor(220, 220, 220, 170), 2, QtCore.Qt.SolidLine, QtCore.Qt.RoundCap))
                painter.drawLine(QtCore.QPointF(0, -88), QtCore.QPointF(0, -80))
            painter.restore()

        # AM/PM below the centre, sized by the configured font in logical units
        label_font = QtGui.QFont(self.label_font)
        pixel_size = label_font.pixelSize()
        if pixel_size > 0 and side > 0:
            label_font.setPixelSize(max(1, round(pixel_size * 200.0 / side)))
        painter.setFont(label_font)
        painter.setPen(QtGui.QColor(255, 255, 255, 190))
        painter.drawText(QtCore.QRectF(-40, 24, 80, 30), QtCore.Qt.AlignCenter, self.meridiem_text)

        # Hands
        self._draw_hand(painter, self.angles.hour, 50, 6, QtGui.QColor(255, 255, 255))
        self._draw_hand(painter, self.angles.minute, 72, 4, QtGui.QColor(220, 220, 235))
        self._draw_hand(painter, self.angles.second, 82, 2, QtGui.QColor(255, 96, 96))

        # Hub
        painter.setPen(QtCore.Qt.NoPen)
        painter.setBrush(QtGui.QColor(255, 96, 96))
        painter.drawEllipse(QtCore.QPointF(0, 0), 4, 4)

    def _draw_hand(self, painter, angle, length, width, color):
        painter.save()
        painter.rotate(angle)
        painter.setPen(QtGui.QPen(color, width, QtCore.Qt.SolidLine, QtCore.Qt.RoundCap))
        painter.drawLine(QtCore.QPointF(0, 10), QtCore.QPointF(0, -length))
        painter.restore()


class ClockOverlay(QtWidgets.QMainWindow):
    def __init__(self, config_manager):
        super().__init__(flags=QtCore.Qt.FramelessWindowHint | QtCore.Qt.WindowStaysOnTopHint | QtCore.Qt.Tool)

        self.config_manager = config_manager
        self.slot_buttons = []

        # Create transparent background
        self.setAttribute(QtCore.Qt.WA_TranslucentBackground)

        # Create central widget
        central_widget = QtWidgets.QWidget()
        self.setCentralWidget(central_widget)

        # Create layout
        layout = QtWidgets.QVBoxLayout(central_widget)
        layout.setContentsMargins(8, 8, 8, 8)

        # Clock face
        self.face = ClockFace()
        layout.addWidget(self.face, 0, QtCore.Qt.AlignHCenter)

        # City buttons
        self.buttons_container = QtWidgets.QWidget()
        self.buttons_layout = QtWidgets.QHBoxLayout(self.buttons_container)
        self.buttons_layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.buttons_container, 0, QtCore.Qt.AlignHCenter)

        # Re-render whenever the store loads or changes
        self.config_manager.add_apply_hook(self.apply_config)
        self.apply_config()

        # Start clock
        self.timer = QtCore.QTimer(self)
        self.timer.timeout.connect(self.update_clock)
        self.timer.start(TICK_INTERVAL_MS)

        # Setup drag functionality
        self.dragging = False

        # Right-click context menu
        self.setContextMenuPolicy(QtCore.Qt.CustomContextMenu)
        self.customContextMenuRequested.connect(self.show_context_menu)

    def apply_config(self):
        config = self.config_manager.current()

        # Clock size
        size = config["clockSize"]
        self.face.setFixedSize(size, size)

        # Font size
        font = QtGui.QFont(self.font())
        font.setPixelSize(config["fontSize"])
        self.face.set_label_font(font)

        # Render buttons
        self._clear_buttons()
        for index, slot in enumerate(config["slots"]):
            button = QtWidgets.QPushButton(slot["code"])
            button.setFont(font)
            button.setCheckable(True)
            button.setChecked(index == config["activeSlot"])
            button.setToolTip(slot["tz"])
            button.setCursor(QtCore.Qt.PointingHandCursor)

            # Left click: switch active slot
            button.clicked.connect(lambda checked=False, i=index: self.select_slot(i))

            # Right click: pick another city for this slot
            button.setContextMenuPolicy(QtCore.Qt.CustomContextMenu)
            button.customContextMenuRequested.connect(lambda point, i=index: self.open_picker(i))

            self.buttons_layout.addWidget(button)
            self.slot_buttons.append(button)

        self.adjustSize()
        self.update_clock()

    def _clear_buttons(self):
        for button in self.slot_buttons:
            self.buttons_layout.removeWidget(button)
            button.hide()
            # May be the sender of the click being handled
            button.deleteLater()
        self.slot_buttons = []

    def active_timezone(self):
        config = self.config_manager.current()
        return config["slots"][config["activeSlot"]]["tz"]

    def update_clock(self):
        hours, minutes, seconds = wall_clock(self.active_timezone())
        self.face.set_time(hours, minutes, seconds)

    def select_slot(self, index):
        try:
            self.config_manager.select_slot(index)
        except Exception:
            logger.exception("Button click error")

    def open_picker(self, index):
        picker = CityPickerDialog(self)
        if picker.exec() != QtWidgets.QDialog.Accepted or picker.selected_city is None:
            return
        self.assign_city(index, picker.selected_city)

    def assign_city(self, index, city):
        try:
            self.config_manager.assign_city(index, city)
        except Exception:
            logger.exception("City assignment error")

    def mousePressEvent(self, event):
        if event.button() == QtCore.Qt.LeftButton:
            self.dragging = True
            self.drag_pos = event.globalPosition().toPoint() - self.frameGeometry().topLeft()
            event.accept()

    def mouseMoveEvent(self, event):
        if self.dragging and event.buttons() & QtCore.Qt.LeftButton:
            self.move(event.globalPosition().toPoint() - self.drag_pos)
            event.accept()

    def mouseReleaseEvent(self, event):
        if event.button() == QtCore.Qt.LeftButton:
            self.dragging = False

    def mouseDoubleClickEvent(self, event):
        if event.button() == QtCore.Qt.LeftButton:
            self.dragging = False
            self.toggle_maximized()
            event.accept()

    def toggle_maximized(self):
        if self.isMaximized():
            self.showNormal()
        else:
            self.showMaximized()

    def show_settings(self):
        settings_window = SettingsWindow(self, self.config_manager)
        settings_window.exec()

    def show_context_menu(self, point):
        context_menu = QtWidgets.QMenu(self)
        settings_action = context_menu.addAction("Settings")
        quit_action = context_menu.addAction("Quit")

        action = context_menu.exec(self.mapToGlobal(point))
        if action == settings_action:
            self.show_settings()
        elif action == quit_action:
            QtWidgets.QApplication.instance().quit()
