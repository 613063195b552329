from PySide6 import QtWidgets, QtCore

from .cities import city_label, sorted_cities


class CityPickerDialog(QtWidgets.QDialog):
    """Popup city list; clicking outside of it closes it without a choice."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.selected_city = None

        # Popup windows close themselves on an outside click
        self.setWindowFlags(QtCore.Qt.Popup | QtCore.Qt.FramelessWindowHint)
        self.setWindowTitle("Select City")
        self.setMinimumSize(280, 360)

        layout = QtWidgets.QVBoxLayout(self)

        title = QtWidgets.QLabel("Select City")
        title.setAlignment(QtCore.Qt.AlignCenter)
        layout.addWidget(title)

        # Scrollable list of city buttons
        list_widget = QtWidgets.QWidget()
        list_layout = QtWidgets.QVBoxLayout(list_widget)
        list_layout.setContentsMargins(0, 0, 0, 0)
        list_layout.setSpacing(2)

        self.city_buttons = []
        for city in sorted_cities():
            button = QtWidgets.QPushButton(city_label(city))
            button.setObjectName(f"city-{city.code}")
            button.clicked.connect(lambda checked=False, c=city: self.choose(c))
            list_layout.addWidget(button)
            self.city_buttons.append(button)
        list_layout.addStretch()

        scroll_area = QtWidgets.QScrollArea()
        scroll_area.setWidgetResizable(True)
        scroll_area.setWidget(list_widget)
        layout.addWidget(scroll_area)

    def choose(self, city):
        self.selected_city = city
        self.accept()
