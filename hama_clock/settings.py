from PySide6 import QtWidgets, QtCore

CLOCK_SIZE_RANGE = (150, 600)
FONT_SIZE_RANGE = (8, 48)


class SettingsWindow(QtWidgets.QDialog):
    def __init__(self, parent, config_manager):
        super().__init__(parent)
        self.config_manager = config_manager
        config = self.config_manager.current()

        # Set window properties
        self.setWindowTitle("Clock Settings")
        self.setWindowFlags(self.windowFlags() & ~QtCore.Qt.WindowContextHelpButtonHint)
        self.setMinimumWidth(360)

        layout = QtWidgets.QFormLayout()

        # Clock size
        self.clock_size_slider, self.clock_size_spinbox, clock_size_layout = self._slider_pair(
            CLOCK_SIZE_RANGE, config["clockSize"], " px")
        layout.addRow("Clock Size:", clock_size_layout)

        # Font size
        self.font_size_slider, self.font_size_spinbox, font_size_layout = self._slider_pair(
            FONT_SIZE_RANGE, config["fontSize"], " px")
        layout.addRow("Font Size:", font_size_layout)

        # Create buttons
        button_box = QtWidgets.QDialogButtonBox(QtWidgets.QDialogButtonBox.Save | QtWidgets.QDialogButtonBox.Cancel)
        button_box.accepted.connect(self.save_settings)
        button_box.rejected.connect(self.reject)

        main_layout = QtWidgets.QVBoxLayout()
        main_layout.addLayout(layout)
        main_layout.addWidget(button_box)
        self.setLayout(main_layout)

    def _slider_pair(self, value_range, value, suffix):
        slider = QtWidgets.QSlider(QtCore.Qt.Horizontal)
        slider.setRange(*value_range)

        spinbox = QtWidgets.QSpinBox()
        spinbox.setRange(*value_range)
        spinbox.setSuffix(suffix)

        # Values outside the range are clamped by the widgets
        slider.setValue(value)
        spinbox.setValue(slider.value())

        # Connect for two-way synchronization
        slider.valueChanged.connect(spinbox.setValue)
        spinbox.valueChanged.connect(slider.setValue)

        row = QtWidgets.QHBoxLayout()
        row.addWidget(slider)
        row.addWidget(spinbox)
        return slider, spinbox, row

    def save_settings(self):
        self.config_manager.update(
            clockSize=self.clock_size_spinbox.value(),
            fontSize=self.font_size_spinbox.value(),
        )
        self.accept()
