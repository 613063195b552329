import json

import pytest
from PySide6 import QtWidgets

from hama_clock.cities import find_city
from hama_clock.overlay import ClockOverlay
from hama_clock.picker import CityPickerDialog
from hama_clock.settings import SettingsWindow
from hama_clock.tray import SystemTrayIcon


@pytest.fixture
def overlay(qapp, manager):
    manager.load()
    window = ClockOverlay(manager)
    yield window
    window.timer.stop()
    window.close()


def stored(manager):
    return json.loads(manager.config_path.read_text(encoding="utf-8"))


def test_buttons_follow_slots(overlay):
    assert [b.text() for b in overlay.slot_buttons] == ["TYO", "NYC", "LON"]
    assert [b.isChecked() for b in overlay.slot_buttons] == [True, False, False]


def test_face_uses_clock_size(overlay):
    assert overlay.face.width() == 280
    assert overlay.face.height() == 280


def test_click_switches_active_slot(overlay, manager):
    overlay.slot_buttons[1].click()

    assert manager.current()["activeSlot"] == 1
    assert stored(manager)["activeSlot"] == 1
    assert [b.isChecked() for b in overlay.slot_buttons] == [False, True, False]
    assert overlay.active_timezone() == "America/New_York"


def test_assign_city_rebuilds_buttons(overlay, manager):
    manager.select_slot(1)

    overlay.assign_city(1, find_city("PAR"))

    assert [b.text() for b in overlay.slot_buttons] == ["TYO", "PAR", "LON"]
    assert manager.current()["activeSlot"] == 1
    assert stored(manager)["slots"][1] == {"code": "PAR", "tz": "Europe/Paris"}
    assert overlay.active_timezone() == "Europe/Paris"


def test_apply_config_is_idempotent(overlay):
    overlay.apply_config()
    overlay.apply_config()
    assert len(overlay.slot_buttons) == 3


def test_update_clock_sets_meridiem(overlay):
    overlay.update_clock()
    assert overlay.face.meridiem_text in ("AM", "PM")


def test_settings_change_size(overlay, manager):
    settings = SettingsWindow(overlay, manager)
    settings.clock_size_spinbox.setValue(360)
    settings.font_size_spinbox.setValue(20)

    settings.save_settings()

    assert stored(manager)["clockSize"] == 360
    assert stored(manager)["fontSize"] == 20
    assert overlay.face.width() == 360
    assert settings.result() == QtWidgets.QDialog.Accepted


def test_picker_lists_catalog(qapp):
    picker = CityPickerDialog()
    assert len(picker.city_buttons) == 25
    assert picker.city_buttons[0].text() == "Sydney, Australia (SYD)"


def test_picker_choice_accepts(qapp):
    picker = CityPickerDialog()
    picker.findChild(QtWidgets.QPushButton, "city-PAR").click()

    assert picker.selected_city == find_city("PAR")
    assert picker.result() == QtWidgets.QDialog.Accepted


def test_tray_uses_standard_icon_and_toggles_clock(qapp, overlay):
    tray = SystemTrayIcon(qapp, overlay)

    assert not tray.icon().isNull()

    overlay.hide()
    tray.toggle_clock()
    assert overlay.isVisible()
    tray.toggle_clock()
    assert not overlay.isVisible()
    tray.hide()
