import logging
from datetime import datetime, timezone

import pytest

from hama_clock import timekeeping
from hama_clock.cities import CITIES
from hama_clock.timekeeping import hand_angles, meridiem, wall_clock

NOON_UTC = datetime(2024, 1, 15, 12, 0, 5, tzinfo=timezone.utc)


def test_three_oclock():
    angles = hand_angles(3, 0, 0)
    assert angles.hour == 90
    assert angles.minute == 0
    assert angles.second == 0


def test_half_past_midnight():
    angles = hand_angles(0, 30, 0)
    assert angles.hour == 15
    assert angles.minute == 180


def test_seconds_drive_minute_hand():
    angles = hand_angles(0, 0, 30)
    assert angles.second == 180
    assert angles.minute == 3


def test_afternoon_wraps_to_twelve_hours():
    assert hand_angles(15, 0, 0) == hand_angles(3, 0, 0)


@pytest.mark.parametrize("hours, expected", [(0, "AM"), (11, "AM"), (12, "PM"), (13, "PM"), (23, "PM")])
def test_meridiem(hours, expected):
    assert meridiem(hours) == expected


def test_wall_clock_in_zone():
    assert wall_clock("Asia/Tokyo", now=NOON_UTC) == (21, 0, 5)
    assert wall_clock("America/New_York", now=NOON_UTC) == (7, 0, 5)
    assert wall_clock("Asia/Kolkata", now=NOON_UTC) == (17, 30, 5)
    assert wall_clock("UTC", now=NOON_UTC) == (12, 0, 5)


def test_wall_clock_defaults_to_now():
    hours, minutes, seconds = wall_clock("UTC")
    assert 0 <= hours < 24
    assert 0 <= minutes < 60
    assert 0 <= seconds < 60


def test_unknown_zone_falls_back_once(caplog):
    timekeeping._zones.pop("Mars/Olympus", None)

    with caplog.at_level(logging.WARNING, logger="hama_clock.timekeeping"):
        first = wall_clock("Mars/Olympus", now=NOON_UTC)
        second = wall_clock("Mars/Olympus", now=NOON_UTC)

    assert first == second == wall_clock("Asia/Tokyo", now=NOON_UTC)
    assert caplog.text.count("Unknown time zone") == 1


def test_empty_zone_falls_back():
    assert wall_clock("", now=NOON_UTC) == (21, 0, 5)


def test_catalog_zones_resolve():
    for city in CITIES:
        assert str(timekeeping.resolve_zone(city.tz)) == city.tz
