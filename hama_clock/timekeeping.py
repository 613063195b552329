import logging
from collections import namedtuple
from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

FALLBACK_TZ = "Asia/Tokyo"

HandAngles = namedtuple("HandAngles", ["hour", "minute", "second"])

_zones = {}


def resolve_zone(tz_name):
    """Return the ZoneInfo for ``tz_name``, or the fallback zone.

    Bad names are reported once and then served from the cache.
    """
    zone = _zones.get(tz_name)
    if zone is not None:
        return zone

    try:
        if not tz_name:
            raise ZoneInfoNotFoundError("empty time zone name")
        zone = ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        logger.warning("Unknown time zone %r, using %s (%s)", tz_name, FALLBACK_TZ, e)
        zone = ZoneInfo(FALLBACK_TZ)

    _zones[tz_name] = zone
    return zone


def wall_clock(tz_name, now=None):
    """Current (hour, minute, second) in 24-hour form for ``tz_name``."""
    if now is None:
        now = datetime.now(timezone.utc)
    local = now.astimezone(resolve_zone(tz_name))
    return local.hour, local.minute, local.second


def hand_angles(hours, minutes, seconds):
    # Degrees clockwise from 12 o'clock
    second = (seconds / 60) * 360
    minute = (minutes / 60) * 360 + (seconds / 60) * 6
    hour = ((hours % 12) / 12) * 360 + (minutes / 60) * 30
    return HandAngles(hour, minute, second)


def meridiem(hours):
    return "PM" if hours >= 12 else "AM"
