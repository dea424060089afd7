#!/usr/bin/env python3
"""
Swiss Ephemeris backend interface
Sunrise search for the time-based special lagnas.

Swiss Ephemeris is not thread-safe; every call goes through _swe_lock.
"""

import threading

from datetime import datetime

import swisseph as swe

from app.core.config import EPHEMERIS_PATH, SUNRISE_FALLBACK_HOUR
from app.core.logging import get_ephemeris_logger

from .time_utils import (
    datetime_to_julian_day,
    ensure_utc,
    julian_day_to_datetime,
    local_clock_time,
)

logger = get_ephemeris_logger()

# Thread lock for Swiss Ephemeris calls (it's not thread-safe)
_swe_lock = threading.Lock()

with _swe_lock:
    if EPHEMERIS_PATH:
        swe.set_ephe_path(EPHEMERIS_PATH)

# Built-in Moshier model needs no data files
FLAGS = swe.FLG_MOSEPH


def fallback_sunrise(ts_utc: datetime, tz_offset_hours: float = 0.0) -> datetime:
    """Fixed local sunrise (06:00 by default) on the date of ts_utc."""
    return local_clock_time(ts_utc, tz_offset_hours, hour=SUNRISE_FALLBACK_HOUR)


def find_sunrise(
    ts_utc: datetime,
    latitude: float,
    longitude: float,
    tz_offset_hours: float = 0.0,
) -> datetime:
    """First sunrise after local midnight of the birth date.

    Never raises: any ephemeris failure (or no sunrise, e.g. polar day)
    falls back to fallback_sunrise() with a warning.

    Args:
        ts_utc: Birth instant (UTC)
        latitude: Geographic latitude in degrees
        longitude: Geographic longitude in degrees (east positive)
        tz_offset_hours: Local offset east of UTC

    Returns:
        Sunrise as an aware UTC datetime
    """
    ts_utc = ensure_utc(ts_utc)
    midnight = local_clock_time(ts_utc, tz_offset_hours)
    try:
        jd_start = datetime_to_julian_day(midnight)
        with _swe_lock:
            res, tret = swe.rise_trans(
                jd_start, swe.SUN, swe.CALC_RISE, (longitude, latitude, 0.0), 0.0, 0.0, FLAGS
            )
        if res != 0:
            raise ValueError(f"no sunrise found (code {res})")
        return julian_day_to_datetime(tret[0])
    except Exception as e:
        fb = fallback_sunrise(ts_utc, tz_offset_hours)
        logger.warning(
            "Sunrise lookup failed, using fixed local sunrise",
            extra={"error": str(e), "fallback_utc": fb.isoformat()},
        )
        return fb
