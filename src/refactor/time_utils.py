#!/usr/bin/env python3
"""
Time utilities for ephemeris calculations.

Provides UTC validation, Julian day conversions, and local-clock helpers.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import swisseph as swe


def ensure_utc(dt: datetime) -> datetime:
    """Ensure a datetime is timezone-aware and in UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def datetime_to_julian_day(dt: datetime) -> float:
    """Convert aware datetime to Julian Day (UT)."""
    dt = ensure_utc(dt)
    y, m, d = dt.year, dt.month, dt.day
    h = dt.hour + dt.minute / 60.0 + dt.second / 3600.0 + dt.microsecond / 3_600_000_000.0
    return swe.julday(y, m, d, h)


def julian_day_to_datetime(jd: float) -> datetime:
    """Convert Julian Day to aware UTC datetime."""
    y, m, d, h = swe.revjul(jd, swe.GREG_CAL)
    return datetime(y, m, d, tzinfo=timezone.utc) + timedelta(hours=h)


def local_clock_time(
    ts_utc: datetime, tz_offset_hours: float, hour: int = 0, minute: int = 0
) -> datetime:
    """UTC instant of hour:minute on the local calendar date of ts_utc.

    tz_offset_hours is the local offset east of UTC (IST = 5.5).
    """
    offset = timedelta(hours=tz_offset_hours)
    local = ensure_utc(ts_utc) + offset
    local_clock = local.replace(hour=hour, minute=minute, second=0, microsecond=0)
    return local_clock - offset


def hours_between(later: datetime, earlier: datetime) -> float:
    return (ensure_utc(later) - ensure_utc(earlier)).total_seconds() / 3600.0
