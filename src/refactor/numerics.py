#!/usr/bin/env python3
"""
Numerical helpers for sign and house arithmetic.
"""

from __future__ import annotations

from math import floor


def normalize_angle(deg: float) -> float:
    """Wrap an angle in degrees into [0, 360)."""
    x = float(deg) % 360.0
    # -1e-15 % 360 rounds to 360.0
    return 0.0 if x >= 360.0 else x


def sign_index_of(deg: float) -> int:
    """0-based sign index (Aries=0) of a longitude."""
    return int(floor(normalize_angle(deg) / 30.0)) % 12


def degree_in_sign(deg: float) -> float:
    return normalize_angle(deg) % 30.0


def is_odd_sign(sign_index: int) -> bool:
    """Aries (index 0) is an odd sign, Taurus (index 1) an even one."""
    return sign_index % 2 == 0


def relative_house(target_sign: int, source_sign: int) -> int:
    """House (1-12) of target_sign counted from source_sign.

    relative_house(x, x) == 1.
    """
    return ((target_sign - source_sign + 12) % 12) + 1


def degrees_to_dms(deg: float) -> str:
    """123.4567 -> "123°27'24.1" (seconds to one decimal)."""
    tenths = round(normalize_angle(deg) * 36000)
    d, rem = divmod(tenths, 36000)
    m, s = divmod(rem, 600)
    return f"{d}°{m:02d}'{s / 10:04.1f}"
