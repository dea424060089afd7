#!/usr/bin/env python3
"""
Application configuration
"""

import os

# Service identity
SERVICE_NAME = "namakarana"
SERVICE_VERSION = "0.3.0"

# Sunrise fallback (local clock hour) when the ephemeris search fails
SUNRISE_FALLBACK_HOUR = int(os.getenv("NAMAKARANA_SUNRISE_FALLBACK_HOUR", "6"))

# Offset applied when a caller gives no timezone offset (hours east of UTC)
DEFAULT_TZ_OFFSET_HOURS = float(os.getenv("NAMAKARANA_DEFAULT_TZ_OFFSET", "0"))

# Optional path to Swiss Ephemeris data files; built-in Moshier model otherwise
EPHEMERIS_PATH = os.getenv("NAMAKARANA_EPHE_PATH")

# Time-based lagna rates (degrees per hour since sunrise)
HORA_LAGNA_DEG_PER_HOUR = 30.0
GHATIKA_LAGNA_DEG_PER_HOUR = 75.0

# API settings
MAX_KATAPAYADI_TEXTS = 100
MAX_KATAPAYADI_TEXT_LENGTH = 1000
