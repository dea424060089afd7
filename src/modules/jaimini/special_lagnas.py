"""
Special Ascendants: Arudha (AL), Varnada (VL), Hora (HL) and Ghatika (GL) Lagnas.

AL follows Jaimini's pada rule. HL and GL advance from the Sun at
one sign per hour and per ghati (24 minutes) since sunrise; VL
combines the Lagna and HL by sign parity.
"""

from datetime import datetime

from app.core.config import GHATIKA_LAGNA_DEG_PER_HOUR, HORA_LAGNA_DEG_PER_HOUR
from app.core.logging import get_engine_logger
from config.feature_flags import require_feature
from constants.relationships import sign_lord
from refactor.core_types import ChartPoint, PlanetaryDataset
from refactor.numerics import is_odd_sign, normalize_angle, sign_index_of
from refactor.swe_backend import find_sunrise
from refactor.time_utils import hours_between

logger = get_engine_logger("special_lagnas")

ARUDHA_EXCEPTION_JUMP = 10


def _is_odd_longitude(deg: float) -> bool:
    return is_odd_sign(sign_index_of(deg))


# --- ARUDHA LAGNA ---


def calculate_arudha_lagna(dataset: PlanetaryDataset) -> ChartPoint:
    """Arudha Lagna: project the Lagna lord's distance forward from the lord.

    If the result is the 1st or 7th from the Lagna it moves 10 signs on;
    this is applied once only. Missing Lagna or lord gives sign 0.
    """
    lagna = dataset.lagna
    if lagna is None:
        logger.debug("AL skipped: no Lagna")
        return ChartPoint("AL", 0)

    lord = dataset.find(sign_lord(lagna.sign_index).value)
    if lord is None:
        logger.debug("AL skipped: Lagna lord missing from dataset")
        return ChartPoint("AL", 0)

    dist = (lord.sign_index - lagna.sign_index + 12) % 12
    al_index = (lord.sign_index + dist) % 12

    rel = (al_index - lagna.sign_index + 12) % 12
    if rel in (0, 6):
        al_index = (al_index + ARUDHA_EXCEPTION_JUMP) % 12

    return ChartPoint("AL", al_index)


# --- HORA LAGNA / VARNADA LAGNA ---


def hora_lagna_degree(sun_longitude: float, hours_since_sunrise: float) -> float:
    return normalize_angle(sun_longitude + hours_since_sunrise * HORA_LAGNA_DEG_PER_HOUR)


def ghatika_lagna_degree(sun_longitude: float, hours_since_sunrise: float) -> float:
    return normalize_angle(sun_longitude + hours_since_sunrise * GHATIKA_LAGNA_DEG_PER_HOUR)


def varnada_degree(lagna_longitude: float, hl_longitude: float) -> float:
    """Varnada Lagna degree from the Lagna and Hora Lagna longitudes.

    Even signs are counted backwards (360 - x). Same parity adds the
    two values, different parity takes the difference. An even Lagna
    reverses the result.
    """
    lagna_odd = _is_odd_longitude(lagna_longitude)
    hl_odd = _is_odd_longitude(hl_longitude)

    val_l = lagna_longitude if lagna_odd else 360 - lagna_longitude
    val_h = hl_longitude if hl_odd else 360 - hl_longitude

    res = val_l + val_h if lagna_odd == hl_odd else abs(val_l - val_h)
    res = normalize_angle(res)

    return res if lagna_odd else normalize_angle(360 - res)


def calculate_varnada_lagna(
    dataset: PlanetaryDataset,
    birth_utc: datetime,
    latitude: float,
    longitude: float,
    tz_offset_hours: float = 0.0,
) -> ChartPoint:
    """Varnada Lagna. Missing Sun or Lagna gives sign 0.

    Births before sunrise use a negative elapsed time here, so the
    Hora Lagna runs back from the Sun.
    """
    sun = dataset.sun
    lagna = dataset.lagna
    if sun is None or lagna is None:
        logger.debug("VL skipped: Sun or Lagna missing")
        return ChartPoint("VL", 0)

    sunrise = find_sunrise(birth_utc, latitude, longitude, tz_offset_hours)
    hours = hours_between(birth_utc, sunrise)
    hl_deg = hora_lagna_degree(sun.sidereal_longitude, hours)

    vl_deg = varnada_degree(lagna.sidereal_longitude, hl_deg)
    return ChartPoint("VL", sign_index_of(vl_deg))


# --- TIME-BASED LAGNAS ---


def calculate_time_lagnas(
    dataset: PlanetaryDataset,
    birth_utc: datetime,
    latitude: float,
    longitude: float,
    tz_offset_hours: float = 0.0,
) -> list[ChartPoint]:
    """Hora (HL) and Ghatika (GL) Lagnas for the chart overlay.

    A birth before sunrise is counted from the previous sunrise (+24h).
    """
    sun = dataset.sun
    if sun is None:
        logger.debug("HL/GL skipped: no Sun")
        return []

    sunrise = find_sunrise(birth_utc, latitude, longitude, tz_offset_hours)
    hours = hours_between(birth_utc, sunrise)
    if hours < 0:
        hours += 24

    hl_deg = hora_lagna_degree(sun.sidereal_longitude, hours)
    gl_deg = ghatika_lagna_degree(sun.sidereal_longitude, hours)

    return [
        ChartPoint("HL", sign_index_of(hl_deg)),
        ChartPoint("GL", sign_index_of(gl_deg)),
    ]


@require_feature("special_lagnas")
def calculate_special_points(
    dataset: PlanetaryDataset,
    birth_utc: datetime | None = None,
    latitude: float | None = None,
    longitude: float | None = None,
    tz_offset_hours: float = 0.0,
) -> list[ChartPoint]:
    """AL, plus VL, HL and GL when the birth time and place are known."""
    points = [calculate_arudha_lagna(dataset)]
    if birth_utc is None or latitude is None or longitude is None:
        return points

    points.append(
        calculate_varnada_lagna(dataset, birth_utc, latitude, longitude, tz_offset_hours)
    )
    points.extend(
        calculate_time_lagnas(dataset, birth_utc, latitude, longitude, tz_offset_hours)
    )
    return points
