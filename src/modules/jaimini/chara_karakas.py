"""
Chara Karakas (Variable Significators) calculation module.
Based on Jaimini Sutras for determining soul-level significators.

The Atmakaraka (highest degree within its sign) drives the
Ista-Devata and Baladi Avastha steps of name selection.
"""

from dataclasses import dataclass

from app.core.logging import get_engine_logger
from constants.relationships import LAGNA, PRANAPADA, Planet
from refactor.core_types import PlanetaryDataset, PlanetPosition

logger = get_engine_logger("atmakaraka")

# Never candidates for Atmakaraka
EXCLUDED_FROM_KARAKAS = frozenset({LAGNA, PRANAPADA, Planet.KETU.value})

KARAKA_CODES = ("AK", "AmK", "BK", "MK", "PK", "GK", "DK")

KARAKA_NAMES = {
    "AK": "Atma Karaka (Soul)",
    "AmK": "Amatya Karaka (Mind/Career)",
    "BK": "Bhratru Karaka (Siblings)",
    "MK": "Matru Karaka (Mother)",
    "PK": "Putra Karaka (Children)",
    "GK": "Gnati Karaka (Obstacles)",
    "DK": "Dara Karaka (Spouse)",
}


@dataclass(frozen=True)
class AtmakarakaResult:
    """Soul planet and the degree that selected it.

    planet is None and degree is -1 when no candidate exists.
    """

    planet: PlanetPosition | None
    degree: float

    @property
    def found(self) -> bool:
        return self.planet is not None

    def to_dict(self) -> dict:
        return {
            "planet": self.planet.name if self.planet else None,
            "degree": round(self.degree, 4),
        }


def karaka_degree(position: PlanetPosition) -> float:
    """Degree within sign used for karaka ranking.

    Rahu moves backwards, so its degree is counted from the end of the sign.
    """
    degree = position.sidereal_longitude % 30
    if position.name == Planet.RAHU.value:
        degree = 30 - degree
    return degree


def karaka_candidates(dataset: PlanetaryDataset) -> list[PlanetPosition]:
    return [p for p in dataset if p.name not in EXCLUDED_FROM_KARAKAS]


def get_atmakaraka(dataset: PlanetaryDataset) -> AtmakarakaResult:
    """Find the Atmakaraka.

    Strict maximum of karaka_degree; the first planet encountered wins a tie.
    """
    ak: PlanetPosition | None = None
    max_degree = -1.0

    for p in karaka_candidates(dataset):
        degree = karaka_degree(p)
        if degree > max_degree:
            max_degree = degree
            ak = p

    if ak is None:
        logger.debug("No Atmakaraka candidates in dataset")
    return AtmakarakaResult(planet=ak, degree=max_degree)


def calculate_chara_karakas(dataset: PlanetaryDataset) -> dict[str, str]:
    """Assign the seven Chara Karakas by descending karaka degree.

    Ties keep dataset order. Returns {} when fewer than seven
    candidates are present.
    """
    ranked = sorted(karaka_candidates(dataset), key=karaka_degree, reverse=True)
    if len(ranked) < len(KARAKA_CODES):
        return {}
    return {code: p.name for code, p in zip(KARAKA_CODES, ranked)}
