"""
Hoda Chakra sound filter.

Each syllable of the planet's sound group is placed in its Hoda
sign and judged by its house from the Moon (body and mind) and
from the Lagna (life path). A Dusthana from the Moon rejects the
sound outright.
"""

import re
from dataclasses import dataclass

from app.core.logging import get_engine_logger
from config.feature_flags import require_feature
from constants.relationships import (
    DUSTHANA_HOUSES,
    KENDRA_HOUSES,
    TRIKONA_HOUSES,
    Planet,
    sign_name,
)
from constants.sounds import HODA_CAKRA, HODA_KEY_RULES, SUN_HODA_KEYS
from refactor.core_types import PlanetaryDataset
from refactor.numerics import relative_house

logger = get_engine_logger("hoda_chakra")

MOON_DUSTHANA_SCORE = -10


@dataclass(frozen=True)
class HousePlacement:
    """House category of a sound counted from a reference point."""

    house: int
    type: str
    score: float
    quality: str  # good / neutral / bad

    def to_dict(self) -> dict:
        return {
            "house": self.house,
            "type": self.type,
            "score": self.score,
            "quality": self.quality,
        }


@dataclass(frozen=True)
class HodaCandidate:
    syllable: str
    sign_index: int
    sign_name: str
    moon_status: HousePlacement
    lagna_status: HousePlacement
    total_score: float

    @property
    def is_recommended(self) -> bool:
        return self.total_score > 0

    def to_dict(self) -> dict:
        return {
            "syllable": self.syllable,
            "sign_index": self.sign_index,
            "sign_name": self.sign_name,
            "moon_status": self.moon_status.to_dict(),
            "lagna_status": self.lagna_status.to_dict(),
            "total_score": self.total_score,
            "is_recommended": self.is_recommended,
        }


def evaluate_position(house: int) -> HousePlacement:
    if house in KENDRA_HOUSES:
        return HousePlacement(house, "Kendra", 2, "good")
    if house in TRIKONA_HOUSES:
        return HousePlacement(house, "Kona", 1.5, "good")
    if house in (2, 11):
        return HousePlacement(house, "Neutral", 1, "neutral")
    if house == 3:
        return HousePlacement(house, "Upachaya", 0.5, "neutral")
    if house in DUSTHANA_HOUSES:
        return HousePlacement(house, "Dusthana", -2, "bad")
    return HousePlacement(house, "Neutral", 0, "neutral")


def get_hoda_keys(planet: Planet | str) -> list[str]:
    """Candidate syllables for a planet, in Hoda table order."""
    if isinstance(planet, str):
        planet = Planet.from_name(planet)
    if planet is None:
        return []
    if planet is Planet.SUN:
        return list(SUN_HODA_KEYS)

    include, exclude = HODA_KEY_RULES[planet]
    keys = [k for k in HODA_CAKRA if re.match(include, k)]
    if exclude:
        keys = [k for k in keys if not re.match(exclude, k)]
    return keys


def score_syllable(syllable: str, moon_sign: int, lagna_sign: int) -> HodaCandidate | None:
    sign_index = HODA_CAKRA.get(syllable)
    if sign_index is None:
        return None

    moon_eval = evaluate_position(relative_house(sign_index, moon_sign))
    lagna_eval = evaluate_position(relative_house(sign_index, lagna_sign))

    total = moon_eval.score + lagna_eval.score
    if moon_eval.quality == "bad":
        total = MOON_DUSTHANA_SCORE

    return HodaCandidate(
        syllable=syllable,
        sign_index=sign_index,
        sign_name=sign_name(sign_index),
        moon_status=moon_eval,
        lagna_status=lagna_eval,
        total_score=total,
    )


@require_feature("hoda_chakra")
def analyze_hoda_chakra(planet: Planet | str, dataset: PlanetaryDataset) -> list[HodaCandidate]:
    """Score the planet's syllables against Moon and Lagna, best first.

    Returns [] when Moon or Lagna is missing or the planet has no sounds.
    """
    moon = dataset.moon
    lagna = dataset.lagna
    if moon is None or lagna is None:
        logger.info("Hoda Chakra skipped: Moon or Lagna missing")
        return []

    syllables = get_hoda_keys(planet)
    results = []
    for syllable in syllables:
        candidate = score_syllable(syllable, moon.sign_index, lagna.sign_index)
        if candidate is not None:
            results.append(candidate)

    results.sort(key=lambda c: c.total_score, reverse=True)
    return results
