"""
Shadbala (Six-fold strength) approximation for name selection.
Based on Brihat Parasara Hora Shastra Chapter 27-28.

Only three components are used: dignity (Uccha/Swakshetra),
house placement (Kendradi) and directional strength (Dig Bala).
The strongest planet gives the first sound of a human name;
the weakest is used for avatar names.
"""

from dataclasses import dataclass

from app.core.logging import get_engine_logger
from config.feature_flags import require_feature
from constants.relationships import (
    DEBILITATION_SIGNS,
    DIG_BALA_HOUSES,
    DUSTHANA_HOUSES,
    EXALTATION_SIGNS,
    KENDRA_HOUSES,
    OWN_SIGNS,
    TRIKONA_HOUSES,
    Planet,
)
from constants.sounds import SOUND_GROUPS
from refactor.core_types import PlanetaryDataset, PlanetPosition
from refactor.numerics import relative_house

logger = get_engine_logger("shadbala")

# Dignity strength (Sthana Bala approximation)
EXALTED_STRENGTH = 60
DEBILITATED_STRENGTH = 0
OWN_SIGN_STRENGTH = 30
BASELINE_STRENGTH = 15  # neutral or friendly sign

# House placement
KENDRA_BONUS = 20
TRIKONA_BONUS = 10
DUSTHANA_PENALTY = -10

# Dig Bala
DIG_BALA_BONUS = 20


@dataclass(frozen=True)
class StrengthScore:
    """Strength of one planet with its sound group."""

    planet: str
    score: int
    sound_group: str
    sounds: str
    tag: str = ""  # "Strongest" / "Weakest"

    def to_dict(self) -> dict:
        return {
            "planet": self.planet,
            "score": self.score,
            "sound_group": self.sound_group,
            "sounds": self.sounds,
            "tag": self.tag,
        }


@dataclass(frozen=True)
class ShadbalaRanking:
    """Planets sorted by descending strength."""

    all_scores: tuple[StrengthScore, ...]

    @property
    def strongest(self) -> StrengthScore | None:
        """Human rule: the name starts with the strongest planet's sound."""
        return self.all_scores[0] if self.all_scores else None

    @property
    def weakest(self) -> StrengthScore | None:
        """Avatar rule."""
        return self.all_scores[-1] if self.all_scores else None

    def to_dict(self) -> dict:
        return {
            "strongest": self.strongest.to_dict() if self.strongest else None,
            "weakest": self.weakest.to_dict() if self.weakest else None,
            "all_scores": [s.to_dict() for s in self.all_scores],
        }


def dignity_strength(planet: Planet, sign_index: int) -> int:
    """Exalted 60, debilitated 0, own sign 30, otherwise 15."""
    sign_number = sign_index + 1
    if EXALTATION_SIGNS[planet] == sign_number:
        return EXALTED_STRENGTH
    if DEBILITATION_SIGNS[planet] == sign_number:
        return DEBILITATED_STRENGTH
    if sign_number in OWN_SIGNS[planet]:
        return OWN_SIGN_STRENGTH
    return BASELINE_STRENGTH


def house_strength(house: int) -> int:
    """Kendra +20, Trikona +10, Dusthana -10."""
    if house in KENDRA_HOUSES:
        return KENDRA_BONUS
    if house in TRIKONA_HOUSES:
        return TRIKONA_BONUS
    if house in DUSTHANA_HOUSES:
        return DUSTHANA_PENALTY
    return 0


def dig_bala(planet: Planet, house: int) -> int:
    """Directional strength, added on top of the house term."""
    return DIG_BALA_BONUS if DIG_BALA_HOUSES.get(planet) == house else 0


def calculate_strength(position: PlanetPosition, lagna: PlanetPosition | None) -> int:
    """Approximate Shadbala of one planet, floored at 0.

    Without a Lagna only the dignity term applies.
    """
    planet = position.planet
    score = dignity_strength(planet, position.sign_index)

    if lagna is not None:
        house = relative_house(position.sign_index, lagna.sign_index)
        score += house_strength(house)
        score += dig_bala(planet, house)

    return max(0, score)


def get_sound_group(planet: Planet) -> tuple[str, str]:
    return SOUND_GROUPS[planet]


@require_feature("shadbala")
def rank_planets(dataset: PlanetaryDataset) -> ShadbalaRanking:
    """Score the nine planets and sort strongest first.

    Ties keep dataset order.
    """
    lagna = dataset.lagna
    if lagna is None:
        logger.debug("No Lagna in dataset, scoring dignity only")

    scored = []
    for p in dataset:
        planet = p.planet
        if planet is None:
            continue
        group, sounds = get_sound_group(planet)
        scored.append((calculate_strength(p, lagna), p.name, group, sounds))

    scored.sort(key=lambda s: s[0], reverse=True)

    last = len(scored) - 1
    ranking = []
    for i, (score, name, group, sounds) in enumerate(scored):
        tag = "Strongest" if i == 0 else "Weakest" if i == last else ""
        ranking.append(
            StrengthScore(planet=name, score=score, sound_group=group, sounds=sounds, tag=tag)
        )

    return ShadbalaRanking(all_scores=tuple(ranking))
