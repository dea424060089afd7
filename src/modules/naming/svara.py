"""
Svara suite: vowel-based checks on a candidate name.

1. Svara Cakra - sign of the first vowel, judged from Moon and Lagna
2. Baladi Avastha - which planets the first vowel activates
3. Panca Svara Dasa - 60-year vowel timing cycle
4. Lagana - syllable count and the sign nature it activates
"""

import re
import unicodedata
from dataclasses import dataclass

from app.core.logging import get_engine_logger
from config.feature_flags import require_feature
from constants.relationships import (
    DUSTHANA_HOUSES,
    KENDRA_HOUSES,
    TRIKONA_HOUSES,
    sign_name,
)
from constants.sounds import (
    DASA_YEARS,
    LAGANA_NATURE_SIGNS,
    PANCA_SVARA_GROUPS,
    VOWEL_CHARS,
    VOWEL_SIGNS,
)
from modules.jaimini.chara_karakas import get_atmakaraka
from modules.vedic_strength.avasthas import BaladiState, compute_baladi_states
from refactor.core_types import PlanetaryDataset
from refactor.numerics import relative_house

logger = get_engine_logger("svara")

_VOWEL_RE = re.compile(f"[{VOWEL_CHARS}]", re.IGNORECASE)
_VOWEL_GROUP_RE = re.compile(f"[{VOWEL_CHARS}]+")
_NON_LETTER_RE = re.compile("[^a-zāīūṛṝḷ]")

DEFAULT_VOWEL = "a"

# Vowel -> Panca Svara group index
_DASA_GROUP = {
    "a": 0, "ā": 0,
    "i": 1, "ī": 1,
    "u": 2, "ū": 2,
    "e": 3, "ai": 3,
    "o": 4, "au": 4,
}  # fmt: skip

EXCELLENT = "Excellent"
MODERATE = "Moderate"
LOW_SUPPORT = "Low support, foreign success likely"

_PROGNOSIS_TEXT = {
    EXCELLENT: "Excellent. Full support in birth country.",
    MODERATE: "Moderate support.",
    LOW_SUPPORT: "Low support. May seek success in foreign lands.",
}


def _nfc(name: str) -> str:
    return unicodedata.normalize("NFC", name or "")


def get_first_vowel(name: str) -> str:
    """First vowel of the name, lowercased; "a" if there is none."""
    match = _VOWEL_RE.search(_nfc(name))
    return match.group(0).lower() if match else DEFAULT_VOWEL


def count_syllables(name: str) -> int:
    """Number of vowel groups, plus one if the name ends on a consonant.

    A final consonant carries an unwritten vowel sound.
    """
    if not name:
        return 0
    clean = _NON_LETTER_RE.sub("", _nfc(name).lower())
    count = len(_VOWEL_GROUP_RE.findall(clean))
    if not _VOWEL_RE.match(clean[-1:]):
        count += 1
    return count


# --- SVARA CAKRA ---


@dataclass(frozen=True)
class SvaraResult:
    vowel: str
    sign_index: int
    sign_name: str
    moon_house: int
    moon_status: str
    lagna_house: int

    def to_dict(self) -> dict:
        return {
            "vowel": self.vowel,
            "sign_index": self.sign_index,
            "sign_name": self.sign_name,
            "moon_analysis": {
                "house": self.moon_house,
                "status": self.moon_status,
                "description": (
                    f"Placed in {self.moon_house}th from Moon. "
                    "Refers to Health & Sustenance (Rāyi)."
                ),
            },
            "lagna_analysis": {
                "house": self.lagna_house,
                "description": (
                    f"Placed in {self.lagna_house}th from Lagna. "
                    "Needs to be kept 'clean' (Viṣṇu sthāna)."
                ),
            },
        }


def moon_svara_status(house: int) -> str:
    if house in KENDRA_HOUSES:
        return "Excellent (Kendra)"
    if house in TRIKONA_HOUSES:
        return "Good (Trikona)"
    if house in DUSTHANA_HOUSES:
        return "Challenging (Dusthana)"
    return "Neutral"


def analyze_svara(name: str, dataset: PlanetaryDataset) -> SvaraResult | None:
    """Sign of the first vowel and its house from Moon and Lagna."""
    vowel = get_first_vowel(name)
    sign_index = VOWEL_SIGNS.get(vowel, 0)

    moon = dataset.moon
    lagna = dataset.lagna
    if moon is None or lagna is None:
        logger.info("Svara skipped: Moon or Lagna missing")
        return None

    moon_house = relative_house(sign_index, moon.sign_index)
    return SvaraResult(
        vowel=vowel,
        sign_index=sign_index,
        sign_name=sign_name(sign_index),
        moon_house=moon_house,
        moon_status=moon_svara_status(moon_house),
        lagna_house=relative_house(sign_index, lagna.sign_index),
    )


# --- BALADI AVASTHA ---


@dataclass(frozen=True)
class BaladiResult:
    current_vowel: str
    activated_planets: tuple[str, ...]
    recommendation: dict | None
    all_states: tuple[BaladiState, ...]

    def to_dict(self) -> dict:
        return {
            "current_vowel": self.current_vowel,
            "activated_planets": list(self.activated_planets),
            "recommendation": self.recommendation,
            "all_states": [s.to_dict() for s in self.all_states],
        }


def _activates(vowel: str, state: BaladiState) -> bool:
    return any(vowel.startswith(v) for v in state.vowels)


def analyze_baladi_avastha(name: str, dataset: PlanetaryDataset) -> BaladiResult:
    """Planets whose Avastha vowels match the name's first vowel.

    Also recommends the vowels of the Atmakaraka's state.
    """
    vowel = get_first_vowel(name)
    states = compute_baladi_states(dataset)
    activated = tuple(s.name for s in states if _activates(vowel, s))

    recommendation = None
    ak = get_atmakaraka(dataset).planet
    if ak is not None:
        ak_state = next((s for s in states if s.name == ak.name), None)
        if ak_state is not None:
            recommendation = {
                "planet": ak.name,
                "state": ak_state.state,
                "suggested_vowels": ", ".join(ak_state.vowels),
            }

    return BaladiResult(
        current_vowel=vowel,
        activated_planets=activated,
        recommendation=recommendation,
        all_states=tuple(states),
    )


# --- PANCA SVARA DASA ---


@dataclass(frozen=True)
class DasaPeriod:
    vowel: str
    start_age: int
    end_age: int
    year_start: int
    year_end: int

    def to_dict(self) -> dict:
        return {
            "vowel": self.vowel,
            "start_age": self.start_age,
            "end_age": self.end_age,
            "year_start": self.year_start,
            "year_end": self.year_end,
        }


def analyze_panca_svara_dasa(name: str, birth_year: int) -> list[DasaPeriod]:
    """Five 12-year vowel periods starting from the name's vowel group."""
    start = _DASA_GROUP.get(get_first_vowel(name), 0)

    periods = []
    age = 0
    for i in range(len(PANCA_SVARA_GROUPS)):
        group = PANCA_SVARA_GROUPS[(start + i) % len(PANCA_SVARA_GROUPS)]
        end_age = age + DASA_YEARS
        periods.append(
            DasaPeriod(
                vowel=group,
                start_age=age,
                end_age=end_age,
                year_start=birth_year + age,
                year_end=birth_year + end_age,
            )
        )
        age = end_age
    return periods


# --- LAGANA ---


@dataclass(frozen=True)
class LaganaResult:
    syllable_count: int
    nature: str
    activated_houses: tuple[int, ...]
    score: int
    prognosis: str

    @property
    def description(self) -> str:
        return _PROGNOSIS_TEXT[self.prognosis]

    def to_dict(self) -> dict:
        return {
            "syllable_count": self.syllable_count,
            "nature": self.nature,
            "activated_houses": list(self.activated_houses),
            "score": self.score,
            "prognosis": self.prognosis,
            "description": self.description,
        }


def syllable_nature(count: int) -> str:
    """1 or 4 syllables Fixed; 2 or 5 Movable; any other count Dual."""
    if count in (1, 4):
        return "Fixed (Sthira)"
    if count in (2, 5):
        return "Movable (Cara)"
    return "Dual (Dvisvabhava)"


def lagana_prognosis(score: int) -> str:
    if score == 4:
        return EXCELLENT
    if score >= 2:
        return MODERATE
    return LOW_SUPPORT


def analyze_lagana(name: str, dataset: PlanetaryDataset) -> LaganaResult | None:
    """Houses from the Lagna activated by the name's syllable count."""
    lagna = dataset.lagna
    if lagna is None:
        logger.info("Lagana skipped: no Lagna")
        return None

    count = count_syllables(name)
    nature = syllable_nature(count)
    houses = sorted(relative_house(s, lagna.sign_index) for s in LAGANA_NATURE_SIGNS[nature])
    score = sum(1 for h in houses if h in KENDRA_HOUSES)

    return LaganaResult(
        syllable_count=count,
        nature=nature,
        activated_houses=tuple(houses),
        score=score,
        prognosis=lagana_prognosis(score),
    )


# --- SUITE ---


@dataclass(frozen=True)
class SvaraSuiteResult:
    svara: SvaraResult | None
    baladi: BaladiResult
    dasa: tuple[DasaPeriod, ...]
    lagana: LaganaResult | None

    def to_dict(self) -> dict:
        return {
            "svara": self.svara.to_dict() if self.svara else None,
            "baladi": self.baladi.to_dict(),
            "dasa": [d.to_dict() for d in self.dasa],
            "lagana": self.lagana.to_dict() if self.lagana else None,
        }


@require_feature("svara")
def analyze_svara_suite(
    name: str, dataset: PlanetaryDataset, birth_year: int
) -> SvaraSuiteResult:
    return SvaraSuiteResult(
        svara=analyze_svara(name, dataset),
        baladi=analyze_baladi_avastha(name, dataset),
        dasa=tuple(analyze_panca_svara_dasa(name, birth_year)),
        lagana=analyze_lagana(name, dataset),
    )
