"""
Baladi Avasthas (age-based planetary states).
Based on Brihat Parasara Hora Shastra.

Each sign is divided into five 6° bands. In odd signs the bands run
Bala -> Mrita, in even signs Mrita -> Bala.
"""

from dataclasses import dataclass

from constants.relationships import LAGNA, PRANAPADA, Planet
from constants.sounds import AVASTHA_VOWELS, BALADI_EVEN_SIGN, BALADI_ODD_SIGN
from refactor.core_types import PlanetaryDataset, PlanetPosition
from refactor.numerics import is_odd_sign

BAND_WIDTH = 6.0

NODES = (Planet.RAHU.value, Planet.KETU.value)


@dataclass(frozen=True)
class BaladiState:
    name: str
    degree: float
    sign_index: int
    state: str
    vowels: tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "degree": round(self.degree, 4),
            "sign_index": self.sign_index,
            "state": self.state,
            "vowels": list(self.vowels),
        }


def calculate_baladi(longitude: float, sign_index: int) -> str:
    """Calculate age-based state from position in sign."""
    sign_position = longitude % 30.0

    sequence = BALADI_ODD_SIGN if is_odd_sign(sign_index) else BALADI_EVEN_SIGN

    # Find which 6° segment (0-4)
    segment = int(sign_position / BAND_WIDTH)
    if segment >= 5:
        segment = 4

    return sequence[segment]


def baladi_state(position: PlanetPosition) -> BaladiState:
    state = calculate_baladi(position.sidereal_longitude, position.sign_index)
    return BaladiState(
        name=position.name,
        degree=position.degree_in_sign,
        sign_index=position.sign_index,
        state=state,
        vowels=AVASTHA_VOWELS[state],
    )


def compute_baladi_states(dataset: PlanetaryDataset) -> list[BaladiState]:
    """Baladi state of every body: the seven planets first, then the nodes."""
    planets = [p for p in dataset if p.name not in (LAGNA, PRANAPADA, *NODES)]
    nodes = [p for p in dataset if p.name in NODES]
    return [baladi_state(p) for p in planets + nodes]
