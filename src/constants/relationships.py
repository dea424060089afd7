"""
Sign, lordship and dignity reference tables.
Acyutananda naming tradition (Visti Larsen), Parasara dignities.

All tables are built once at import and exposed read-only.
"""

from enum import Enum
from types import MappingProxyType


class Planet(str, Enum):
    """The nine classical bodies (Navagraha)."""

    SUN = "Sun"
    MOON = "Moon"
    MARS = "Mars"
    MERCURY = "Mercury"
    JUPITER = "Jupiter"
    VENUS = "Venus"
    SATURN = "Saturn"
    RAHU = "Rahu"
    KETU = "Ketu"

    @classmethod
    def from_name(cls, name: str) -> "Planet | None":
        """Resolve a display name ("Jupiter") to a Planet, or None for points."""
        try:
            return cls(name)
        except ValueError:
            return None


# Non-planetary points that may appear in a dataset
LAGNA = "Lagna"
PRANAPADA = "Pranapada"

SIGNS: tuple[str, ...] = (
    "Aries",
    "Taurus",
    "Gemini",
    "Cancer",
    "Leo",
    "Virgo",
    "Libra",
    "Scorpio",
    "Sagittarius",
    "Capricorn",
    "Aquarius",
    "Pisces",
)

# Planet index order used by SIGN_LORDS
PLANET_LIST: tuple[Planet, ...] = tuple(Planet)

# Sign lordship, 0-based sign index -> index into PLANET_LIST
# Used when a house is empty
SIGN_LORDS: tuple[int, ...] = (2, 5, 3, 1, 0, 3, 5, 2, 4, 6, 6, 4)

# Exaltation signs (1-based: Aries=1, Pisces=12)
EXALTATION_SIGNS = MappingProxyType(
    {
        Planet.SUN: 1,
        Planet.MOON: 2,
        Planet.MARS: 10,
        Planet.MERCURY: 6,
        Planet.JUPITER: 4,
        Planet.VENUS: 12,
        Planet.SATURN: 7,
        Planet.RAHU: 2,
        Planet.KETU: 8,
    }
)

# Debilitation signs (1-based)
DEBILITATION_SIGNS = MappingProxyType(
    {
        Planet.SUN: 7,
        Planet.MOON: 8,
        Planet.MARS: 4,
        Planet.MERCURY: 12,
        Planet.JUPITER: 10,
        Planet.VENUS: 6,
        Planet.SATURN: 1,
        Planet.RAHU: 8,
        Planet.KETU: 2,
    }
)

# Own signs (1-based)
OWN_SIGNS = MappingProxyType(
    {
        Planet.SUN: frozenset({5}),
        Planet.MOON: frozenset({4}),
        Planet.MARS: frozenset({1, 8}),
        Planet.MERCURY: frozenset({3, 6}),
        Planet.JUPITER: frozenset({9, 12}),
        Planet.VENUS: frozenset({2, 7}),
        Planet.SATURN: frozenset({10, 11}),
        Planet.RAHU: frozenset({11}),  # co-lord of Aquarius
        Planet.KETU: frozenset({8}),  # co-lord of Scorpio
    }
)

# House groups (1-based houses)
KENDRA_HOUSES = frozenset({1, 4, 7, 10})
TRIKONA_HOUSES = frozenset({5, 9})
DUSTHANA_HOUSES = frozenset({6, 8, 12})

# Dig Bala - house where each planet gains directional strength
DIG_BALA_HOUSES = MappingProxyType(
    {
        Planet.SUN: 10,  # South
        Planet.MARS: 10,
        Planet.MOON: 4,  # North
        Planet.VENUS: 4,
        Planet.SATURN: 7,  # West
        Planet.MERCURY: 1,  # East
        Planet.JUPITER: 1,
    }
)


def sign_lord(sign_index: int) -> Planet:
    """Lord of a 0-based sign index."""
    return PLANET_LIST[SIGN_LORDS[sign_index % 12]]


def sign_name(sign_index: int) -> str:
    return SIGNS[sign_index % 12]
