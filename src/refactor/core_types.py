#!/usr/bin/env python3
"""
Core data types shared by the naming engines.

A PlanetaryDataset is produced once per request by the ephemeris
collaborator and read, never modified, by every engine.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Iterable, Iterator

from constants.relationships import LAGNA, Planet

from .numerics import degree_in_sign, degrees_to_dms, sign_index_of

# ============================================================================
# PLANET POSITION
# ============================================================================


@dataclass(frozen=True)
class PlanetPosition:
    """Sidereal position of one body (or the Lagna) in the birth chart.

    sign_index is derived from the longitude; d9_index is supplied by
    the ephemeris collaborator.
    """

    name: str
    sidereal_longitude: float  # [0, 360)
    d9_index: int = 0  # Navamsa sign (0-11)
    is_retrograde: bool = False
    is_lagna: bool = False
    sign_index: int = field(init=False)

    def __post_init__(self) -> None:
        if not 0.0 <= self.sidereal_longitude < 360.0:
            raise ValueError(
                f"{self.name}: longitude must be in [0, 360), got {self.sidereal_longitude}"
            )
        if not 0 <= self.d9_index <= 11:
            raise ValueError(f"{self.name}: d9_index must be 0-11, got {self.d9_index}")
        object.__setattr__(self, "sign_index", sign_index_of(self.sidereal_longitude))
        if self.name == LAGNA and not self.is_lagna:
            object.__setattr__(self, "is_lagna", True)

    @property
    def planet(self) -> Planet | None:
        return Planet.from_name(self.name)

    @property
    def degree_in_sign(self) -> float:
        return degree_in_sign(self.sidereal_longitude)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["dms"] = degrees_to_dms(self.sidereal_longitude)
        return data


# ============================================================================
# DATASET
# ============================================================================


@dataclass(frozen=True)
class PlanetaryDataset:
    """Immutable, ordered set of positions for one calculation request."""

    positions: tuple[PlanetPosition, ...]
    lagna_longitude: float | None = None
    ayanamsa: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "positions", tuple(self.positions))

    @classmethod
    def from_positions(
        cls,
        positions: Iterable[PlanetPosition],
        ayanamsa: float | None = None,
    ) -> "PlanetaryDataset":
        positions = tuple(positions)
        lagna = next((p for p in positions if p.is_lagna), None)
        return cls(
            positions=positions,
            lagna_longitude=lagna.sidereal_longitude if lagna else None,
            ayanamsa=ayanamsa,
        )

    def __iter__(self) -> Iterator[PlanetPosition]:
        return iter(self.positions)

    def __len__(self) -> int:
        return len(self.positions)

    def find(self, name: str) -> PlanetPosition | None:
        """First position with the given name, or None."""
        for p in self.positions:
            if p.name == name:
                return p
        return None

    @property
    def lagna(self) -> PlanetPosition | None:
        return self.find(LAGNA)

    @property
    def moon(self) -> PlanetPosition | None:
        return self.find(Planet.MOON.value)

    @property
    def sun(self) -> PlanetPosition | None:
        return self.find(Planet.SUN.value)

    def to_dict(self) -> dict[str, Any]:
        return {
            "positions": [p.to_dict() for p in self.positions],
            "lagna_longitude": self.lagna_longitude,
            "ayanamsa": self.ayanamsa,
        }


# ============================================================================
# DERIVED CHART POINT
# ============================================================================


@dataclass(frozen=True)
class ChartPoint:
    """Derived point (AL, VL, HL, GL). Has a sign but no longitude."""

    name: str
    sign_index: int

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "sign_index": self.sign_index}
