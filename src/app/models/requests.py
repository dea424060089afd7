#!/usr/bin/env python3
"""
API request models using Pydantic V2.

Chart positions arrive already computed (sidereal longitudes and D9
signs); the service never runs a planetary ephemeris itself.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.config import (
    DEFAULT_TZ_OFFSET_HOURS,
    MAX_KATAPAYADI_TEXT_LENGTH,
    MAX_KATAPAYADI_TEXTS,
)
from constants.relationships import LAGNA, PRANAPADA, Planet
from refactor.core_types import PlanetaryDataset, PlanetPosition

from .base import Latitude, Longitude, SiderealLongitude, TzOffset, UTCDateTime

_KNOWN_BODIES = {p.value for p in Planet} | {LAGNA, PRANAPADA}

# Bounds the digit sum returned as a JSON integer
KatapayadiText = Annotated[str, Field(max_length=MAX_KATAPAYADI_TEXT_LENGTH)]

_EXAMPLE_POSITIONS = [
    {"name": "Lagna", "longitude": 5.0, "d9_index": 1},
    {"name": "Sun", "longitude": 40.0, "d9_index": 0},
    {"name": "Moon", "longitude": 95.0, "d9_index": 9},
    {"name": "Mars", "longitude": 100.0, "d9_index": 3},
]


class PlanetPositionIn(BaseModel):
    """One body of the birth chart"""

    name: str = Field(..., description="Planet name, 'Lagna' or 'Pranapada'")
    longitude: SiderealLongitude = Field(
        ..., description="Sidereal longitude in degrees [0, 360)"
    )
    d9_index: int = Field(default=0, ge=0, le=11, description="Navamsa sign (0-11)")
    is_retrograde: bool = Field(default=False)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate body name is one the engines know"""
        if v not in _KNOWN_BODIES:
            raise ValueError(f"Unknown body '{v}'")
        return v

    def to_position(self) -> PlanetPosition:
        return PlanetPosition(
            name=self.name,
            sidereal_longitude=self.longitude,
            d9_index=self.d9_index,
            is_retrograde=self.is_retrograde,
        )


class ChartRequest(BaseModel):
    """Request carrying a precomputed sidereal chart"""

    model_config = ConfigDict(str_strip_whitespace=True)

    positions: list[PlanetPositionIn] = Field(..., min_length=1)
    ayanamsa: float | None = Field(default=None, description="Ayanamsa used, degrees")

    @field_validator("positions")
    @classmethod
    def validate_unique(cls, v: list[PlanetPositionIn]) -> list[PlanetPositionIn]:
        """Each body may appear only once"""
        names = [p.name for p in v]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate bodies: {', '.join(duplicates)}")
        return v

    def to_dataset(self) -> PlanetaryDataset:
        return PlanetaryDataset.from_positions(
            (p.to_position() for p in self.positions), ayanamsa=self.ayanamsa
        )


class NamingRequest(ChartRequest):
    """Full naming analysis for a chart"""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "positions": _EXAMPLE_POSITIONS,
                "name": "Rama",
                "birth_time": "1990-05-15T04:30:00Z",
                "latitude": 28.6139,
                "longitude": 77.2090,
                "tz_offset_hours": 5.5,
            }
        },
    )

    name: str | None = Field(default=None, description="Candidate name to check")
    birth_time: UTCDateTime | None = Field(default=None, description="Birth time (UTC)")
    latitude: Latitude | None = Field(default=None)
    longitude: Longitude | None = Field(default=None)
    tz_offset_hours: TzOffset = Field(
        default=DEFAULT_TZ_OFFSET_HOURS, description="Local clock offset east of UTC"
    )
    hoda_planet: str | None = Field(
        default=None, description="Planet for Hoda Chakra; strongest planet if omitted"
    )
    katapayadi_texts: list[KatapayadiText] = Field(
        default_factory=list, max_length=MAX_KATAPAYADI_TEXTS
    )


class HodaRequest(ChartRequest):
    """Hoda Chakra sounds for one planet"""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {"planet": "Mars", "positions": _EXAMPLE_POSITIONS}
        },
    )

    planet: str = Field(..., description="Planet whose sounds are scored")

    @field_validator("planet")
    @classmethod
    def validate_planet(cls, v: str) -> str:
        if Planet.from_name(v) is None:
            raise ValueError(f"Unknown planet '{v}'")
        return v


class KatapayadiRequest(BaseModel):
    """Katapayadi numerals for a batch of texts"""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={"example": {"texts": ["rama", "राम"], "filter_id": None}},
    )

    texts: list[KatapayadiText] = Field(..., min_length=1, max_length=MAX_KATAPAYADI_TEXTS)
    filter_id: int | None = Field(default=None, ge=1, description="Show one entry only")

    @field_validator("texts")
    @classmethod
    def validate_texts(cls, v: list[str]) -> list[str]:
        """Reject blank entries"""
        if any(not t.strip() for t in v):
            raise ValueError("Texts must not be blank")
        return v


__all__ = [
    "PlanetPositionIn",
    "ChartRequest",
    "NamingRequest",
    "HodaRequest",
    "KatapayadiRequest",
]
