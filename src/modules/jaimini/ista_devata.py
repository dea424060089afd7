"""
Ista-Devata analysis.

The 12th sign from the Atmakaraka in the Navamsa (Jivanmuktamsa)
shows the deity, and therefore the planet, a name should invoke.
Acyutananda / Visti Larsen method.
"""

from dataclasses import dataclass

from app.core.logging import get_engine_logger
from config.feature_flags import require_feature
from constants.relationships import (
    DEBILITATION_SIGNS,
    LAGNA,
    PRANAPADA,
    Planet,
    sign_lord,
    sign_name,
)
from refactor.core_types import PlanetaryDataset, PlanetPosition

from .chara_karakas import get_atmakaraka

logger = get_engine_logger("ista_devata")


@dataclass(frozen=True)
class IstaOccupant:
    name: str
    is_debilitated: bool
    details: str

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "is_debilitated": self.is_debilitated,
            "details": self.details,
        }


@dataclass(frozen=True)
class IstaLord:
    """Sign lord standing in for an empty 12th sign."""

    name: str
    details: str
    is_lord: bool = True

    def to_dict(self) -> dict:
        return {"name": self.name, "is_lord": self.is_lord, "details": self.details}


@dataclass(frozen=True)
class IstaDevataResult:
    ak: PlanetPosition
    ak_degree: float
    ista_sign: str
    ista_sign_index: int
    candidates: tuple[IstaOccupant, ...] = ()
    lord: IstaLord | None = None

    def to_dict(self) -> dict:
        return {
            "ak": self.ak.name,
            "ak_degree": round(self.ak_degree, 4),
            "ista_sign": self.ista_sign,
            "ista_sign_index": self.ista_sign_index,
            "candidates": [c.to_dict() for c in self.candidates],
            "lord": self.lord.to_dict() if self.lord else None,
        }


def _is_debilitated_in(name: str, sign_index: int) -> bool:
    planet = Planet.from_name(name)
    return planet is not None and DEBILITATION_SIGNS.get(planet) == sign_index + 1


@require_feature("ista_devata")
def analyze_ista_devata(dataset: PlanetaryDataset) -> IstaDevataResult | None:
    """12th from the Atmakaraka in D9, its occupants and their dignity.

    Returns None when no Atmakaraka can be found.
    """
    ak_data = get_atmakaraka(dataset)
    if not ak_data.found:
        logger.info("Ista-Devata skipped: no Atmakaraka")
        return None

    ak = ak_data.planet
    ista_index = (ak.d9_index + 11) % 12
    ista_sign = sign_name(ista_index)

    occupants = [
        p
        for p in dataset
        if p.d9_index == ista_index and p.name not in (LAGNA, PRANAPADA)
    ]

    candidates = []
    for p in occupants:
        debilitated = _is_debilitated_in(p.name, ista_index)
        candidates.append(
            IstaOccupant(
                name=p.name,
                is_debilitated=debilitated,
                details="Debilitated (Requires 'picking up' name)" if debilitated else "Strong",
            )
        )

    lord = None
    if not candidates:
        lord = IstaLord(
            name=sign_lord(ista_index).value,
            details=f"Lord of {ista_sign} (House is Empty)",
        )

    return IstaDevataResult(
        ak=ak,
        ak_degree=ak_data.degree,
        ista_sign=ista_sign,
        ista_sign_index=ista_index,
        candidates=tuple(candidates),
        lord=lord,
    )
