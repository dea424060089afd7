"""
Naming pipeline.

Runs the engines in order against one immutable dataset:
Ista-Devata -> Shadbala -> Hoda Chakra (strongest planet) ->
special lagnas -> Svara suite. Katapayadi runs on free text through
the same request context. A disabled or unanswerable panel is None.
"""

from dataclasses import dataclass

from app.core.logging import get_engine_logger
from config.feature_flags import is_feature_enabled
from modules.jaimini.chara_karakas import calculate_chara_karakas, get_atmakaraka
from modules.jaimini.ista_devata import IstaDevataResult, analyze_ista_devata
from modules.jaimini.special_lagnas import calculate_special_points
from modules.katapayadi.engine import process_text
from modules.katapayadi.overlay import chart_overlay
from modules.katapayadi.session import KatapayadiEntry
from modules.naming.hoda_chakra import HodaCandidate, analyze_hoda_chakra
from modules.naming.session import NamingContext
from modules.naming.svara import SvaraSuiteResult, analyze_svara_suite
from modules.vedic_strength.shadbala import ShadbalaRanking, rank_planets
from refactor.core_types import ChartPoint

logger = get_engine_logger("pipeline")


@dataclass(frozen=True)
class NamingAnalysis:
    atmakaraka: dict
    chara_karakas: dict
    ista_devata: IstaDevataResult | None
    shadbala: ShadbalaRanking | None
    hoda_planet: str | None
    hoda_chakra: tuple[HodaCandidate, ...] | None
    special_points: tuple[ChartPoint, ...] | None
    svara: SvaraSuiteResult | None

    def to_dict(self) -> dict:
        return {
            "atmakaraka": self.atmakaraka,
            "chara_karakas": self.chara_karakas,
            "ista_devata": self.ista_devata.to_dict() if self.ista_devata else None,
            "shadbala": self.shadbala.to_dict() if self.shadbala else None,
            "hoda_planet": self.hoda_planet,
            "hoda_chakra": (
                [c.to_dict() for c in self.hoda_chakra] if self.hoda_chakra is not None else None
            ),
            "special_points": (
                [p.to_dict() for p in self.special_points]
                if self.special_points is not None
                else None
            ),
            "svara": self.svara.to_dict() if self.svara else None,
        }


def run_naming_analysis(
    ctx: NamingContext, name: str | None = None, hoda_planet: str | None = None
) -> NamingAnalysis:
    """Run every enabled chart engine.

    hoda_planet defaults to the Shadbala strongest planet. The Svara
    suite needs both a name and a birth year.
    """
    dataset = ctx.dataset

    ista = analyze_ista_devata(dataset) if is_feature_enabled("ista_devata") else None
    ranking = rank_planets(dataset) if is_feature_enabled("shadbala") else None

    if hoda_planet is None and ranking is not None and ranking.strongest is not None:
        hoda_planet = ranking.strongest.planet

    hoda = None
    if hoda_planet and is_feature_enabled("hoda_chakra"):
        hoda = tuple(analyze_hoda_chakra(hoda_planet, dataset))

    points = None
    if is_feature_enabled("special_lagnas"):
        points = tuple(
            calculate_special_points(
                dataset, ctx.birth_utc, ctx.latitude, ctx.longitude, ctx.tz_offset_hours
            )
        )

    svara = None
    if name and ctx.birth_year is not None and is_feature_enabled("svara"):
        svara = analyze_svara_suite(name, dataset, ctx.birth_year)

    logger.debug("Naming analysis complete", extra={"positions": len(dataset)})
    return NamingAnalysis(
        atmakaraka=get_atmakaraka(dataset).to_dict(),
        chara_karakas=calculate_chara_karakas(dataset),
        ista_devata=ista,
        shadbala=ranking,
        hoda_planet=hoda_planet,
        hoda_chakra=hoda,
        special_points=points,
        svara=svara,
    )


def record_katapayadi(ctx: NamingContext, texts: list[str]) -> list[KatapayadiEntry]:
    """Process texts in order into the context's Katapayadi log."""
    return [process_text(t, ctx.katapayadi) for t in texts]


def katapayadi_overlay(
    ctx: NamingContext,
    special_points: tuple[ChartPoint, ...] | None = None,
    selected_id: int | None = None,
) -> dict[int, dict]:
    return chart_overlay(
        ctx.katapayadi.entries,
        dataset=ctx.dataset,
        special_points=special_points or (),
        selected_id=selected_id,
    )
