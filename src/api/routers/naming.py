"""
Naming API Router

Birth-chart based name analysis: Atmakaraka and Ista-Devata, planetary
strength, Hoda Chakra sounds, special lagnas, Svara checks and
Katapayadi numerals. Charts arrive precomputed; each request gets its
own context and Katapayadi log.
"""

import time

from fastapi import APIRouter, HTTPException

from app.core.logging import get_api_logger
from app.models.base import BaseResponse, MetaInfo
from app.models.requests import HodaRequest, KatapayadiRequest, NamingRequest
from app.models.responses import KatapayadiResponse
from config.feature_flags import is_feature_enabled, require_feature
from modules.katapayadi.engine import process_text
from modules.katapayadi.overlay import chart_overlay
from modules.katapayadi.session import KatapayadiSession
from modules.naming.hoda_chakra import analyze_hoda_chakra
from modules.naming.pipeline import (
    katapayadi_overlay,
    record_katapayadi,
    run_naming_analysis,
)
from modules.naming.session import NamingContext

logger = get_api_logger("naming")

router = APIRouter(prefix="/api/v1", tags=["Naming"])


def _meta(started: float) -> MetaInfo:
    return MetaInfo(compute_time_ms=round((time.perf_counter() - started) * 1000, 3))


@router.post("/naming/analyze", response_model=BaseResponse, summary="Naming Analysis")
async def analyze(request: NamingRequest) -> BaseResponse:
    """
    Run every enabled naming engine against the chart.

    Panels for disabled engines, or engines missing a reference point
    (Moon, Lagna, birth time), come back as null.
    """
    started = time.perf_counter()
    ctx = NamingContext(
        dataset=request.to_dataset(),
        birth_utc=request.birth_time,
        latitude=request.latitude,
        longitude=request.longitude,
        tz_offset_hours=request.tz_offset_hours,
    )

    analysis = run_naming_analysis(ctx, name=request.name, hoda_planet=request.hoda_planet)
    data = analysis.to_dict()

    if request.katapayadi_texts and is_feature_enabled("katapayadi"):
        try:
            entries = record_katapayadi(ctx, request.katapayadi_texts)
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e)) from e
        data["katapayadi"] = [e.to_dict() for e in entries]
        data["overlay"] = katapayadi_overlay(ctx, special_points=analysis.special_points)

    logger.info(
        "Naming analysis served",
        extra={"positions": len(ctx.dataset), "katapayadi": len(ctx.katapayadi)},
    )
    return BaseResponse(data=data, meta=_meta(started))


@router.post(
    "/naming/hoda-chakra", response_model=BaseResponse, summary="Hoda Chakra Sounds"
)
@require_feature("hoda_chakra")
async def hoda_chakra(request: HodaRequest) -> BaseResponse:
    """Score a planet's syllables from Moon and Lagna, best first."""
    started = time.perf_counter()
    candidates = analyze_hoda_chakra(request.planet, request.to_dataset())
    return BaseResponse(
        data={
            "planet": request.planet,
            "candidates": [c.to_dict() for c in candidates],
            "recommended": [c.syllable for c in candidates if c.is_recommended],
        },
        meta=_meta(started),
    )


@router.post("/katapayadi", response_model=KatapayadiResponse, summary="Katapayadi")
@require_feature("katapayadi")
async def katapayadi(request: KatapayadiRequest) -> KatapayadiResponse:
    """
    Convert texts to Katapayadi numerals in a fresh session.

    Entries are numbered from 1 in request order; filter_id narrows the
    returned entries and overlay to one of them.
    """
    started = time.perf_counter()
    session = KatapayadiSession()
    for text in request.texts:
        process_text(text, session)

    shown = session.filter(request.filter_id)
    if request.filter_id is not None and not shown:
        raise HTTPException(
            status_code=404, detail=f"No entry with id {request.filter_id}"
        )

    return KatapayadiResponse(
        data={"overlay": chart_overlay(session.entries, selected_id=request.filter_id)},
        entries=[e.to_dict() for e in shown],
        by_rashi={
            rashi: [e.entry_id for e in group]
            for rashi, group in sorted(session.by_rashi().items())
        },
        meta=_meta(started),
    )
