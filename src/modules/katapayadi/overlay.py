"""
Sign-by-sign overlay of a chart and Katapayadi results.

Boxes are keyed by 1-based sign number, matching the Katapayadi rashi.
"""

from collections.abc import Iterable

from constants.relationships import LAGNA, SIGNS
from refactor.core_types import ChartPoint, PlanetaryDataset

from .session import KatapayadiEntry


def marker_label(name: str) -> str:
    """Two-letter chart label; the Lagna is shown as AS."""
    return "AS" if name == LAGNA else name[:2]


def chart_overlay(
    entries: Iterable[KatapayadiEntry],
    dataset: PlanetaryDataset | None = None,
    special_points: Iterable[ChartPoint] = (),
    selected_id: int | None = None,
) -> dict[int, dict]:
    """Planets, special points and Katapayadi entries per sign.

    With selected_id only that entry is placed, and it is highlighted.
    """
    boxes = {
        i + 1: {"sign": SIGNS[i], "planets": [], "special_points": [], "entries": []}
        for i in range(12)
    }

    if dataset is not None:
        for p in dataset:
            boxes[p.sign_index + 1]["planets"].append(marker_label(p.name))

    for point in special_points:
        boxes[point.sign_index + 1]["special_points"].append(point.name)

    for e in entries:
        if selected_id is not None and e.entry_id != selected_id:
            continue
        boxes[e.rashi]["entries"].append(
            {
                "entry_id": e.entry_id,
                "text": e.original_text,
                "highlighted": selected_id is not None,
            }
        )

    return boxes
