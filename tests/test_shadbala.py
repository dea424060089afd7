from __future__ import annotations

import pytest

from constants.relationships import Planet
from modules.vedic_strength.shadbala import (
    calculate_strength,
    dignity_strength,
    rank_planets,
)
from refactor.core_types import PlanetPosition


def test_dignity_terms():
    assert dignity_strength(Planet.SUN, 0) == 60  # exalted in Aries
    assert dignity_strength(Planet.SATURN, 0) == 0  # debilitated in Aries
    assert dignity_strength(Planet.MOON, 3) == 30  # own sign Cancer
    assert dignity_strength(Planet.MARS, 2) == 15


def test_without_lagna_only_dignity_counts():
    assert calculate_strength(PlanetPosition("Sun", 10.0), None) == 60


def test_kendra_and_dig_bala_add_up():
    lagna = PlanetPosition("Lagna", 5.0)
    # Moon in own Cancer, 4th house, with Dig Bala in the 4th
    assert calculate_strength(PlanetPosition("Moon", 95.0), lagna) == 70


def test_score_is_floored_at_zero():
    lagna = PlanetPosition("Lagna", 35.0)  # Taurus
    sun_in_libra = PlanetPosition("Sun", 190.0)  # debilitated, 6th house
    assert calculate_strength(sun_in_libra, lagna) == 0


def test_ranking_order_and_tags(sample_dataset):
    ranking = rank_planets(sample_dataset)
    names = [s.planet for s in ranking.all_scores]
    assert "Lagna" not in names
    assert len(names) == 9
    assert ranking.strongest.planet == "Moon"
    assert ranking.strongest.score == 70
    assert ranking.strongest.tag == "Strongest"
    # Sun, Mercury and Rahu tie at 15; the last of them is weakest
    assert ranking.weakest.planet == "Rahu"
    assert ranking.weakest.tag == "Weakest"
    scores = [s.score for s in ranking.all_scores]
    assert scores == sorted(scores, reverse=True)
    assert all(s >= 0 for s in scores)


def test_ranking_is_repeatable(sample_dataset):
    assert rank_planets(sample_dataset) == rank_planets(sample_dataset)


def test_ranking_carries_sound_groups(sample_dataset):
    top = rank_planets(sample_dataset).strongest
    assert top.sound_group == "Semi-vowels & Sibilants"
    assert "ya" in top.sounds


def test_ranking_empty_dataset(dataset_factory):
    ranking = rank_planets(dataset_factory(("Lagna", 5.0)))
    assert ranking.all_scores == ()
    assert ranking.strongest is None
    assert ranking.to_dict()["weakest"] is None


def test_disabled_feature_raises(monkeypatch, sample_dataset):
    from config.feature_flags import reset_feature_flags

    monkeypatch.setenv("ENABLE_SHADBALA", "false")
    reset_feature_flags()
    with pytest.raises(RuntimeError, match="Feature disabled"):
        rank_planets(sample_dataset)
