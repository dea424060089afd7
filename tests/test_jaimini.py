from __future__ import annotations

import pytest

from modules.jaimini.chara_karakas import (
    calculate_chara_karakas,
    get_atmakaraka,
    karaka_degree,
)
from modules.jaimini.ista_devata import analyze_ista_devata
from refactor.core_types import PlanetPosition


def test_atmakaraka_is_highest_degree_in_sign(sample_dataset):
    ak = get_atmakaraka(sample_dataset)
    assert ak.found
    assert ak.planet.name == "Venus"
    assert ak.degree == pytest.approx(28.0)


def test_rahu_degree_counts_backwards():
    assert karaka_degree(PlanetPosition("Rahu", 30.5)) == pytest.approx(29.5)
    assert karaka_degree(PlanetPosition("Sun", 30.5)) == pytest.approx(0.5)


def test_rahu_can_be_atmakaraka(dataset_factory):
    ds = dataset_factory(("Sun", 10.0), ("Rahu", 30.5), ("Moon", 55.0))
    assert get_atmakaraka(ds).planet.name == "Rahu"


def test_ketu_lagna_and_pranapada_never_win(dataset_factory):
    ds = dataset_factory(
        ("Lagna", 29.9), ("Pranapada", 59.8), ("Ketu", 89.7), ("Mars", 12.0)
    )
    ak = get_atmakaraka(ds)
    assert ak.planet.name == "Mars"


def test_no_candidates_gives_sentinel(dataset_factory):
    ak = get_atmakaraka(dataset_factory(("Lagna", 10.0), ("Ketu", 20.0)))
    assert not ak.found
    assert ak.degree == -1.0
    assert ak.to_dict() == {"planet": None, "degree": -1.0}


def test_first_planet_wins_a_tie(dataset_factory):
    ds = dataset_factory(("Moon", 45.0), ("Sun", 15.0))
    assert get_atmakaraka(ds).planet.name == "Moon"


def test_chara_karakas(sample_dataset, dataset_factory):
    karakas = calculate_chara_karakas(sample_dataset)
    assert karakas["AK"] == "Venus"
    assert karakas["AmK"] == "Rahu"
    assert list(karakas) == ["AK", "AmK", "BK", "MK", "PK", "GK", "DK"]
    assert "Moon" not in karakas.values()
    assert calculate_chara_karakas(dataset_factory(("Sun", 10.0))) == {}


def test_ista_devata_occupant(sample_dataset):
    result = analyze_ista_devata(sample_dataset)
    # Venus in D9 Libra; 12th from it is Virgo, where Jupiter sits
    assert result.ak.name == "Venus"
    assert result.ista_sign == "Virgo"
    assert result.ista_sign_index == 5
    assert [c.name for c in result.candidates] == ["Jupiter"]
    assert result.candidates[0].is_debilitated is False
    assert result.lord is None


def test_ista_devata_is_repeatable(sample_dataset):
    assert analyze_ista_devata(sample_dataset) == analyze_ista_devata(sample_dataset)


def test_ista_devata_flags_debilitated_occupant(dataset_factory):
    ds = dataset_factory(("Sun", 25.0, 10), ("Jupiter", 10.0, 9))
    result = analyze_ista_devata(ds)
    assert result.ista_sign == "Capricorn"
    assert result.candidates[0].name == "Jupiter"
    assert result.candidates[0].is_debilitated is True
    assert "Debilitated" in result.candidates[0].details


def test_ista_devata_empty_sign_falls_back_to_lord(dataset_factory):
    ds = dataset_factory(("Lagna", 10.0, 11), ("Sun", 25.0, 0), ("Moon", 40.0, 3))
    result = analyze_ista_devata(ds)
    # Lagna sits in D9 Pisces but is never an occupant
    assert result.candidates == ()
    assert result.lord.name == "Jupiter"
    assert result.lord.is_lord is True
    assert result.lord.details == "Lord of Pisces (House is Empty)"


def test_ista_devata_without_atmakaraka(dataset_factory):
    assert analyze_ista_devata(dataset_factory(("Lagna", 10.0))) is None
