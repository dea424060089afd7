from __future__ import annotations

import pytest

from refactor.core_types import ChartPoint, PlanetaryDataset, PlanetPosition


def test_position_derives_sign_and_lagna_flag():
    p = PlanetPosition("Lagna", 95.5, d9_index=3)
    assert p.sign_index == 3
    assert p.is_lagna is True
    assert p.degree_in_sign == pytest.approx(5.5)
    assert p.planet is None


def test_position_rejects_out_of_range_values():
    with pytest.raises(ValueError):
        PlanetPosition("Sun", 360.0)
    with pytest.raises(ValueError):
        PlanetPosition("Sun", -1.0)
    with pytest.raises(ValueError):
        PlanetPosition("Sun", 10.0, d9_index=12)


def test_position_is_immutable():
    p = PlanetPosition("Sun", 10.0)
    with pytest.raises(AttributeError):
        p.sidereal_longitude = 20.0  # type: ignore[misc]


def test_dataset_lookup(sample_dataset):
    assert len(sample_dataset) == 10
    assert sample_dataset.lagna.sign_index == 0
    assert sample_dataset.lagna_longitude == 5.0
    assert sample_dataset.moon.name == "Moon"
    assert sample_dataset.sun.sign_index == 1
    assert sample_dataset.find("Pranapada") is None


def test_dataset_without_lagna():
    ds = PlanetaryDataset.from_positions([PlanetPosition("Sun", 10.0)])
    assert ds.lagna is None
    assert ds.lagna_longitude is None


def test_to_dict_includes_dms(sample_dataset):
    data = sample_dataset.to_dict()
    assert data["positions"][0]["name"] == "Lagna"
    assert data["positions"][0]["dms"] == "5°00'00.0"
    assert ChartPoint("AL", 4).to_dict() == {"name": "AL", "sign_index": 4}
