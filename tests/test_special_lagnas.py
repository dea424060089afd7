from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from modules.jaimini import special_lagnas
from modules.jaimini.special_lagnas import (
    calculate_arudha_lagna,
    calculate_special_points,
    calculate_time_lagnas,
    calculate_varnada_lagna,
    varnada_degree,
)
from refactor import swe_backend

BIRTH = datetime(1990, 5, 15, 4, 30, tzinfo=timezone.utc)


@pytest.fixture
def sunrise_at(monkeypatch):
    """Pin sunrise to a fixed UTC instant."""

    def _pin(when: datetime) -> None:
        monkeypatch.setattr(special_lagnas, "find_sunrise", lambda *a, **k: when)

    return _pin


def test_arudha_lagna_exception_jump(sample_dataset):
    # Mars (lord of Aries) in Cancer: 4th from Lagna, 4th again is the 7th
    al = calculate_arudha_lagna(sample_dataset)
    assert al.name == "AL"
    assert al.sign_index == 4  # Leo after the 10-sign jump


def test_arudha_lagna_plain_case(dataset_factory):
    ds = dataset_factory(("Lagna", 5.0), ("Mars", 35.0))
    assert calculate_arudha_lagna(ds).sign_index == 2


def test_arudha_lagna_lord_in_lagna(dataset_factory):
    # Pada falls on the Lagna itself -> 10th from it
    ds = dataset_factory(("Lagna", 5.0), ("Mars", 15.0))
    assert calculate_arudha_lagna(ds).sign_index == 10


def test_arudha_lagna_missing_inputs(dataset_factory):
    assert calculate_arudha_lagna(dataset_factory(("Sun", 5.0))).sign_index == 0
    assert calculate_arudha_lagna(dataset_factory(("Lagna", 5.0))).sign_index == 0


def test_varnada_degree_parity_rules():
    # Odd Lagna with even Hora Lagna: difference
    assert varnada_degree(5.0, 160.0) == pytest.approx(195.0)
    # Both odd: sum
    assert varnada_degree(5.0, 70.0) == pytest.approx(75.0)
    # Even Lagna reverses the result
    assert varnada_degree(35.0, 40.0) == pytest.approx(75.0)


def test_time_lagnas_after_sunrise(sample_dataset, sunrise_at):
    sunrise_at(BIRTH - timedelta(hours=4))
    hl, gl = calculate_time_lagnas(sample_dataset, BIRTH, 28.6, 77.2, 5.5)
    assert (hl.name, hl.sign_index) == ("HL", 5)  # 40 + 4 * 30 = 160
    assert (gl.name, gl.sign_index) == ("GL", 11)  # 40 + 4 * 75 = 340


def test_time_lagnas_before_sunrise_use_previous_day(sample_dataset, sunrise_at):
    sunrise_at(BIRTH + timedelta(hours=2))
    hl, gl = calculate_time_lagnas(sample_dataset, BIRTH, 28.6, 77.2, 5.5)
    assert hl.sign_index == 11  # 22h -> 700 deg
    assert gl.sign_index == 8  # 22h -> 1690 deg


def test_varnada_lagna(sample_dataset, sunrise_at):
    sunrise_at(BIRTH - timedelta(hours=4))
    vl = calculate_varnada_lagna(sample_dataset, BIRTH, 28.6, 77.2, 5.5)
    assert (vl.name, vl.sign_index) == ("VL", 6)


def test_varnada_lagna_before_sunrise_is_not_wrapped(sample_dataset, sunrise_at):
    sunrise_at(BIRTH + timedelta(hours=2))
    vl = calculate_varnada_lagna(sample_dataset, BIRTH, 28.6, 77.2, 5.5)
    # HL runs back to 340 deg; |5 - 20| = 15 -> Aries
    assert vl.sign_index == 0


def test_missing_sun(dataset_factory, sunrise_at):
    sunrise_at(BIRTH)
    ds = dataset_factory(("Lagna", 5.0))
    assert calculate_time_lagnas(ds, BIRTH, 0.0, 0.0) == []
    assert calculate_varnada_lagna(ds, BIRTH, 0.0, 0.0).sign_index == 0


def test_special_points_need_time_and_place(sample_dataset, sunrise_at):
    assert [p.name for p in calculate_special_points(sample_dataset)] == ["AL"]
    sunrise_at(BIRTH - timedelta(hours=4))
    points = calculate_special_points(sample_dataset, BIRTH, 28.6, 77.2, 5.5)
    assert [p.name for p in points] == ["AL", "VL", "HL", "GL"]


def test_special_points_are_repeatable(sample_dataset, sunrise_at):
    sunrise_at(BIRTH - timedelta(hours=4))
    first = calculate_special_points(sample_dataset, BIRTH, 28.6, 77.2, 5.5)
    assert calculate_special_points(sample_dataset, BIRTH, 28.6, 77.2, 5.5) == first


def test_sunrise_falls_back_to_six_local(monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("ephemeris unavailable")

    monkeypatch.setattr(swe_backend.swe, "rise_trans", boom)
    sunrise = swe_backend.find_sunrise(BIRTH, 28.6, 77.2, tz_offset_hours=5.5)
    # 06:00 IST on 15 May is 00:30 UTC
    assert sunrise == datetime(1990, 5, 15, 0, 30, tzinfo=timezone.utc)


def test_sunrise_from_ephemeris_is_near_dawn():
    sunrise = swe_backend.find_sunrise(BIRTH, 28.6139, 77.2090, tz_offset_hours=5.5)
    local = sunrise + timedelta(hours=5.5)
    assert local.date() == datetime(1990, 5, 15).date()
    assert 5 <= local.hour <= 6
