from __future__ import annotations

from modules.naming.svara import (
    analyze_baladi_avastha,
    analyze_lagana,
    analyze_panca_svara_dasa,
    analyze_svara,
    analyze_svara_suite,
    count_syllables,
    get_first_vowel,
    syllable_nature,
)
from modules.vedic_strength.avasthas import calculate_baladi, compute_baladi_states


def test_first_vowel():
    assert get_first_vowel("Rama") == "a"
    assert get_first_vowel("Indra") == "i"
    assert get_first_vowel("Rāma") == "ā"
    assert get_first_vowel("Brt") == "a"
    assert get_first_vowel("") == "a"


def test_count_syllables():
    assert count_syllables("Rama") == 2
    assert count_syllables("Ram") == 2
    assert count_syllables("Ganesh") == 3
    assert count_syllables("") == 0


def test_svara_wheel(sample_dataset):
    result = analyze_svara("Uma", sample_dataset)
    # "u" sits in Cancer, same sign as the Moon
    assert result.sign_name == "Cancer"
    assert result.moon_house == 1
    assert result.moon_status == "Excellent (Kendra)"
    assert result.lagna_house == 4


def test_svara_needs_moon_and_lagna(dataset_factory):
    assert analyze_svara("Rama", dataset_factory(("Lagna", 5.0))) is None


def test_baladi_bands_reverse_in_even_signs():
    assert calculate_baladi(10.0, 0) == "Kumara"
    assert calculate_baladi(40.0, 1) == "Vriddha"
    assert calculate_baladi(29.99, 0) == "Mrita"
    assert calculate_baladi(59.99, 1) == "Bala"


def test_baladi_states_list_nodes_last(sample_dataset):
    names = [s.name for s in compute_baladi_states(sample_dataset)]
    assert names[-2:] == ["Rahu", "Ketu"]
    assert "Lagna" not in names


def test_baladi_activation_and_recommendation(sample_dataset):
    result = analyze_baladi_avastha("Indra", sample_dataset)
    assert result.current_vowel == "i"
    # Sun at 10 deg Taurus is Vriddha; Mars at 10 deg Cancer likewise
    assert "Sun" not in result.activated_planets
    # Venus (Atmakaraka) at 28 deg Aries is Mrita
    assert result.recommendation == {
        "planet": "Venus",
        "state": "Mrita",
        "suggested_vowels": "o, au",
    }


def test_panca_svara_dasa_cycle():
    periods = analyze_panca_svara_dasa("Indra", 1990)
    assert len(periods) == 5
    assert [p.vowel for p in periods] == ["i", "u", "e", "o", "a"]
    assert (periods[0].start_age, periods[0].end_age) == (0, 12)
    assert (periods[-1].year_start, periods[-1].year_end) == (2038, 2050)


def test_syllable_nature():
    assert syllable_nature(1) == syllable_nature(4) == "Fixed (Sthira)"
    assert syllable_nature(2) == syllable_nature(5) == "Movable (Cara)"
    for count in (0, 3, 6, 7, 8):
        assert syllable_nature(count) == "Dual (Dvisvabhava)"


def test_long_name_is_dual(sample_dataset):
    result = analyze_lagana("Ramakrishnanandan", sample_dataset)
    assert result.syllable_count == 7
    assert result.nature == "Dual (Dvisvabhava)"


def test_lagana_prognosis(sample_dataset):
    rama = analyze_lagana("Rama", sample_dataset)
    assert rama.activated_houses == (1, 4, 7, 10)
    assert rama.score == 4
    assert rama.prognosis == "Excellent"

    ganesh = analyze_lagana("Ganesh", sample_dataset)
    assert ganesh.score == 0
    assert ganesh.prognosis == "Low support, foreign success likely"
    assert ganesh.description.startswith("Low support")


def test_lagana_needs_lagna(dataset_factory):
    assert analyze_lagana("Rama", dataset_factory(("Moon", 5.0))) is None


def test_suite(sample_dataset):
    suite = analyze_svara_suite("Rama", sample_dataset, 1990)
    data = suite.to_dict()
    assert data["svara"]["sign_name"] == "Aries"
    assert len(data["dasa"]) == 5
    assert data["lagana"]["prognosis"] == "Excellent"


def test_suite_is_repeatable(sample_dataset):
    assert analyze_svara_suite("Rama", sample_dataset, 1990) == analyze_svara_suite(
        "Rama", sample_dataset, 1990
    )
