"""
Roman (IAST or loose English) -> Devanagari transliteration.

Greedy longest-match tokenizer with one bit of state: whether the last
emitted token was a bare consonant. Two bare consonants in a row get a
virama between them; a word ending on a bare consonant gets a final one.
"""

import re
import unicodedata
from dataclasses import dataclass

from constants.katapayadi import (
    AMBIGUOUS_CLUSTERS,
    ATOMIC_CONJUNCTS,
    KATAPAYADI_VALUES,
    LOANWORD_DICTIONARY,
    PHONETIC_KEYS,
    PHONETIC_MAP,
    VIRAMA,
)

DICTIONARY = "Dictionary"
HEURISTIC = "Heuristic"
DIRECT = "Direct"

_DEVANAGARI_RE = re.compile(r"[\u0900-\u097F]")
_AMBIGUOUS_RE = re.compile(AMBIGUOUS_CLUSTERS, re.IGNORECASE)


@dataclass(frozen=True)
class TransliterationResult:
    devanagari: str
    method: str


def is_devanagari(text: str) -> bool:
    return bool(_DEVANAGARI_RE.search(text))


def is_bare_consonant(token: str) -> bool:
    """Single consonant letter without a vowel sign."""
    return token in KATAPAYADI_VALUES and token not in ATOMIC_CONJUNCTS


def _match_key(text: str, i: int) -> str | None:
    for key in PHONETIC_KEYS:
        if text.startswith(key, i):
            return key
    return None


def transliterate(text: str) -> TransliterationResult:
    """Convert Roman text to Devanagari.

    Known loan words come from the dictionary unchanged. Unrecognized
    characters are skipped.
    """
    lower = unicodedata.normalize("NFC", text.strip().lower())

    if lower in LOANWORD_DICTIONARY:
        return TransliterationResult(LOANWORD_DICTIONARY[lower], DICTIONARY)

    out = []
    i = 0
    prev_bare = False

    while i < len(lower):
        key = _match_key(lower, i)
        if key is None:
            i += 1
            continue

        token = PHONETIC_MAP[key]
        bare = is_bare_consonant(token)
        if bare and prev_bare:
            out.append(VIRAMA)
        out.append(token)

        # vowels, matras and anusvara all clear the flag
        prev_bare = bare
        i += len(key)

    if prev_bare:
        out.append(VIRAMA)

    return TransliterationResult("".join(out), HEURISTIC)


def assess_risk(text: str, method: str) -> str:
    """low for dictionary or typed Devanagari; med for heuristics, high
    when the input holds a cluster the heuristic may misread."""
    if method in (DICTIONARY, DIRECT):
        return "low"
    if _AMBIGUOUS_RE.search(text):
        return "high"
    return "med"
