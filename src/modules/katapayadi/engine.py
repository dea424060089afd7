"""
Katapayadi numeral engine.

Reads Devanagari text as ka-ṭa-pa-yādi digits. Digits are written
right to left ("aṅkānāṃ vāmato gatiḥ"), so the collected sequence is
reversed before it is read as a number.

The reversed digits are folded into a base-10 number, so leading
zeros are dropped: [0, 5] reads as 5, not "05".
"""

from dataclasses import dataclass
from functools import reduce

from app.core.logging import get_engine_logger
from config.feature_flags import require_feature
from constants.katapayadi import (
    AMBIGUOUS_MATRA_VALUE,
    AMBIGUOUS_MATRAS,
    ATOMIC_CONJUNCTS,
    INDEPENDENT_VOWELS,
    KATAPAYADI_VALUES,
    VIRAMA,
)
from constants.relationships import sign_name

from .session import DigitLogEntry, KatapayadiEntry, KatapayadiSession
from .transliteration import (
    DIRECT,
    assess_risk,
    is_devanagari,
    transliterate,
)

logger = get_engine_logger("katapayadi")

KEEP = "keep"
DROP = "drop"
WARN = "warn"


@dataclass(frozen=True)
class KatapayadiCalculation:
    devanagari: str
    digit_log: tuple[DigitLogEntry, ...]
    reversed_digits: tuple[int, ...]
    sum: int
    rashi: int

    @property
    def rashi_name(self) -> str:
        return sign_name(self.rashi - 1)


def rashi_from_sum(total: int) -> int:
    """Sign number 1-12; a multiple of 12 is Pisces (12), never 0."""
    remainder = total % 12
    return 12 if remainder == 0 else remainder


def tokenize(text: str) -> list[str]:
    """Split into characters, keeping क्ष and ज्ञ as single tokens."""
    tokens = []
    i = 0
    while i < len(text):
        conjunct = next((c for c in ATOMIC_CONJUNCTS if text.startswith(c, i)), None)
        if conjunct:
            tokens.append(conjunct)
            i += len(conjunct)
        else:
            tokens.append(text[i])
            i += 1
    return tokens


def _is_valid(token: str | None) -> bool:
    return token is not None and (token in KATAPAYADI_VALUES or token in INDEPENDENT_VOWELS)


def calculate(devanagari: str) -> KatapayadiCalculation:
    """Digit values, reversed digits, sum and rashi of Devanagari text."""
    tokens = tokenize(devanagari)
    log: list[DigitLogEntry] = []
    values: list[int] = []
    n = len(tokens)
    i = 0

    while i < n:
        c = tokens[i]
        nxt = tokens[i + 1] if i + 1 < n else None

        # Independent vowel: zero
        if c in INDEPENDENT_VOWELS:
            log.append(DigitLogEntry(c, 0, KEEP))
            values.append(0)
            i += 1
            continue

        if c not in KATAPAYADI_VALUES:
            i += 1
            continue

        # Consonant + vocalic R: counted, but flagged
        if nxt in AMBIGUOUS_MATRAS:
            log.append(DigitLogEntry(c + nxt, AMBIGUOUS_MATRA_VALUE, WARN))
            values.append(AMBIGUOUS_MATRA_VALUE)
            i += 2
            continue

        # Consonant + virama: conjunct if a letter follows, else word-final
        if nxt == VIRAMA:
            after = tokens[i + 2] if i + 2 < n else None
            if _is_valid(after):
                value = KATAPAYADI_VALUES[c]
                log.append(DigitLogEntry(c + VIRAMA, value, KEEP))
                values.append(value)
            else:
                log.append(DigitLogEntry(c + VIRAMA, None, DROP))
            i += 2
            continue

        value = KATAPAYADI_VALUES[c]
        log.append(DigitLogEntry(c, value, KEEP))
        values.append(value)
        i += 1

        # Attached matras carry no value
        while i < n and not _is_valid(tokens[i]):
            i += 1

    reversed_digits = tuple(reversed(values))
    total = reduce(lambda acc, d: acc * 10 + d, reversed_digits, 0)

    return KatapayadiCalculation(
        devanagari=devanagari,
        digit_log=tuple(log),
        reversed_digits=reversed_digits,
        sum=total,
        rashi=rashi_from_sum(total),
    )


@require_feature("katapayadi")
def process_text(text: str, session: KatapayadiSession) -> KatapayadiEntry:
    """Transliterate if needed, calculate, and append to the session log."""
    original = text.strip()
    if not original:
        raise ValueError("Katapayadi input must not be empty")

    if is_devanagari(original):
        devanagari, method = original, DIRECT
    else:
        result = transliterate(original)
        devanagari, method = result.devanagari, result.method

    calc = calculate(devanagari)
    entry = KatapayadiEntry(
        entry_id=session.next_id(),
        original_text=original,
        devanagari_text=devanagari,
        method=method,
        risk_level=assess_risk(original, method),
        digit_log=calc.digit_log,
        reversed_digits=calc.reversed_digits,
        sum=calc.sum,
        rashi=calc.rashi,
    )
    session.append(entry)
    logger.debug("Katapayadi entry recorded", extra={"entry_id": entry.entry_id})
    return entry
