"""
Request/session-scoped Katapayadi log.

Entries are immutable and only ever appended; readers filter.
"""

from dataclasses import dataclass

from constants.relationships import sign_name


@dataclass(frozen=True)
class DigitLogEntry:
    token: str
    value: int | None
    status: str  # keep / drop / warn

    def to_dict(self) -> dict:
        return {"token": self.token, "value": self.value, "status": self.status}


@dataclass(frozen=True)
class KatapayadiEntry:
    entry_id: int
    original_text: str
    devanagari_text: str
    method: str  # Dictionary / Heuristic / Direct
    risk_level: str  # low / med / high
    digit_log: tuple[DigitLogEntry, ...]
    reversed_digits: tuple[int, ...]
    sum: int
    rashi: int  # 1-12

    @property
    def rashi_name(self) -> str:
        return sign_name(self.rashi - 1)

    def to_dict(self) -> dict:
        return {
            "entry_id": self.entry_id,
            "original_text": self.original_text,
            "devanagari_text": self.devanagari_text,
            "method": self.method,
            "risk_level": self.risk_level,
            "digit_log": [d.to_dict() for d in self.digit_log],
            "reversed_digits": list(self.reversed_digits),
            "sum": self.sum,
            "rashi": self.rashi,
            "rashi_name": self.rashi_name,
        }


class KatapayadiSession:
    """Append-only, ordered log of processed texts."""

    def __init__(self) -> None:
        self._entries: list[KatapayadiEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> tuple[KatapayadiEntry, ...]:
        return tuple(self._entries)

    def next_id(self) -> int:
        return len(self._entries) + 1

    def append(self, entry: KatapayadiEntry) -> None:
        self._entries.append(entry)

    def filter(self, entry_id: int | None = None) -> list[KatapayadiEntry]:
        """All entries, or only the selected one."""
        if entry_id is None:
            return list(self._entries)
        return [e for e in self._entries if e.entry_id == entry_id]

    def by_rashi(self) -> dict[int, list[KatapayadiEntry]]:
        grouped: dict[int, list[KatapayadiEntry]] = {}
        for e in self._entries:
            grouped.setdefault(e.rashi, []).append(e)
        return grouped
