"""
Request context for a naming run.

Holds the immutable dataset and birth data, plus the append-only
Katapayadi log owned by this request. Nothing here is shared between
requests.
"""

from dataclasses import dataclass, field
from datetime import datetime

from app.core.config import DEFAULT_TZ_OFFSET_HOURS
from modules.katapayadi.session import KatapayadiSession
from refactor.core_types import PlanetaryDataset


@dataclass
class NamingContext:
    dataset: PlanetaryDataset
    birth_utc: datetime | None = None
    latitude: float | None = None
    longitude: float | None = None
    tz_offset_hours: float = DEFAULT_TZ_OFFSET_HOURS
    katapayadi: KatapayadiSession = field(default_factory=KatapayadiSession)

    @property
    def birth_year(self) -> int | None:
        return self.birth_utc.year if self.birth_utc else None

    @property
    def has_birth_place(self) -> bool:
        return (
            self.birth_utc is not None
            and self.latitude is not None
            and self.longitude is not None
        )
