import os
import pytest

from config.feature_flags import reset_feature_flags
from refactor.core_types import PlanetaryDataset, PlanetPosition

FLAG_VARS = (
    "ENABLE_ISTA_DEVATA",
    "ENABLE_SHADBALA",
    "ENABLE_HODA_CHAKRA",
    "ENABLE_SPECIAL_LAGNAS",
    "ENABLE_SVARA",
    "ENABLE_KATAPAYADI",
)

# Plain-text logs keep pytest output readable
os.environ.setdefault("LOG_FORMAT", "text")


def make_dataset(*bodies) -> PlanetaryDataset:
    """Build a dataset from (name, longitude[, d9_index]) tuples."""
    return PlanetaryDataset.from_positions(
        PlanetPosition(b[0], b[1], b[2] if len(b) > 2 else 0) for b in bodies
    )


# Lagna in Aries, Moon and Mars in Cancer, Venus at 28 deg (Atmakaraka)
SAMPLE_BODIES = (
    ("Lagna", 5.0, 1),
    ("Sun", 40.0, 0),
    ("Moon", 95.0, 9),
    ("Mars", 100.0, 3),
    ("Mercury", 50.0, 4),
    ("Jupiter", 200.0, 5),
    ("Venus", 28.0, 6),
    ("Saturn", 290.0, 7),
    ("Rahu", 63.0, 8),
    ("Ketu", 243.0, 2),
)


@pytest.fixture(autouse=True)
def _default_feature_flags(monkeypatch):
    for var in FLAG_VARS:
        monkeypatch.delenv(var, raising=False)
    reset_feature_flags()
    yield
    reset_feature_flags()


@pytest.fixture
def dataset_factory():
    return make_dataset


@pytest.fixture
def sample_dataset() -> PlanetaryDataset:
    return make_dataset(*SAMPLE_BODIES)


@pytest.fixture
def sample_payload() -> list[dict]:
    return [{"name": n, "longitude": lon, "d9_index": d9} for n, lon, d9 in SAMPLE_BODIES]


@pytest.fixture(scope="session")
def client():
    from fastapi.testclient import TestClient
    from apps.api.main import app

    return TestClient(app)
