"""
API checks for the naming endpoints through the FastAPI test client.
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

from config.feature_flags import reset_feature_flags
from modules.jaimini import special_lagnas


def test_root_info(client):
    r = client.get("/")
    assert r.status_code == 200
    info = r.json()
    assert info["service"] == "namakarana"
    assert "ENABLE_KATAPAYADI" in info["features"]


def test_health(client):
    r = client.get("/api/v1/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["features"]["ENABLE_SVARA"] is True


def test_docs_accessible(client):
    assert client.get("/api/docs").status_code == 200
    assert "/api/v1/naming/analyze" in client.get("/openapi.json").json()["paths"]


def test_analyze_chart_only(client, sample_payload):
    r = client.post("/api/v1/naming/analyze", json={"positions": sample_payload})
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "success"
    data = body["data"]
    assert data["atmakaraka"]["planet"] == "Venus"
    assert data["shadbala"]["strongest"]["planet"] == "Moon"
    assert data["hoda_planet"] == "Moon"
    assert data["special_points"] == [{"name": "AL", "sign_index": 4}]
    assert data["svara"] is None
    assert "katapayadi" not in data


def test_analyze_with_name_and_birth(client, sample_payload, monkeypatch):
    birth = datetime(1990, 5, 15, 4, 30, tzinfo=timezone.utc)
    monkeypatch.setattr(
        special_lagnas, "find_sunrise", lambda *a, **k: birth - timedelta(hours=4)
    )
    r = client.post(
        "/api/v1/naming/analyze",
        json={
            "positions": sample_payload,
            "name": "Rama",
            "birth_time": "1990-05-15T10:00:00+05:30",
            "latitude": 28.6,
            "longitude": 77.2,
            "tz_offset_hours": 5.5,
            "katapayadi_texts": ["rama"],
        },
    )
    assert r.status_code == 200
    data = r.json()["data"]
    assert [p["name"] for p in data["special_points"]] == ["AL", "VL", "HL", "GL"]
    assert data["svara"]["lagana"]["prognosis"] == "Excellent"
    assert data["katapayadi"][0]["sum"] == 52
    assert data["overlay"]["4"]["entries"][0]["text"] == "rama"
    assert data["overlay"]["1"]["planets"] == ["AS", "Ve"]


def test_analyze_rejects_bad_positions(client, sample_payload):
    bad_name = [{"name": "Pluto", "longitude": 10.0}]
    assert client.post("/api/v1/naming/analyze", json={"positions": bad_name}).status_code == 422

    bad_lon = [{"name": "Sun", "longitude": 360.0}]
    assert client.post("/api/v1/naming/analyze", json={"positions": bad_lon}).status_code == 422

    dup = sample_payload + [sample_payload[1]]
    assert client.post("/api/v1/naming/analyze", json={"positions": dup}).status_code == 422

    assert client.post("/api/v1/naming/analyze", json={"positions": []}).status_code == 422


def test_hoda_chakra_endpoint(client):
    payload = {
        "planet": "Mars",
        "positions": [
            {"name": "Lagna", "longitude": 5.0},
            {"name": "Moon", "longitude": 275.0},
        ],
    }
    r = client.post("/api/v1/naming/hoda-chakra", json=payload)
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["candidates"][0]["syllable"] == "khi"
    assert data["recommended"] == ["khi", "khu", "khe", "gu", "ge", "go"]


def test_hoda_chakra_unknown_planet(client, sample_payload):
    r = client.post(
        "/api/v1/naming/hoda-chakra", json={"planet": "Lagna", "positions": sample_payload}
    )
    assert r.status_code == 422


def test_katapayadi_endpoint(client):
    r = client.post("/api/v1/katapayadi", json={"texts": ["rama", "क्ष", "Microsoft"]})
    assert r.status_code == 200
    body = r.json()
    entries = body["entries"]
    assert [e["entry_id"] for e in entries] == [1, 2, 3]
    assert entries[0]["method"] == "Heuristic"
    assert entries[1]["method"] == "Direct"
    assert entries[2]["method"] == "Dictionary"
    assert body["by_rashi"]["4"] == [1]
    assert len(body["data"]["overlay"]) == 12


def test_katapayadi_sessions_are_per_request(client):
    client.post("/api/v1/katapayadi", json={"texts": ["rama"]})
    r = client.post("/api/v1/katapayadi", json={"texts": ["rama"]})
    assert r.json()["entries"][0]["entry_id"] == 1


def test_katapayadi_filter(client):
    r = client.post("/api/v1/katapayadi", json={"texts": ["rama", "क्ष"], "filter_id": 2})
    assert r.status_code == 200
    body = r.json()
    assert [e["entry_id"] for e in body["entries"]] == [2]
    assert body["data"]["overlay"]["6"]["entries"][0]["highlighted"] is True

    missing = client.post("/api/v1/katapayadi", json={"texts": ["rama"], "filter_id": 5})
    assert missing.status_code == 404
    assert missing.json()["code"] == "NOT_FOUND"


def test_katapayadi_validation(client):
    assert client.post("/api/v1/katapayadi", json={"texts": []}).status_code == 422
    assert client.post("/api/v1/katapayadi", json={"texts": ["  "]}).status_code == 422
    too_long = {"texts": ["ka" * 501]}
    assert client.post("/api/v1/katapayadi", json=too_long).status_code == 422


def test_disabled_engine_returns_403(client, monkeypatch):
    monkeypatch.setenv("ENABLE_KATAPAYADI", "false")
    reset_feature_flags()
    r = client.post("/api/v1/katapayadi", json={"texts": ["rama"]})
    assert r.status_code == 403
    assert r.json()["code"] == "FEATURE_DISABLED"
