"""Tests for the FastAPI adapter."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
pytest.importorskip("httpx")

from fastapi.testclient import TestClient  # noqa: E402

from ryandata_postcode_utils.api import app  # noqa: E402

client = TestClient(app)


def test_health() -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_get_rule() -> None:
    response = client.get("/rules/gb")

    assert response.status_code == 200
    body = response.json()
    assert body["country_code"] == "GB"
    assert body["format_fix_name"] == "gb_inward_split"
    assert "format_fix" not in body


def test_unknown_country_is_404() -> None:
    assert client.get("/rules/ZZ").status_code == 404
    assert client.get("/validate", params={"country_code": "ZZ", "postcode": "1"}).status_code == 404


def test_validate() -> None:
    ok = client.get("/validate", params={"country_code": "US", "postcode": "12345"}).json()
    bad = client.get("/validate", params={"country_code": "US", "postcode": "1234"}).json()

    assert ok["success"] is True
    assert bad["success"] is False
    assert bad["error_kind"] == "format_mismatch"


def test_in_range() -> None:
    params = {"country_code": "US", "start": "50000", "end": "99999", "postcode": "12345"}
    response = client.get("/in_range", params=params)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is False
    assert body["error_kind"] == "below_range"
    assert body["ranges"] == [{"start": "50000", "end": "99999"}]


def test_in_range_without_format_fix() -> None:
    params = {"country_code": "GB", "start": "S10 9EE", "end": "S12 9EE", "postcode": "S119EE"}

    assert client.get("/in_range", params=params).json()["success"] is True
    params["apply_format_fix"] = "false"
    assert client.get("/in_range", params=params).json()["success"] is False


def test_overlap() -> None:
    body = {
        "country_code": "US",
        "ranges": [{"start": "0", "end": "9999"}, {"start": "5000", "end": "15000"}],
    }
    response = client.post("/overlap", json=body)

    assert response.status_code == 200
    data = response.json()
    assert data["error_kind"] == "overlap_detected"
    assert data["ranges"] == body["ranges"]


def test_overlap_unknown_country() -> None:
    response = client.post("/overlap", json={"country_code": "ZZ", "ranges": []})

    assert response.status_code == 404


def test_provinces() -> None:
    assert len(client.get("/provinces/US").json()) == 65
    assert client.get("/provinces/DE").json() == []


def test_province() -> None:
    response = client.get("/province", params={"country_code": "US", "query": "new york"})

    assert response.status_code == 200
    assert response.json()["code"] == "NY"

    missing = client.get("/province", params={"country_code": "US", "query": "Atlantis"})
    assert missing.status_code == 404
