"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from svgattrs.config import Settings
from svgattrs.dependencies import get_settings
from svgattrs.main import app
from tests.conftest import CIRCLE_SVG, LINKED_SVG


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["attributes_registered"] == 146


def test_list_attributes():
    response = client.get("/api/attributes")
    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 146
    assert [a["id"] for a in data["attributes"]] == list(range(146))
    first = data["attributes"][0]
    assert first == {"id": 0, "identifier": "ALTERNATE", "name": "alternate", "kind": "element"}


def test_resolve_known():
    response = client.get("/api/attributes/resolve", params={"name": "stroke-width"})
    assert response.status_code == 200
    data = response.json()
    assert data["recognized"] is True
    assert data["attribute"]["identifier"] == "STROKE_WIDTH"
    assert data["attribute"]["kind"] == "presentation"


def test_resolve_unknown_is_not_an_error():
    for name in ["totally-unknown-attr", "Width", ""]:
        response = client.get("/api/attributes/resolve", params={"name": name})
        assert response.status_code == 200
        data = response.json()
        assert data["recognized"] is False
        assert data["attribute"] is None


def test_scan_circle():
    response = client.post("/api/attributes/scan", json={"svg": CIRCLE_SVG})
    assert response.status_code == 200
    data = response.json()
    assert data["error"] == ""
    assert [el["tag"] for el in data["elements"]] == ["svg", "circle"]
    assert data["unrecognized_count"] == 1
    assert data["recognized_count"] == 8 + 3
    circle = data["elements"][1]
    assert circle["attributes"][0] == {"id": 12, "identifier": "CX", "name": "cx", "kind": "element", "value": "12"}


def test_scan_links():
    response = client.post("/api/attributes/scan", json={"svg": LINKED_SVG})
    data = response.json()
    hrefs = [el["href"] for el in data["elements"] if el["tag"] == "use"]
    assert hrefs == ["#dot", "#dot", "#dot"]


def test_scan_oversize_handled_gracefully():
    app.dependency_overrides[get_settings] = lambda: Settings(max_svg_bytes=10)
    try:
        response = client.post("/api/attributes/scan", json={"svg": CIRCLE_SVG})
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 200
    data = response.json()
    assert data["elements"] == []
    assert "limit is 10" in data["error"]


def test_scan_unpaired_surrogate_handled_gracefully():
    body = r'{"svg": "<svg width=\"1\" id=\"\ud800\"/>"}'
    response = client.post("/api/attributes/scan", content=body, headers={"content-type": "application/json"})
    assert response.status_code == 200
    data = response.json()
    assert data["elements"] == []
    assert "unpaired surrogate" in data["error"]


def test_scan_decodes_entities():
    svg = '<svg><a href="/q?a=1&amp;b=2" title="&#x20;x"/></svg>'
    data = client.post("/api/attributes/scan", json={"svg": svg}).json()
    link = data["elements"][1]
    assert link["href"] == "/q?a=1&b=2"
    assert link["unrecognized"] == ["title"]
