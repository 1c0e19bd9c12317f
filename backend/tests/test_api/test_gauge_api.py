"""Tests for the HTTP endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from radial_gauge.main import app
from radial_gauge.models.options import GAUGE_OPTIONS


client = TestClient(app)

RENDER_BODY = {
    "data_point": {
        "value": 75,
        "rendered_text": "75",
        "label": "Sales",
        "dimension_text": "West",
        "drill_links": [{"label": "Show All", "url": "/explore/sales", "type": "drill"}],
    },
    "config": {"chart_title": "Quarterly Sales", "target_source": "hardcoded"},
    "viewport": {"width": 400, "height": 300},
}


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["stages_registered"] == 15


def test_options():
    response = client.get("/api/gauge/options")
    assert response.status_code == 200
    data = response.json()
    assert len(data) == len(GAUGE_OPTIONS)
    angle = next(o for o in data if o["name"] == "angle")
    assert angle["default"] == 180
    assert angle["min"] == 90 and angle["max"] == 270


def test_render():
    response = client.post("/api/gauge/render", json=RENDER_BODY)
    assert response.status_code == 200
    data = response.json()
    descriptor = data["descriptor"]
    roles = [p["role"] for p in descriptor["primitives"]]
    assert roles[0] == "background"
    assert "target" in roles
    assert descriptor["title"]["text"] == "Quarterly Sales"
    assert descriptor["view_box"]["width"] == 400
    assert data["stages_completed"] == 15


def test_render_rejects_multiple_rows():
    body = {**RENDER_BODY, "query_shape": {"dimension_count": 1, "measure_count": 1, "row_count": 4}}
    response = client.post("/api/gauge/render", json=body)
    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["error"] == "TooManyRows"
    assert "single item" in detail["message"]


def test_render_requires_viewport():
    body = {k: v for k, v in RENDER_BODY.items() if k != "viewport"}
    response = client.post("/api/gauge/render", json=body)
    assert response.status_code == 422


def test_svg():
    response = client.post("/api/gauge/svg", json=RENDER_BODY)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    assert "<svg" in response.text
    assert "Quarterly Sales" in response.text


def test_drill_hit():
    rendered = client.post("/api/gauge/render", json=RENDER_BODY).json()["descriptor"]
    t = rendered["transform"]
    # Halfway along the needle at 3 o'clock
    x = 40 * t["scale"] + t["translate_x"]
    y = t["translate_y"]
    response = client.post("/api/gauge/drill", json={**RENDER_BODY, "x": x, "y": y})
    assert response.status_code == 200
    data = response.json()
    assert data["hit"]["role"] == "spinner"
    assert data["request"]["links"][0]["label"] == "Show All"


def test_drill_miss():
    response = client.post("/api/gauge/drill", json={**RENDER_BODY, "x": 1, "y": 1})
    assert response.status_code == 200
    assert response.json() == {"hit": None, "request": None}


def test_text_metrics_come_from_settings():
    from radial_gauge.config import Settings
    from radial_gauge.dependencies import get_settings

    app.dependency_overrides[get_settings] = lambda: Settings(text_char_width_ratio=2.0)
    try:
        wide = client.post("/api/gauge/render", json=RENDER_BODY).json()["descriptor"]
    finally:
        app.dependency_overrides.clear()
    narrow = client.post("/api/gauge/render", json=RENDER_BODY).json()["descriptor"]

    def target_lines(descriptor):
        return next(p for p in descriptor["primitives"] if p["role"] == "target-label")["lines"]

    # Wider glyphs push "75 Target" past the wrap width
    assert target_lines(narrow) == ["75 Target"]
    assert target_lines(wide) == ["75", "Target"]
