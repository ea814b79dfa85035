from __future__ import annotations

import time
from pathlib import Path

from fastapi.testclient import TestClient

from src.badger.catalog.catalog_service import Catalog
from tests.helpers.app import build_app
from tests.helpers.badges import make_badge


def _app(tmp_path: Path):
    app = build_app(tmp_path)
    app.state.badge_state.replace_catalog(Catalog.from_badges([make_badge("A"), make_badge("B")]))
    return app


def test_save_and_list_presets(tmp_path: Path) -> None:
    client = TestClient(_app(tmp_path))
    client.post("/api/slots/selection", json={"slots": {"1": ["A"]}})

    response = client.post("/api/presets/", json={"name": "weekend"})

    assert response.status_code == 201
    assert response.json() == {"presets": ["weekend"]}
    assert client.get("/api/presets/").json() == {"presets": ["weekend"]}


def test_save_preset_rejects_bad_names(tmp_path: Path) -> None:
    client = TestClient(_app(tmp_path))

    assert client.post("/api/presets/", json={"name": ""}).status_code == 422
    response = client.post("/api/presets/", json={"name": "../etc"})
    assert response.status_code == 400
    assert client.get("/api/presets/").json() == {"presets": []}


def test_unknown_preset_rotation_is_404(tmp_path: Path) -> None:
    with TestClient(_app(tmp_path)) as client:
        response = client.post("/api/presets/rotation", json={"presets": ["ghost"]})

    assert response.status_code == 404
    assert response.json()["detail"]["details"] == "The requested preset does not exist"


def test_rotation_start_applies_preset(tmp_path: Path) -> None:
    app = _app(tmp_path)
    with TestClient(app) as client:
        client.post("/api/slots/selection", json={"slots": {"3": ["B"]}})
        client.post("/api/presets/", json={"name": "bee"})
        client.post("/api/slots/selection", json={"slots": {}})

        response = client.post("/api/presets/rotation", json={"presets": ["bee"]})
        assert response.status_code == 200
        assert response.json() == {"rotating": True, "presets": ["bee"]}

        deadline = time.monotonic() + 2
        while time.monotonic() < deadline:
            if app.state.badge_state.snapshot()["B"].selected[2]:
                break
            time.sleep(0.01)
        status = client.get("/api/presets/rotation").json()

    assert app.state.badge_state.snapshot()["B"].selected == [False, False, True, False, False]
    assert status == {"rotating": True, "presets": ["bee"]}
