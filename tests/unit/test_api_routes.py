"""Integration tests for the FastAPI layer."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from pocketdraft.api.app import create_app
from pocketdraft.api.runtime import ApiState, build_state
from pocketdraft.config import Settings

CELTS = {
    1: {"name": "Warband", "points": 4, "formation": 3, "wounds": 1, "engagement": "4-5"},
    2: {"name": "Warband", "engagement": "5-6"},
    3: {"name": "Slingers", "points": 3, "formation": 3, "wounds": 1, "shooting": "5"},
    4: {"name": "Slingers", "shooting": "6"},
    5: {"name": "Horsemen", "points": 5, "formation": 2, "wounds": 1, "engagement": "3-4"},
    6: {"name": "Druid", "points": 2, "formation": 1, "wounds": 1, "powers": ["Auxiliary"]},
}


def _make_app(tmp_path, write_faction, **overrides):
    write_faction(tmp_path, "Celts", CELTS)

    def factory() -> ApiState:
        return build_state(Settings(data_dir=tmp_path, **overrides))

    app = create_app(state_factory=factory)
    transport = ASGITransport(app=app)
    return app, transport


@pytest.mark.asyncio
async def test_catalog_endpoints(tmp_path, write_faction):
    app, transport = _make_app(tmp_path, write_faction)

    async with (
        app.router.lifespan_context(app),
        AsyncClient(transport=transport, base_url="http://test") as client,
    ):
        response = await client.get("/health")
        assert response.status_code == 200
        payload = response.json()
        assert payload["status"] == "ok"
        assert payload["factions"] == 1
        assert payload["default_strategy"] == "heuristic"
        assert "Celts-FastGaesatae" in payload["policies"]

        response = await client.get("/factions")
        assert response.json() == ["Celts"]

        response = await client.get("/factions/Celts")
        assert response.status_code == 200
        troops = response.json()["troops"]
        assert [t["reference"] for t in troops][:2] == ["Celts-01", "Celts-02"]
        assert troops[1]["points"] == 4
        assert troops[1]["engagement"] == ["5", "6"]

        response = await client.get("/factions/Vikings")
        assert response.status_code == 404

        response = await client.get("/powers")
        assert "Auxiliary" in response.json()


@pytest.mark.asyncio
async def test_draft_endpoint(tmp_path, write_faction):
    app, transport = _make_app(tmp_path, write_faction, default_points=12)

    async with (
        app.router.lifespan_context(app),
        AsyncClient(transport=transport, base_url="http://test") as client,
    ):
        response = await client.post("/drafts", json={"faction": "Celts", "points": 20})
        assert response.status_code == 201
        army = response.json()
        assert army["strategy"] == "heuristic"
        assert army["requested_points"] == 20
        assert 0 < army["points"] <= 20
        assert army["points"] == sum(unit["points"] for unit in army["units"])
        assert army["summary"].startswith(f"Army {len(army['units'])} units")

        response = await client.post("/drafts", json={"faction": "Celts", "strategy": "simple"})
        assert response.status_code == 201
        army = response.json()
        assert army["requested_points"] == 12
        assert all(len(unit["troops"]) == 1 for unit in army["units"])


@pytest.mark.asyncio
async def test_draft_seeds_and_errors(tmp_path, write_faction):
    app, transport = _make_app(tmp_path, write_faction)

    async with (
        app.router.lifespan_context(app),
        AsyncClient(transport=transport, base_url="http://test") as client,
    ):
        response = await client.post(
            "/drafts",
            json={"faction": "Celts", "points": 10, "seed_units": [["Celts-01", "Celts-02"]]},
        )
        assert response.status_code == 201
        units = response.json()["units"]
        assert any({"Celts-01", "Celts-02"} <= set(unit["troops"]) for unit in units)

        response = await client.post("/drafts", json={"faction": "Vikings", "points": 10})
        assert response.status_code == 404

        response = await client.post(
            "/drafts", json={"faction": "Celts", "points": 10, "seed_units": [["Celts-99"]]}
        )
        assert response.status_code == 400
        assert "Celts-99" in response.json()["detail"]

        response = await client.post("/drafts", json={"faction": "Celts", "points": -1})
        assert response.status_code == 422

        response = await client.post(
            "/drafts", json={"faction": "Celts", "points": 10, "variant": "Orcs"}
        )
        assert response.status_code == 400
        assert "Orcs" in response.json()["detail"]


@pytest.mark.asyncio
async def test_fixed_seed_makes_drafts_repeatable(tmp_path, write_faction):
    app, transport = _make_app(tmp_path, write_faction, rng_seed="demo")

    async with (
        app.router.lifespan_context(app),
        AsyncClient(transport=transport, base_url="http://test") as client,
    ):
        first = await client.post("/drafts", json={"faction": "Celts", "points": 15})
        second = await client.post("/drafts", json={"faction": "Celts", "points": 15})
        assert first.json()["summary"] == second.json()["summary"]


@pytest.mark.asyncio
async def test_points_endpoint(tmp_path, write_faction):
    app, transport = _make_app(tmp_path, write_faction)

    async with (
        app.router.lifespan_context(app),
        AsyncClient(transport=transport, base_url="http://test") as client,
    ):
        response = await client.post("/points", json={"lines": ["Celts 1 3 5", "Celts 9"]})
        assert response.status_code == 200
        payload = response.json()
        assert payload["troops"] == ["Celts-01", "Celts-03", "Celts-05"]
        assert payload["unknown"] == ["Celts 9"]
        assert payload["total"] == 12
        assert payload["victory_threshold"] == 6


@pytest.mark.asyncio
async def test_lifespan_installs_state(tmp_path, write_faction):
    app, _ = _make_app(tmp_path, write_faction)

    async with app.router.lifespan_context(app):
        state = app.state.api_state
        assert isinstance(state, ApiState)
        assert state.drafts.catalog.faction_names() == ["Celts"]
