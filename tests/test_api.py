"""Integration tests for the oracle and session API endpoints."""

import pytest
from httpx import AsyncClient

from app.domain.oracles import oracle
from app.modules.dice.roller import RollSource


async def create_session(client: AsyncClient, name: str = "Test Session", seed: str | int | None = "api") -> dict:
    resp = await client.post("/api/sessions", json={"name": name, "seed": seed})
    assert resp.status_code == 200
    return resp.json()


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["engine"] == "oracle-core"


@pytest.mark.asyncio
async def test_list_generators(client: AsyncClient):
    resp = await client.get("/api/oracle/generators")
    assert resp.status_code == 200
    data = resp.json()
    assert "fate_check" in data["oracle"]
    assert data["dice"]["roll_dice"][0]["name"] == "expression"


@pytest.mark.asyncio
async def test_stateless_roll_with_seed(client: AsyncClient):
    body = {"generator": "oracle", "operation": "fate_check", "params": {"likelihood": "Likely"}, "seed": 42}
    first = await client.post("/api/oracle/roll", json=body)
    second = await client.post("/api/oracle/roll", json=body)
    assert first.status_code == 200
    data = first.json()
    assert data["seq"] is None
    assert data["result"]["kind"] == "fate_check"
    assert data["result"]["diceValues"] == second.json()["result"]["diceValues"]

    expected = oracle.fate_check(RollSource(42), "Likely")
    assert data["result"]["diceValues"] == list(expected.dice_values)


@pytest.mark.asyncio
async def test_roll_unknown_generator(client: AsyncClient):
    resp = await client.post("/api/oracle/roll", json={"generator": "tarot", "operation": "draw"})
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_roll_invalid_params(client: AsyncClient):
    resp = await client.post(
        "/api/oracle/roll",
        json={"generator": "oracle", "operation": "fate_check", "params": {"likelihood": "Certain"}},
    )
    assert resp.status_code == 422
    assert "Certain" in resp.json()["detail"]


@pytest.mark.asyncio
async def test_roll_unknown_session(client: AsyncClient):
    resp = await client.post(
        "/api/oracle/roll",
        json={"generator": "oracle", "operation": "fate_check", "session_id": "missing"},
    )
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_session_roll_and_history(client: AsyncClient):
    session = await create_session(client)
    assert session["seed"] == "api"
    assert session["roll_count"] == 0

    for operation in ("scene_check", "fate_check"):
        generator = "scene" if operation == "scene_check" else "oracle"
        resp = await client.post(
            "/api/oracle/roll",
            json={"generator": generator, "operation": operation, "session_id": session["id"]},
        )
        assert resp.status_code == 200

    resp = await client.get(f"/api/sessions/{session['id']}/history")
    assert resp.status_code == 200
    records = resp.json()["records"]
    assert [r["seq"] for r in records] == [1, 2]
    assert [r["result"]["kind"] for r in records] == ["scene_check", "fate_check"]

    resp = await client.get(f"/api/sessions/{session['id']}")
    assert resp.json()["roll_count"] == 2


@pytest.mark.asyncio
async def test_history_page_size_is_capped(client: AsyncClient):
    session = await create_session(client)
    resp = await client.get(f"/api/sessions/{session['id']}/history", params={"limit": 100000})
    assert resp.status_code == 200
    assert resp.json()["limit"] == 500


@pytest.mark.asyncio
async def test_history_unknown_session(client: AsyncClient):
    resp = await client.get("/api/sessions/missing/history")
    assert resp.status_code == 404
    resp = await client.get("/api/sessions/missing")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_delete_history(client: AsyncClient):
    session = await create_session(client)
    for _ in range(3):
        await client.post(
            "/api/oracle/roll",
            json={"generator": "dice", "operation": "roll_dice", "session_id": session["id"]},
        )

    resp = await client.delete(f"/api/sessions/{session['id']}/history/2")
    assert resp.status_code == 200
    resp = await client.delete(f"/api/sessions/{session['id']}/history/2")
    assert resp.status_code == 404

    resp = await client.get(f"/api/sessions/{session['id']}/history")
    assert [r["seq"] for r in resp.json()["records"]] == [1, 3]

    resp = await client.delete(f"/api/sessions/{session['id']}/history")
    assert resp.json() == {"removed": 2}


@pytest.mark.asyncio
async def test_decode_known_and_unknown(client: AsyncClient):
    document = oracle.random_event(RollSource(6)).encode()
    resp = await client.post("/api/oracle/decode", json={"document": document})
    assert resp.status_code == 200
    assert resp.json() == document

    future = {**document, "kind": "from_the_future"}
    resp = await client.post("/api/oracle/decode", json={"document": future})
    assert resp.status_code == 200
    data = resp.json()
    assert data["kind"] == "from_the_future"
    assert data["diceValues"] == document["diceValues"]
    assert data["extra"] == {}
