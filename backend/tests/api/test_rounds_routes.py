"""Round Routes: start/stop over HTTP, including rejected transitions.

Tests cover:
    - start answers the fresh status with is_running true
    - start twice -> 409 ROUND_ALREADY_RUNNING with exactly one open round
    - stop on idle -> 409 ROUND_NOT_RUNNING
    - unknown group -> 404, invalid body -> 400
"""

import pytest


async def test_start_round(client, group_id):
    res = await client.post("/api/v1/rounds/start", json={"group_id": group_id})

    assert res.status_code == 200
    body = res.json()
    assert body["selected_group_id"] == group_id
    assert body["state"]["is_running"] is True
    assert body["state"]["last_stop_str"] == "In progress..."
    assert body["state"]["current_round_id"] is not None


async def test_start_twice_conflicts(client, group_id):
    await client.post("/api/v1/rounds/start", json={"group_id": group_id})

    res = await client.post("/api/v1/rounds/start", json={"group_id": group_id})

    assert res.status_code == 409
    assert res.json()["error"]["code"] == "ROUND_ALREADY_RUNNING"
    assert res.json()["error"]["context"]["group_id"] == group_id

    csv_res = await client.get("/api/v1/export/csv", params={"group_id": group_id})
    rows = csv_res.text.strip().splitlines()
    assert len(rows) == 2
    assert rows[1].endswith("In Progress")


async def test_stop_round(client, group_id):
    await client.post("/api/v1/rounds/start", json={"group_id": group_id})

    res = await client.post("/api/v1/rounds/stop", json={"group_id": group_id})

    assert res.status_code == 200
    state = res.json()["state"]
    assert state["is_running"] is False
    assert state["current_round_id"] is None
    assert state["last_stop_str"] not in ("Never", "In progress...")


async def test_stop_when_idle_conflicts(client, group_id):
    res = await client.post("/api/v1/rounds/stop", json={"group_id": group_id})

    assert res.status_code == 409
    error = res.json()["error"]
    assert error["code"] == "ROUND_NOT_RUNNING"
    assert error["category"] == "invalid_state"


@pytest.mark.parametrize("path", ["/api/v1/rounds/start", "/api/v1/rounds/stop"])
async def test_unknown_group_not_found(client, path):
    res = await client.post(path, json={"group_id": 999})
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


@pytest.mark.parametrize("body", [{}, {"group_id": 0}, {"group_id": "abc"}])
async def test_invalid_body_rejected(client, body):
    res = await client.post("/api/v1/rounds/start", json=body)
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
