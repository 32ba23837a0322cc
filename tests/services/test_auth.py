"""Caller Identity: header/query credential resolution on task routes.

Invariants:
    - x-user-id header preferred, userId query parameter as fallback
    - Missing, malformed, or unknown identifiers -> 401 UNAUTHORIZED
    - Upper-case UUIDs are accepted
"""

from uuid import uuid4


async def test_missing_credential_returns_401(client):
    res = await client.get("/api/tasks")
    assert res.status_code == 401
    body = res.json()
    assert body["success"] is False
    assert body["error"]["code"] == "UNAUTHORIZED"
    assert "x-user-id" in body["error"]["message"]


async def test_missing_credential_on_create_returns_401(client):
    res = await client.post("/api/tasks", json={"title": "Task"})
    assert res.status_code == 401


async def test_malformed_credential_returns_401(client):
    res = await client.get("/api/tasks", headers={"x-user-id": "not-a-uuid"})
    assert res.status_code == 401
    assert res.json()["error"]["message"] == "Invalid user identifier format."


async def test_unknown_user_returns_401(client):
    res = await client.get("/api/tasks", headers={"x-user-id": str(uuid4())})
    assert res.status_code == 401
    assert res.json()["error"]["message"] == "User not found."


async def test_query_parameter_fallback(client, alice):
    res = await client.get(f"/api/tasks?userId={alice.id}")
    assert res.status_code == 200


async def test_header_wins_over_query_parameter(client, alice, bob, insert_task):
    await insert_task(alice, "Alice only")
    res = await client.get(
        f"/api/tasks?userId={bob.id}", headers={"x-user-id": str(alice.id)},
    )
    assert res.status_code == 200
    assert [t["title"] for t in res.json()["data"]] == ["Alice only"]


async def test_upper_case_credential_accepted(client, alice):
    res = await client.get(
        "/api/tasks", headers={"x-user-id": str(alice.id).upper()},
    )
    assert res.status_code == 200


async def test_user_routes_need_no_credential(client):
    res = await client.post(
        "/api/users", json={"email": "open@example.com", "name": "Open"},
    )
    assert res.status_code == 201
