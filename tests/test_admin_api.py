import pytest
from fastapi.testclient import TestClient

from lotto_backend.app import create_app
from lotto_backend.auth_utils import AdminGuard
from lotto_backend.errors import Unauthorized

from .conftest import ADMIN_PASSWORD, HOUR


def _create(client, **body):
    return client.post("/api/rooms/create", json=body).json()["roomCode"]


@pytest.mark.parametrize("password", [None, "", "wrong", ADMIN_PASSWORD + " ", ADMIN_PASSWORD.upper()])
def test_admin_rejects_bad_passwords(client, app, password):
    _create(client)
    body = {} if password is None else {"password": password}

    assert client.post("/api/admin/clear-rooms", json=body).status_code == 401
    assert client.post("/api/admin/cleanup", json=body).status_code == 401
    params = {} if password is None else {"password": password}
    resp = client.get("/api/admin/rooms-info", params=params)
    assert resp.status_code == 401
    assert resp.json()["error"]
    assert len(app.state.store) == 1


def test_admin_disabled_without_configured_password(clock):
    app = create_app(clock=clock, admin_password=None)
    with TestClient(app) as client:
        _create(client)
        resp = client.post("/api/admin/clear-rooms", json={"password": "anything"})
        assert resp.status_code == 401
        assert len(app.state.store) == 1


@pytest.mark.parametrize("body", [{"password": 12345}, {"password": True}, {"password": ["x"]}, ["x"], "x"])
def test_admin_rejects_non_string_passwords(client, app, body):
    _create(client)
    assert client.post("/api/admin/clear-rooms", json=body).status_code == 401
    resp = client.post("/api/admin/cleanup", json=body)
    assert resp.status_code == 401
    assert resp.json()["error"]
    assert len(app.state.store) == 1


def test_admin_rejects_oversized_password(client, app):
    _create(client)
    huge = "x" * 5000
    assert client.post("/api/admin/clear-rooms", json={"password": huge}).status_code == 401
    assert client.post("/api/admin/cleanup", params={"password": huge}).status_code == 401
    assert client.get("/api/admin/rooms-info", params={"password": huge}).status_code == 401
    assert len(app.state.store) == 1


def test_admin_password_read_from_environment(clock, monkeypatch):
    monkeypatch.setenv("LOTTO_ADMIN_PASSWORD", "from-env")
    app = create_app(clock=clock)
    with TestClient(app) as client:
        _create(client)
        assert client.post("/api/admin/clear-rooms", json={"password": ADMIN_PASSWORD}).status_code == 401
        resp = client.post("/api/admin/clear-rooms", json={"password": "from-env"})
        assert resp.status_code == 200
        assert resp.json()["deletedCount"] == 1


def test_clear_rooms(client, app):
    for _ in range(3):
        _create(client)
    resp = client.post("/api/admin/clear-rooms", json={"password": ADMIN_PASSWORD})
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["deletedCount"] == 3
    assert body["clearedAt"]
    assert "3" in body["message"]
    assert client.get("/api/rooms").json() == []


def test_clear_rooms_accepts_query_password(client):
    _create(client)
    resp = client.post("/api/admin/clear-rooms", params={"password": ADMIN_PASSWORD})
    assert resp.status_code == 200
    assert resp.json()["deletedCount"] == 1


def test_cleanup_removes_only_expired(client, clock):
    stale = _create(client, hostName="Alice")
    clock.advance(2 * HOUR)
    fresh = _create(client, hostName="Bob")
    clock.advance(23 * HOUR)

    resp = client.post("/api/admin/cleanup", json={"password": ADMIN_PASSWORD})
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["deletedCount"] == 1
    assert body["deletedRooms"] == [{"code": stale, "hostName": "Alice", "ageHours": 25}]
    assert body["remainingCount"] == 1
    assert client.get(f"/api/rooms/{fresh}/info").status_code == 200


def test_rooms_info(client, clock):
    code = _create(client, hostName="Alice")
    client.post(f"/api/rooms/{code}/played", json=[1, 2])
    clock.advance(90 * 60)

    resp = client.get("/api/admin/rooms-info", params={"password": ADMIN_PASSWORD})
    assert resp.status_code == 200
    body = resp.json()
    assert body["totalRooms"] == 1
    room = body["rooms"][0]
    assert room["code"] == code
    assert room["hostName"] == "Alice"
    assert room["playedCount"] == 2
    assert room["ageMinutes"] == 90


def test_admin_guard_stores_hash_not_password():
    guard = AdminGuard("hunter2")
    assert guard.enabled
    assert "hunter2" not in vars(guard).values()
    guard.check("hunter2")
    for attempt in ("hunter3", None, 42, "h" * 5000):
        with pytest.raises(Unauthorized):
            guard.check(attempt)
