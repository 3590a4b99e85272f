"""Health endpoint and cross-cutting HTTP behaviour."""

from __future__ import annotations


def test_health_without_cache(client):
    resp = client.get("/api/v1/health")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["status"] == "ok"
    assert body["db"] == "ok"
    assert body["cache"] == "disabled"


def test_health_with_cache(client, fake_redis):
    body = client.get("/api/v1/health").get_json()
    assert body["cache"] == "ok"
    assert body["status"] == "ok"


def test_request_id_is_echoed(client):
    resp = client.get("/api/v1/health", headers={"X-Request-ID": "req-123"})
    assert resp.headers["X-Request-ID"] == "req-123"

    resp = client.get("/api/v1/health")
    assert resp.headers["X-Request-ID"]


def test_unknown_route_is_problem_json(client):
    resp = client.get("/api/v1/nope", headers={"X-Request-ID": "req-404"})
    assert resp.status_code == 404
    assert resp.mimetype == "application/problem+json"
    problem = resp.get_json()
    assert problem["code"] == "not_found"
    assert problem["request_id"] == "req-404"
    assert problem["instance"] == "/api/v1/nope"
