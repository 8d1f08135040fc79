from fastapi.testclient import TestClient

from numbergate.api.server import app


def test_root_lists_endpoints(client):
    res = client.get("/")
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["message"] == "Random Number Backend API"
    assert body["version"]
    assert "POST /api/predict" in body["endpoints"]
    assert "GET /api/current-number" in body["endpoints"]


def test_health(client):
    res = client.get("/api/health")
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["uptime"] >= 0
    assert body["timestamp"].endswith("Z")
    assert "running" in body["message"]


def test_security_headers(client):
    res = client.get("/api/health")
    assert res.headers["X-Content-Type-Options"] == "nosniff"
    assert res.headers["X-Frame-Options"] == "SAMEORIGIN"
    assert "X-Request-ID" in res.headers


def test_unknown_route_uses_envelope(client):
    res = client.get("/api/nope")
    assert res.status_code == 404
    assert res.json() == {"success": False, "error": "Not found"}


def test_wrong_method(client):
    res = client.get("/api/predict")
    assert res.status_code == 405
    assert res.json()["success"] is False


def test_unhandled_exception_is_generic_500():
    @app.get("/api/_boom", include_in_schema=False)
    async def boom():
        raise ValueError("secret internal detail")

    try:
        with TestClient(app, raise_server_exceptions=False) as c:
            res = c.get("/api/_boom")
        assert res.status_code == 500
        assert res.json() == {"success": False, "error": "Internal server error"}
        assert "secret" not in res.text
        assert res.headers["X-Content-Type-Options"] == "nosniff"
        assert res.headers["Referrer-Policy"] == "no-referrer"
    finally:
        app.router.routes[:] = [r for r in app.router.routes if getattr(r, "path", None) != "/api/_boom"]
