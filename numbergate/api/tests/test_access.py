from numbergate.api.deps import get_app_settings
from numbergate.api.server import app
from numbergate.config.settings import Settings


def test_log_access_echoes_record(client):
    payload = {
        "sessionId": "abc",
        "attempts": 3,
        "userAgent": "pytest",
        "predictions": [{"predicted": 49, "actual": 49}],
    }
    res = client.post("/api/log-access", json=payload)
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["message"] == "Access logged successfully"
    data = body["data"]
    for key, value in payload.items():
        assert data[key] == value
    assert data["timestamp"].endswith("Z")
    assert data["ip"] == "testclient"


def test_log_access_keeps_unknown_fields(client):
    res = client.post("/api/log-access", json={"sessionId": "x", "score": 7, "nested": {"a": [1, 2]}})
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["score"] == 7
    assert data["nested"] == {"a": [1, 2]}
    assert data["attempts"] is None
    assert data["userAgent"] is None
    assert "timestamp" in data and "ip" in data


def test_log_access_accepts_any_shape(client):
    for payload in ([1, 2, 3], "hello", 42, None):
        res = client.post("/api/log-access", json=payload)
        assert res.status_code == 200, payload
        data = res.json()["data"]
        assert data["sessionId"] is None
        assert data["ip"] == "testclient"


def test_log_access_uses_forwarded_for_when_trusted(client):
    app.dependency_overrides[get_app_settings] = lambda: Settings(api={"trust_forwarded_for": True})
    res = client.post(
        "/api/log-access",
        json={"sessionId": "abc"},
        headers={"X-Forwarded-For": "203.0.113.7, 10.0.0.1"},
    )
    assert res.json()["data"]["ip"] == "203.0.113.7"


def test_log_access_ignores_forwarded_for_by_default(client):
    res = client.post("/api/log-access", json={}, headers={"X-Forwarded-For": "203.0.113.7"})
    assert res.json()["data"]["ip"] == "testclient"


def test_log_access_failure_is_500(broken_client):
    res = broken_client.post("/api/log-access", json={"sessionId": "abc"})
    assert res.status_code == 500
    assert res.json() == {"success": False, "error": "Failed to log access"}


def test_log_access_echoes_keys_as_sent(client):
    payload = {"sessionId": "camel", "session_id": "snake", "user_agent": "ua", "attempts": 2}
    res = client.post("/api/log-access", json=payload)
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["sessionId"] == "camel"
    assert data["session_id"] == "snake"
    assert data["user_agent"] == "ua"
    assert data["userAgent"] is None
    assert data["attempts"] == 2


def test_log_access_snake_case_only(client):
    data = client.post("/api/log-access", json={"session_id": "s1", "user_agent": "ua"}).json()["data"]
    assert data["session_id"] == "s1"
    assert data["user_agent"] == "ua"
    assert data["sessionId"] is None


def test_log_access_accepts_form_body(client):
    res = client.post("/api/log-access", data={"sessionId": "abc", "attempts": "3", "browser": "firefox"})
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["sessionId"] == "abc"
    assert data["attempts"] == "3"
    assert data["browser"] == "firefox"
    assert data["ip"] == "testclient"
