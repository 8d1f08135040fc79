import pytest


def test_current_number_at_fixed_instant(client):
    res = client.get("/api/current-number")
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    data = body["data"]
    assert data["number"] == 49
    assert data["components"] == {"hour": 14, "minute": 5, "second": 30}
    assert data["formula"] == "(hour + minute + second) % 100"
    assert data["timestamp"].endswith("Z")


def test_predict_correct(client):
    res = client.post("/api/predict", json={"prediction": 49, "sessionId": "abc"})
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["predicted"] == 49
    assert data["actual"] == 49
    assert data["correct"] is True
    assert data["sessionId"] == "abc"
    assert data["timestamp"]


def test_predict_correct_only_for_current_number(client):
    for p in range(100):
        data = client.post("/api/predict", json={"prediction": p}).json()["data"]
        assert data["correct"] is (p == 49), p
        assert data["actual"] == 49


def test_predict_without_session_id(client):
    res = client.post("/api/predict", json={"prediction": 12})
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["correct"] is False
    assert data["sessionId"] is None


@pytest.mark.parametrize("value", [-1, 100, 150, "50", 49.5, True, None, [49], {"n": 49}])
def test_predict_rejects_invalid_values(client, value):
    res = client.post("/api/predict", json={"prediction": value, "sessionId": "abc"})
    assert res.status_code == 400
    body = res.json()
    assert body["success"] is False
    assert body["error"] == "Prediction must be a number between 0 and 99"


def test_predict_rejects_missing_prediction(client):
    res = client.post("/api/predict", json={"sessionId": "abc"})
    assert res.status_code == 400
    assert res.json()["success"] is False


def test_predict_rejects_non_object_body(client):
    res = client.post("/api/predict", json=[49])
    assert res.status_code == 400
    assert res.json()["success"] is False


def test_predict_rejects_malformed_json(client):
    res = client.post("/api/predict", content="{not json", headers={"content-type": "application/json"})
    assert res.status_code == 400
    body = res.json()
    assert body == {"success": False, "error": "Request body must be valid JSON"}


def test_system_info(client):
    res = client.get("/api/system-info")
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["algorithm"] == "Time-Based Pattern"
    assert data["formula"] == "(hour + minute + second) % 100"
    assert data["range"] == "0 - 99"
    assert data["updateFrequency"] == "Every second"
    assert data["maxAttempts"] == 3
    assert data["requiredCorrect"] == 3
    assert data["serverTime"].endswith("Z")


def test_current_number_failure_is_500(broken_client):
    res = broken_client.get("/api/current-number")
    assert res.status_code == 500
    assert res.json() == {"success": False, "error": "Failed to generate random number"}


def test_predict_failure_is_500(broken_client):
    res = broken_client.post("/api/predict", json={"prediction": 10})
    assert res.status_code == 500
    assert res.json() == {"success": False, "error": "Failed to process prediction"}


def test_predict_validation_runs_before_clock(broken_client):
    res = broken_client.post("/api/predict", json={"prediction": 150})
    assert res.status_code == 400


def test_system_info_failure_is_500(broken_client):
    res = broken_client.get("/api/system-info")
    assert res.status_code == 500
    assert res.json() == {"success": False, "error": "Failed to get system information"}


def test_predict_form_value_is_a_string(client):
    res = client.post("/api/predict", data={"prediction": "49", "sessionId": "abc"})
    assert res.status_code == 400
    assert res.json()["success"] is False
