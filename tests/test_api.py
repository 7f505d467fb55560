def test_root_and_health(client):
    assert client.get("/").json()["modules"] == ["devices", "energy"]

    health = client.get("/api/health")
    assert health.status_code == 200
    assert health.json()["status"] == "healthy"


def test_list_devices(client, seeded_devices):
    response = client.get("/api/v1/devices/")

    assert response.status_code == 200
    assert [d["id"] for d in response.json()] == [1, 2, 3]


def test_list_active_devices(client, seeded_devices):
    response = client.get("/api/v1/devices/active")

    assert response.status_code == 200
    assert {d["id"] for d in response.json()} == {1, 3}


def test_get_device(client, seeded_devices):
    response = client.get("/api/v1/devices/2")

    assert response.status_code == 200
    assert response.json()["name"] == "TV"
    assert response.json()["power_usage_watts"] == 1000


def test_get_unknown_device_is_404(client, seeded_devices):
    assert client.get("/api/v1/devices/99").status_code == 404


def test_toggle_device(client, seeded_devices):
    response = client.post("/api/v1/devices/2/toggle", json={"turn_on": True})

    assert response.status_code == 200
    assert response.json() == {"device_id": 2, "is_on": True}
    assert client.get("/api/v1/devices/2").json()["is_on"] is True


def test_toggle_unknown_device_is_404(client, seeded_devices):
    response = client.post("/api/v1/devices/99/toggle", json={"turn_on": True})

    assert response.status_code == 404
    assert "99" in response.json()["detail"]


def test_toggle_requires_body(client, seeded_devices):
    assert client.post("/api/v1/devices/1/toggle", json={}).status_code == 422


def test_usage_summary(client, seeded_devices):
    response = client.get("/api/v1/energy/usage")

    assert response.status_code == 200
    body = response.json()
    assert body["current_usage_kwh"] == 0.75
    assert body["active_devices"] == 2


def test_overload_check_sends_alert(client, notifier, seeded_devices):
    client.put("/api/v1/energy/plan/limit", json={"daily_limit_kwh": 0.5})

    response = client.post("/api/v1/energy/overload-check")

    assert response.status_code == 204
    assert response.content == b""
    notifier.send_alert.assert_called_once()


def test_overload_check_quiet_under_limit(client, notifier, seeded_devices):
    client.put("/api/v1/energy/plan/limit", json={"daily_limit_kwh": 0.75})

    assert client.post("/api/v1/energy/overload-check").status_code == 204
    notifier.send_alert.assert_not_called()


def test_update_and_get_plan(client):
    response = client.put("/api/v1/energy/plan/limit", json={"daily_limit_kwh": 8.25})

    assert response.status_code == 200
    assert response.json()["daily_limit_kwh"] == 8.25
    assert client.get("/api/v1/energy/plan").json()["daily_limit_kwh"] == 8.25


def test_negative_limit_rejected(client):
    response = client.put("/api/v1/energy/plan/limit", json={"daily_limit_kwh": -1})

    assert response.status_code == 422
