from tests.helpers import befriend, register


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "healthy"


def test_detailed_health_reports_store_sizes(client):
    a = register(client, "Alice", "1")
    b = register(client, "Bob", "2")
    befriend(client, a, b)
    client.post("/api/send-message", json={"fromUser": a, "toUser": b, "text": "hi"})

    r = client.get("/health/detailed")
    assert r.status_code == 200
    stores = r.json()["stores"]
    assert (stores["users"], stores["friendships"], stores["messages"]) == (2, 1, 1)
    assert stores["lock_latency_ms"] >= 0


def test_detailed_health_requires_key_when_configured(client, fresh_settings, monkeypatch):
    monkeypatch.setenv("ADMIN_API_KEY", "s3cret")
    fresh_settings.cache_clear()

    assert client.get("/health/detailed").status_code == 401
    assert client.get("/health/detailed", headers={"X-API-Key": "wrong"}).status_code == 401
    assert client.get("/health/detailed", headers={"X-API-Key": "s3cret"}).status_code == 200


def test_detailed_health_without_key_outside_development(client, fresh_settings, monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.delenv("ADMIN_API_KEY", raising=False)
    fresh_settings.cache_clear()

    assert client.get("/health/detailed").status_code == 500
