"""Rejestracja, odczyt i usuwanie ostatniej subskrypcji."""
from conftest import SUBSCRIPTION


def test_register_success(client, store):
    r = client.post("/api/push/register", json=SUBSCRIPTION)
    assert r.status_code == 201
    assert r.get_json() == {"ok": True}
    assert store.get().endpoint == "https://push.example/abc"


def test_register_without_endpoint(client, store):
    r = client.post("/api/push/register", json={"keys": {"p256dh": "p1", "auth": "a1"}})
    assert r.status_code == 400
    j = r.get_json()
    assert j["ok"] is False
    assert j["reason"]
    assert store.get() is None


def test_register_missing_auth_key_keeps_previous(client, store):
    client.post("/api/push/register", json=SUBSCRIPTION)

    r = client.post(
        "/api/push/register",
        json={"endpoint": "https://push.example/other", "keys": {"p256dh": "p2"}},
    )
    assert r.status_code == 400
    assert store.get().endpoint == "https://push.example/abc"


def test_register_non_json_body(client, store):
    r = client.post("/api/push/register", data="not json", content_type="text/plain")
    assert r.status_code == 400
    assert store.get() is None


def test_last_subscription_empty(client):
    r = client.get("/api/push/last-subscription")
    assert r.status_code == 404
    j = r.get_json()
    assert j["ok"] is False
    assert "reason" in j


def test_last_subscription_returns_exact_object(client):
    sub = dict(SUBSCRIPTION, expirationTime=None)
    client.post("/api/push/register", json=sub)

    r = client.get("/api/push/last-subscription")
    assert r.status_code == 200
    assert r.get_json() == sub


def test_last_write_wins(client):
    second = {"endpoint": "https://push.example/def", "keys": {"p256dh": "p2", "auth": "a2"}}
    client.post("/api/push/register", json=SUBSCRIPTION)
    client.post("/api/push/register", json=second)

    r = client.get("/api/push/last-subscription")
    assert r.get_json() == second


def test_delete_clears_subscription(client, store):
    client.post("/api/push/register", json=SUBSCRIPTION)

    r = client.delete("/api/push/last-subscription")
    assert r.status_code == 200
    assert r.get_json() == {"ok": True}
    assert store.get() is None
    assert client.get("/api/push/last-subscription").status_code == 404


def test_delete_on_empty_store(client):
    r = client.delete("/api/push/last-subscription")
    assert r.status_code == 200
    assert r.get_json() == {"ok": True}
