"""Fixtures: aplikacja z testową konfiguracją i podmienionym webpush."""
import pytest
import requests

from pywebpush import WebPushException

from push_relay import create_app

API_TOKEN = "test-token"

TEST_CONFIG = {
    "TESTING": True,
    "VAPID_PUBLIC_KEY": "BPublicKeyForTests",
    "VAPID_PRIVATE_KEY": "private-key-for-tests",
    "VAPID_SUBJECT": "mailto:test@example.com",
    "API_TOKEN": API_TOKEN,
    "ALLOWED_ORIGINS": [],
    "APP_ENV": "testing",
    "STATIC_DIR": "/nonexistent-push-relay-dist",
}

SUBSCRIPTION = {
    "endpoint": "https://push.example/abc",
    "keys": {"p256dh": "p1", "auth": "a1"},
}


class FakeWebPush:
    """Zapamiętuje wywołania webpush() i zwraca/rzuca ustawiony kod."""

    def __init__(self):
        self.calls = []
        self.status_code = 201
        self.fail = False

    def __call__(self, **kwargs):
        self.calls.append(kwargs)
        response = requests.Response()
        response.status_code = self.status_code
        response._content = b""
        if self.fail:
            raise WebPushException(f"Push failed: {self.status_code}", response=response)
        return response


@pytest.fixture
def webpush_mock(monkeypatch):
    fake = FakeWebPush()
    monkeypatch.setattr("push_relay.services.push_service.webpush", fake)
    return fake


@pytest.fixture
def app(webpush_mock):
    return create_app(TEST_CONFIG)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return app.extensions["push_relay"].store


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {API_TOKEN}"}
