import json

from push_relay.config import DEFAULT_TTL
from push_relay.errors import InvalidNotification


class NotificationPayload:
    """Treść powiadomienia. Nie jest nigdzie zapisywana - tworzymy ją per request."""

    def __init__(self, title, body, ttl=DEFAULT_TTL, extras=None):
        self.title = title
        self.body = body
        self.ttl = ttl
        # Dodatkowe pola dla service workera (icon, data, ...)
        self.extras = dict(extras or {})

    @classmethod
    def from_dict(cls, data, allow_ttl=True):
        if not isinstance(data, dict):
            raise InvalidNotification()

        title = data.get("title")
        body = data.get("body")
        if not isinstance(title, str) or not title.strip():
            raise InvalidNotification()
        if not isinstance(body, str) or not body.strip():
            raise InvalidNotification()

        ttl = DEFAULT_TTL
        if allow_ttl and data.get("ttl") is not None:
            ttl = data["ttl"]
            # bool to podklasa int - odrzucamy jawnie
            if isinstance(ttl, bool) or not isinstance(ttl, int) or ttl < 0:
                raise InvalidNotification("Notification ttl must be a non-negative integer")

        extras = {k: v for k, v in data.items() if k not in ("title", "body", "ttl")}
        return cls(title, body, ttl=ttl, extras=extras)

    def to_dict(self):
        payload = dict(self.extras)
        payload["title"] = self.title
        payload["body"] = self.body
        return payload

    def to_json(self):
        # ttl to opcja dostarczenia, nie część wiadomości
        return json.dumps(self.to_dict())
