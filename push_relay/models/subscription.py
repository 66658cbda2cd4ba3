import copy

from push_relay.errors import InvalidSubscription


def _non_empty_str(value):
    return isinstance(value, str) and value.strip() != ""


class Subscription:
    """
    Subskrypcja push z przeglądarki (PushSubscription.toJSON()).

    Trzymamy cały obiekt w oryginalnej postaci, żeby GET last-subscription
    zwracał dokładnie to, co przyszło przy rejestracji (np. expirationTime).
    """

    def __init__(self, data):
        self._data = copy.deepcopy(data)

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict) or not _non_empty_str(data.get("endpoint")):
            raise InvalidSubscription()

        keys = data.get("keys")
        if not isinstance(keys, dict):
            raise InvalidSubscription()
        if not _non_empty_str(keys.get("p256dh")) or not _non_empty_str(keys.get("auth")):
            raise InvalidSubscription()

        return cls(data)

    @property
    def endpoint(self):
        return self._data["endpoint"]

    @property
    def p256dh(self):
        return self._data["keys"]["p256dh"]

    @property
    def auth(self):
        return self._data["keys"]["auth"]

    def to_dict(self):
        return copy.deepcopy(self._data)

    def to_info(self):
        """Format subscription_info dla pywebpush."""
        return {
            "endpoint": self.endpoint,
            "keys": {"p256dh": self.p256dh, "auth": self.auth},
        }

    def __repr__(self):
        return f"<Subscription {self.endpoint[:40]}>"
