class ConfigError(Exception):
    """Brak wymaganej konfiguracji - aplikacja nie może wystartować."""

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(f"Missing required environment variables: {', '.join(self.missing)}")


class RelayError(Exception):
    """Błąd zwracany klientowi jako {"ok": false, "reason": ...}."""

    status_code = 500
    reason = "Internal server error"

    def __init__(self, reason=None, status=None):
        super().__init__(reason or self.reason)
        if reason:
            self.reason = reason
        # Kod zwrócony przez push service (jeśli był)
        self.status = status

    def to_dict(self):
        payload = {"ok": False, "reason": self.reason}
        if self.status is not None or self.status_code in (410, 500):
            payload["status"] = self.status
        return payload


class InvalidSubscription(RelayError):
    status_code = 400
    reason = "Invalid subscription object"


class InvalidNotification(RelayError):
    status_code = 400
    reason = "Notification object must contain title and body"


class NoSubscription(RelayError):
    status_code = 400
    reason = "No subscription is registered on the server."


class SubscriptionNotFound(RelayError):
    status_code = 404
    reason = "No subscription registered yet"


class Unauthorized(RelayError):
    status_code = 401
    reason = "Authorization token is required"


class Forbidden(RelayError):
    status_code = 403
    reason = "Invalid authorization token"


class SubscriptionGone(RelayError):
    status_code = 410
    reason = "Subscription gone or invalid"


class DeliveryFailed(RelayError):
    status_code = 500
    reason = "Failed to send notification"
