import logging
import requests
from pywebpush import webpush, WebPushException

logger = logging.getLogger(__name__)

GONE_STATUSES = (404, 410)


class DeliveryError(Exception):
    """Push service odrzucił wiadomość albo nie dało się z nim połączyć."""

    def __init__(self, status_code, reason):
        super().__init__(reason)
        # None, gdy nie było odpowiedzi (np. błąd sieci)
        self.status_code = status_code
        self.reason = reason

    @property
    def gone(self):
        return self.status_code in GONE_STATUSES


class PushService:
    """
    Adapter na pywebpush: podpis VAPID, szyfrowanie i POST do push service.
    Nie ponawiamy wysyłki i nie ustawiamy własnego timeoutu.
    """

    def __init__(self, vapid_private_key, vapid_subject):
        self.vapid_private_key = vapid_private_key
        self.vapid_subject = vapid_subject

    def deliver(self, subscription, notification):
        """Wysyła powiadomienie i zwraca kod HTTP z push service."""
        logger.debug(f"Wysyłka push do {subscription!r} (ttl={notification.ttl})")
        try:
            response = webpush(
                subscription_info=subscription.to_info(),
                data=notification.to_json(),
                vapid_private_key=self.vapid_private_key,
                # pywebpush dopisuje do claims 'aud' i 'exp', więc za każdym razem nowy dict
                vapid_claims={"sub": self.vapid_subject},
                ttl=notification.ttl,
            )
        except WebPushException as ex:
            status = ex.response.status_code if ex.response is not None else None
            reason = _response_text(ex.response) or str(ex)
            raise DeliveryError(status, reason) from ex
        except requests.RequestException as ex:
            raise DeliveryError(None, str(ex)) from ex

        return response.status_code


def _response_text(response):
    if response is None:
        return None
    try:
        return response.text
    except (AttributeError, UnicodeDecodeError):
        return None
