import logging

from push_relay.errors import (
    DeliveryFailed,
    InvalidNotification,
    NoSubscription,
    SubscriptionGone,
    SubscriptionNotFound,
)
from push_relay.models import NotificationPayload, Subscription
from push_relay.services.push_service import DeliveryError

logger = logging.getLogger(__name__)


class RelayService:
    """
    Logika endpointów /api/push/*.
    Store i adapter push są wstrzykiwane, routy tylko zamieniają wynik na JSON.
    """

    def __init__(self, store, push_service):
        self.store = store
        self.push_service = push_service

    def register(self, data):
        subscription = Subscription.from_dict(data)
        self.store.put(subscription)
        return subscription

    def last_subscription(self):
        subscription = self.store.get()
        if subscription is None:
            raise SubscriptionNotFound()
        return subscription

    def clear(self):
        self.store.clear()

    def send_simple(self, data):
        """Wysyła {title, body} do zapisanej subskrypcji (TTL domyślny)."""
        # 1. Bez subskrypcji nie ma do kogo wysyłać - sprawdzamy przed treścią
        subscription = self.store.get()
        if subscription is None:
            raise NoSubscription()

        # 2. Walidacja treści
        data = data if isinstance(data, dict) else {}
        try:
            notification = NotificationPayload.from_dict(
                {"title": data.get("title"), "body": data.get("body")},
                allow_ttl=False,
            )
        except InvalidNotification:
            raise InvalidNotification('Request must include "title" and "body".')

        # 3. Wysyłka, martwy endpoint usuwamy ze store
        try:
            return self.push_service.deliver(subscription, notification)
        except DeliveryError as ex:
            if ex.gone:
                self.store.discard(subscription)
                logger.info(f"Push service zwrócił {ex.status_code} - subskrypcja wygasła")
                raise SubscriptionGone(
                    "Subscription is invalid or expired. It has been removed.",
                    status=ex.status_code,
                )
            logger.error(f"Błąd WebPush (simple) [{ex.status_code}]: {ex.reason}")
            raise DeliveryFailed(status=ex.status_code)

    def send_detailed(self, data):
        """Wysyła do subskrypcji podanej w requeście. Store zostaje nietknięty."""
        data = data if isinstance(data, dict) else {}
        subscription = Subscription.from_dict(data.get("subscription"))
        notification = NotificationPayload.from_dict(data.get("notification"))

        try:
            return self.push_service.deliver(subscription, notification)
        except DeliveryError as ex:
            if ex.gone:
                logger.info(f"Push service zwrócił {ex.status_code} dla {subscription!r}")
                raise SubscriptionGone(status=ex.status_code)
            logger.error(f"Błąd WebPush (send) [{ex.status_code}]: {ex.reason}")
            raise DeliveryFailed(status=ex.status_code)
