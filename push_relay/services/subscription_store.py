import logging
import threading

logger = logging.getLogger(__name__)


class SubscriptionStore:
    """
    Jeden slot na subskrypcję, trzymany w RAM przez cały czas życia procesu.

    Każda nowa rejestracja nadpisuje poprzednią (last write wins).
    Flask obsługuje requesty w wielu wątkach, więc zmiany idą przez lock.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._subscription = None

    def put(self, subscription):
        with self._lock:
            self._subscription = subscription
        logger.info(f"Zarejestrowano nową subskrypcję: {subscription!r}")

    def get(self):
        with self._lock:
            return self._subscription

    def clear(self):
        with self._lock:
            self._subscription = None
        logger.info("Wyczyszczono zapisaną subskrypcję")

    def discard(self, subscription):
        """Czyści slot tylko, jeśli nadal jest w nim ta sama subskrypcja."""
        with self._lock:
            if self._subscription is not subscription:
                return False
            self._subscription = None
        logger.info(f"Usunięto martwą subskrypcję: {subscription!r}")
        return True
