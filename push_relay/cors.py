import logging
import re
from urllib.parse import urlparse

from flask_cors import CORS

from push_relay.errors import ConfigError

logger = logging.getLogger(__name__)


def allowed_hostnames(origins):
    """
    Zbiór hostów z ALLOWED_ORIGINS.
    Dla każdego hosta dokładamy też wariant z/bez 'www.'.
    """
    hostnames = set()
    for origin in origins:
        hostname = urlparse(origin).hostname
        if not hostname:
            logger.warning(f"[CORS] Niepoprawny origin w ALLOWED_ORIGINS: \"{origin}\"")
            continue

        hostnames.add(hostname)
        if hostname.startswith("www."):
            hostnames.add(hostname[4:])
        else:
            hostnames.add(f"www.{hostname}")
    return hostnames


def origin_patterns(hostnames):
    """Regexy dla flask-cors: dowolny schemat i port, ale tylko dozwolony host."""
    return [
        rf"^[a-zA-Z][a-zA-Z0-9+.-]*://{re.escape(host)}(:\d+)?$"
        for host in sorted(hostnames)
    ]


def init_cors(app):
    origins = app.config["ALLOWED_ORIGINS"]
    hostnames = allowed_hostnames(origins)

    if not hostnames:
        if app.config["APP_ENV"] == "production":
            raise ConfigError(["ALLOWED_ORIGINS"])
        # Pusta lista = odbijamy dowolny origin
        CORS(app, resources={r"/api/*": {"origins": "*"}})
        return

    logger.info(f"[CORS] Dozwolone hosty: {', '.join(sorted(hostnames))}")
    CORS(app, resources={r"/api/*": {"origins": origin_patterns(hostnames)}})
