import os

from push_relay.errors import ConfigError

REQUIRED_KEYS = ("VAPID_PUBLIC_KEY", "VAPID_PRIVATE_KEY", "VAPID_SUBJECT", "API_TOKEN")

DEFAULT_TTL = 60


def load_config(environ=None):
    """Czyta konfigurację ze zmiennych środowiskowych (po load_dotenv)."""
    env = os.environ if environ is None else environ

    # Frontend (Vite) trzyma klucz publiczny pod własną nazwą - akceptujemy obie
    public_key = env.get("VAPID_PUBLIC_KEY") or env.get("VITE_VAPID_PUBLIC_KEY")

    return {
        "VAPID_PUBLIC_KEY": public_key,
        "VAPID_PRIVATE_KEY": env.get("VAPID_PRIVATE_KEY"),
        "VAPID_SUBJECT": env.get("VAPID_SUBJECT"),
        "API_TOKEN": env.get("API_TOKEN"),
        "ALLOWED_ORIGINS": parse_origins(env.get("ALLOWED_ORIGINS", "")),
        "APP_ENV": env.get("APP_ENV", "development"),
        "STATIC_DIR": env.get("STATIC_DIR", "dist"),
        "PORT": int(env.get("PORT", 8080)),
    }


def parse_origins(raw):
    """'https://a.pl/, https://b.pl' -> ['https://a.pl', 'https://b.pl']"""
    if isinstance(raw, (list, tuple)):
        items = raw
    else:
        items = (raw or "").split(",")
    return [item.strip().rstrip("/") for item in items if item and item.strip()]


def validate_config(config):
    missing = [key for key in REQUIRED_KEYS if not config.get(key)]
    if missing:
        raise ConfigError(missing)
