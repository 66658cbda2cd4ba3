import hmac
import logging
from functools import wraps

from flask import current_app, request

from push_relay.errors import Forbidden, Unauthorized

logger = logging.getLogger(__name__)


def require_api_token(view):
    """Przepuszcza tylko requesty z nagłówkiem 'Authorization: Bearer <API_TOKEN>'."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        header = request.headers.get("Authorization", "").strip()
        parts = header.split(None, 1)

        # Brak nagłówka albo sam schemat bez tokenu
        if len(parts) < 2:
            logger.warning(f"Odrzucono request bez tokenu: {request.path}")
            raise Unauthorized()

        scheme, token = parts
        expected = current_app.config["API_TOKEN"]
        if scheme.lower() != "bearer" or not hmac.compare_digest(token.strip().encode(), expected.encode()):
            # Tokenu nie logujemy
            logger.warning(f"Odrzucono request z błędnym tokenem: {request.path}")
            raise Forbidden()

        return view(*args, **kwargs)

    return wrapper
