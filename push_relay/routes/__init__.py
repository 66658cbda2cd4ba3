from flask import Blueprint, current_app

api_bp = Blueprint('api', __name__)


def get_relay():
    """RelayService przypięty do aplikacji w create_app()."""
    return current_app.extensions["push_relay"]


from . import status, subscriptions, push  # noqa: E402,F401
