import os
import logging

from flask import Flask, jsonify
from dotenv import load_dotenv

from push_relay.config import load_config, validate_config
from push_relay.cors import init_cors
from push_relay.errors import RelayError
from push_relay.services.push_service import PushService
from push_relay.services.relay_service import RelayService
from push_relay.services.subscription_store import SubscriptionStore

logger = logging.getLogger(__name__)


def create_app(test_config=None):
    # 1. Zmienne środowiskowe (.env) dla środowiska lokalnego
    load_dotenv()

    app = Flask(__name__, static_folder=None)

    # 2. KONFIGURACJA - brak wymaganych zmiennych rzuca ConfigError
    app.config.update(load_config())
    if test_config:
        app.config.update(test_config)
    validate_config(app.config)
    app.config["STATIC_DIR"] = os.path.abspath(app.config["STATIC_DIR"])

    # 3. CORS
    init_cors(app)

    # 4. STORE + ADAPTER PUSH (jedna instancja na aplikację)
    store = SubscriptionStore()
    push_service = PushService(
        vapid_private_key=app.config["VAPID_PRIVATE_KEY"],
        vapid_subject=app.config["VAPID_SUBJECT"],
    )
    app.extensions["push_relay"] = RelayService(store, push_service)

    # 5. BLUEPRINTY
    from push_relay.routes import api_bp
    app.register_blueprint(api_bp, url_prefix='/api')

    if os.path.isdir(app.config["STATIC_DIR"]):
        from push_relay.routes.frontend import frontend_bp
        app.register_blueprint(frontend_bp)
    else:
        logger.info(f"Brak katalogu frontendu {app.config['STATIC_DIR']} - serwuję tylko API")

    @app.errorhandler(RelayError)
    def handle_relay_error(error):
        return jsonify(error.to_dict()), error.status_code

    return app
