from flask import request, jsonify
from push_relay.auth import require_api_token
from . import api_bp, get_relay


@api_bp.route('/push/simple', methods=['POST'])
@require_api_token
def send_simple():
    """Powiadomienie do ostatnio zarejestrowanej subskrypcji."""
    status = get_relay().send_simple(request.get_json(silent=True))
    return jsonify({"ok": True, "status": status}), 200


@api_bp.route('/push/send', methods=['POST'])
@require_api_token
def send_detailed():
    """Powiadomienie do subskrypcji podanej w body: {subscription, notification}."""
    status = get_relay().send_detailed(request.get_json(silent=True))
    return jsonify({"ok": True, "status": status}), 200
