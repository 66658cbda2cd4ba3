from flask import current_app, jsonify
from . import api_bp


@api_bp.route('/health', methods=['GET'])
def health():
    return jsonify({"ok": True}), 200


@api_bp.route('/vapid-key', methods=['GET'])
def vapid_key():
    """Klucz publiczny VAPID - frontend sprawdza nim swoją subskrypcję."""
    return jsonify({"publicKey": current_app.config["VAPID_PUBLIC_KEY"]}), 200
