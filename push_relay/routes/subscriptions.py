from flask import request, jsonify
from . import api_bp, get_relay


@api_bp.route('/push/register', methods=['POST'])
def register():
    data = request.get_json(silent=True)
    get_relay().register(data)
    return jsonify({"ok": True}), 201


@api_bp.route('/push/last-subscription', methods=['GET'])
def get_last_subscription():
    subscription = get_relay().last_subscription()
    return jsonify(subscription.to_dict()), 200


@api_bp.route('/push/last-subscription', methods=['DELETE'])
def delete_last_subscription():
    get_relay().clear()
    return jsonify({"ok": True}), 200
