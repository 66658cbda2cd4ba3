import os
from flask import Blueprint, abort, current_app, send_from_directory

frontend_bp = Blueprint('frontend', __name__)


@frontend_bp.route('/', defaults={'path': ''})
@frontend_bp.route('/<path:path>')
def spa(path):
    """Pliki z builda frontendu, a dla nieznanych ścieżek index.html (routing SPA)."""
    if path == 'api' or path.startswith('api/'):
        abort(404)

    static_dir = current_app.config["STATIC_DIR"]
    if path and os.path.isfile(os.path.join(static_dir, path)):
        return send_from_directory(static_dir, path)
    return send_from_directory(static_dir, 'index.html')
