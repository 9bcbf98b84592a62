# contacts_api/routes/health_routes.py
from flask import Blueprint, jsonify

bp = Blueprint('health', __name__)

@bp.route('/healthz', methods=['GET'])
def health_check():
    """Liveness probe. Does not touch the database."""
    return jsonify({'status': 'ok'})
