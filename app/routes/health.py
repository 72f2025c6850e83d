"""
Health routes — liveness + database reachability.
"""
import logging
from flask import Blueprint, jsonify
from sqlalchemy import text

from app.database import get_session

logger = logging.getLogger('routes.health')

bp = Blueprint('health', __name__)


@bp.route('/health')
def health_check():
    """Health check endpoint."""
    return jsonify({"status": "healthy"}), 200


@bp.route('/health/db')
def database_health():
    """Ping the database with SELECT 1."""
    try:
        session = get_session()
        try:
            session.execute(text('SELECT 1'))
        finally:
            session.close()
        return jsonify({'status': 'healthy', 'database': 'ok'}), 200
    except Exception:
        logger.error("Database health check failed", exc_info=True)
        return jsonify({'status': 'unhealthy', 'database': 'unreachable'}), 503
