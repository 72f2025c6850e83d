"""
Flask application factory.

Creates and configures the Flask app, registers all blueprints.
"""
from flask import Flask


def create_app():
    """Create and configure the Flask application."""
    from app.logging_config import configure_logging
    from app.config import SECRET_KEY

    app = Flask(__name__)

    configure_logging(app)

    # Secret key for sessions (admin UI carries tenant/user ids in the session)
    app.secret_key = SECRET_KEY

    # ── Tenant context ──────────────────────────────────────────────────
    from app.tenant import load_tenant_context
    app.before_request(load_tenant_context)

    # Register blueprints
    from app.routes.filter_presets import bp as filter_presets_bp
    from app.routes.health import bp as health_bp

    app.register_blueprint(filter_presets_bp)
    app.register_blueprint(health_bp)

    # Import models so Base.metadata knows about them (required for SQLAlchemy).
    # Schema is managed by Alembic — no create_all() call.
    import importlib
    importlib.import_module('app.models.user')
    importlib.import_module('app.models.filter_preset')

    return app
