"""
Centralized configuration — all env vars and preset defaults.
"""
import os


# ── Logging ──────────────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
LOG_FORMAT = os.getenv('LOG_FORMAT', 'text')

# ── Database ─────────────────────────────────────────────────────────────────
DATABASE_URL = os.getenv('DATABASE_URL', 'sqlite:///local.db')

# ── Flask ────────────────────────────────────────────────────────────────────
SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-change-me')

# ── Tenant context ───────────────────────────────────────────────────────────
# Set by the upstream auth gateway on every authenticated request.
TENANT_HEADER = os.getenv('TENANT_HEADER', 'X-Tenant-Id')
USER_HEADER = os.getenv('USER_HEADER', 'X-User-Id')

# ── Filter presets ───────────────────────────────────────────────────────────
DEFAULT_ENTITY_TYPE = os.getenv('DEFAULT_ENTITY_TYPE', 'users')
DEFAULT_FILTER_LOGIC = os.getenv('DEFAULT_FILTER_LOGIC', 'AND')
