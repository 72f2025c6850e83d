"""
Database engine + session factory.

The engine is created lazily on first use so importing this module is always
safe — defaults to SQLite for local dev, Postgres in production.
get_session() always returns a real session.
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from app.config import DATABASE_URL


class Base(DeclarativeBase):
    pass


_engine = None
_session_factory = None


def normalize_url(url):
    """Railway/Heroku inject postgres:// but SQLAlchemy 2.x requires postgresql://"""
    return url.replace('postgres://', 'postgresql://', 1)


def get_engine():
    """Return the process-wide engine, creating it on first call."""
    global _engine
    if _engine is None:
        url = normalize_url(DATABASE_URL)
        # SQLite needs different engine kwargs than Postgres
        if url.startswith('sqlite'):
            _engine = create_engine(url, connect_args={'check_same_thread': False})
        else:
            _engine = create_engine(url, pool_pre_ping=True, pool_size=5, max_overflow=10)
    return _engine


def get_session():
    """Return a new DB session."""
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(bind=get_engine())
    return _session_factory()
