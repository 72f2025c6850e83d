"""Shared test fixtures."""
import pytest
from datetime import datetime, timezone
from unittest.mock import patch
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.database import Base

TENANT = 'tenant-acme'
OTHER_TENANT = 'tenant-globex'
ALICE = 'user-alice'
BOB = 'user-bob'


@pytest.fixture
def db_engine():
    """In-memory SQLite engine with schema created."""
    engine = create_engine('sqlite:///:memory:')
    import app.models.user
    import app.models.filter_preset
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    """SQLAlchemy session bound to in-memory SQLite. Rolls back after each test."""
    Session = sessionmaker(bind=db_engine)
    session = Session()
    yield session
    session.rollback()
    session.close()


@pytest.fixture(autouse=True)
def patch_get_session(db_session):
    """Route all get_session() calls to the test session.

    We disable close() so that route handlers calling session.close()
    in their finally blocks don't invalidate the shared test session.
    """
    _real_close = db_session.close
    db_session.close = lambda: None
    with patch('app.database.get_session', return_value=db_session):
        yield db_session
    db_session.close = _real_close


@pytest.fixture
def app():
    """Flask test app."""
    from app import create_app
    app = create_app()
    app.config['TESTING'] = True
    yield app


@pytest.fixture
def client(app):
    """Flask test client."""
    with app.test_client() as c:
        yield c


@pytest.fixture
def make_user(db_session):
    """Factory fixture — inserts a User row."""
    from app.models.user import User

    def _make(user_id=ALICE, tenant_id=TENANT, name=None, image=None):
        user = User(
            id=user_id,
            tenant_id=tenant_id,
            name=name or user_id.replace('user-', '').title(),
            email=f'{user_id}@example.test',
            image=image,
        )
        db_session.add(user)
        db_session.commit()
        return user
    return _make


@pytest.fixture
def make_preset(db_session):
    """Factory fixture — inserts a FilterPreset row with sensible defaults."""
    from app.models.filter_preset import FilterPreset

    def _make(**overrides):
        defaults = dict(
            tenant_id=TENANT,
            entity_type='users',
            name='Preset',
            filter_config={'conditions': []},
            filter_logic='AND',
            is_public=False,
            is_default=False,
            usage_count=0,
            created_by=ALICE,
            created_at=datetime(2026, 1, 15, 10, 0, tzinfo=timezone.utc),
        )
        defaults.update(overrides)
        preset = FilterPreset(**defaults)
        db_session.add(preset)
        db_session.commit()
        return preset
    return _make


@pytest.fixture
def users(make_user):
    """Alice and Bob in the same tenant."""
    return {
        ALICE: make_user(ALICE, name='Alice Moreau', image='https://cdn.example.test/alice.png'),
        BOB: make_user(BOB, name='Bob Lindqvist'),
    }
