#!/usr/bin/env python3
"""
Seed filter presets for trying the API locally.

Creates one tenant with two users and a handful of presets covering:
  1. A public default preset (always listed first)
  2. A heavily used public preset
  3. Private presets owned by each user, including the same name twice
     (allowed: names are unique per owner, not per tenant)
  4. A preset for a different entity type

Usage:
    python scripts/seed_presets.py          # seed all scenarios
    python scripts/seed_presets.py --clear  # wipe seeded data first

Requires: schema migrated (`alembic upgrade head`), DATABASE_URL set
(or defaults to sqlite:///local.db).
"""
import sys
import os
import argparse
from datetime import datetime, timezone, timedelta

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.database import get_session
from app.models.user import User
from app.models.filter_preset import FilterPreset


# Prefix for seeded IDs so we can clear them
SEED_PREFIX = 'seed-'

TENANT_ID = SEED_PREFIX + 'tenant-acme'

USERS = [
    {'id': SEED_PREFIX + 'user-ada',   'name': 'Ada Okafor',   'email': 'ada@acme.test'},
    {'id': SEED_PREFIX + 'user-bruno', 'name': 'Bruno Keller', 'email': 'bruno@acme.test'},
]

PRESETS = [
    {'name': 'Active admins', 'owner': 0, 'public': True, 'default': True, 'usage': 4,
     'entity_type': 'users',
     'config': {'logic': 'AND', 'conditions': [
         {'field': 'role', 'operator': 'eq', 'value': 'ADMIN'},
         {'field': 'status', 'operator': 'eq', 'value': 'ACTIVE'},
     ]}},
    {'name': 'Signed up this month', 'owner': 1, 'public': True, 'default': False, 'usage': 27,
     'entity_type': 'users',
     'config': {'conditions': [{'field': 'createdAt', 'operator': 'gte', 'value': 'startOfMonth'}]}},
    {'name': 'My reviewers', 'owner': 0, 'public': False, 'default': False, 'usage': 2,
     'entity_type': 'users',
     'config': {'logic': 'OR', 'conditions': [
         {'field': 'role', 'operator': 'eq', 'value': 'REVIEWER'},
         {'field': 'team', 'operator': 'eq', 'value': 'QA'},
     ]}},
    {'name': 'My reviewers', 'owner': 1, 'public': False, 'default': False, 'usage': 0,
     'entity_type': 'users',
     'config': {'conditions': [{'field': 'role', 'operator': 'eq', 'value': 'REVIEWER'}]}},
    {'name': 'Overdue invoices', 'owner': 0, 'public': True, 'default': False, 'usage': 9,
     'entity_type': 'invoices',
     'config': {'conditions': [{'field': 'dueDate', 'operator': 'lt', 'value': 'today'}]}},
]


def clear_seeded(session):
    deleted = session.query(FilterPreset).filter(FilterPreset.tenant_id == TENANT_ID).delete()
    session.query(User).filter(User.id.like(SEED_PREFIX + '%')).delete(synchronize_session=False)
    session.commit()
    print(f"Cleared {deleted} seeded presets")


def seed(session):
    for u in USERS:
        if session.get(User, u['id']) is None:
            session.add(User(tenant_id=TENANT_ID, **u))
    session.flush()

    now = datetime.now(timezone.utc)
    for i, p in enumerate(PRESETS):
        owner_id = USERS[p['owner']]['id']
        session.add(FilterPreset(
            tenant_id=TENANT_ID,
            entity_type=p['entity_type'],
            name=p['name'],
            filter_config=p['config'],
            filter_logic=p['config'].get('logic') or 'AND',
            is_public=p['public'],
            is_default=p['default'],
            usage_count=p['usage'],
            created_by=owner_id,
            created_at=now - timedelta(days=len(PRESETS) - i),
        ))
    session.commit()
    print(f"Seeded {len(USERS)} users and {len(PRESETS)} presets into tenant {TENANT_ID}")
    print(f"Try: curl -H 'X-Tenant-Id: {TENANT_ID}' -H 'X-User-Id: {USERS[0]['id']}' "
          f"http://localhost:8080/api/admin/filter-presets")


def main():
    parser = argparse.ArgumentParser(description='Seed filter presets for local dev')
    parser.add_argument('--clear', action='store_true', help='wipe seeded data first')
    args = parser.parse_args()

    session = get_session()
    try:
        if args.clear:
            clear_seeded(session)
        seed(session)
    finally:
        session.close()


if __name__ == '__main__':
    main()
