"""
Tenant context — who is calling, and on behalf of which tenant.

Authentication happens upstream; by the time a request reaches us the gateway
has set the tenant and user id headers. Browser sessions established by the
admin UI carry the same ids in the Flask session instead.
"""
from dataclasses import dataclass
from typing import Optional

from flask import g, request, session

from app.config import TENANT_HEADER, USER_HEADER


@dataclass
class TenantContext:
    tenant_id: Optional[str] = None
    user_id: Optional[str] = None

    @property
    def is_complete(self):
        return bool(self.tenant_id) and bool(self.user_id)


def _clean(value):
    return (value.strip() or None) if isinstance(value, str) else None


def load_tenant_context():
    """before_request hook: take both ids from the headers, or both from the session.

    The two sources are never mixed, so a header can not move a session user
    into another tenant.
    """
    tenant_id = _clean(request.headers.get(TENANT_HEADER))
    user_id = _clean(request.headers.get(USER_HEADER))
    if tenant_id or user_id:
        g.tenant_context = TenantContext(tenant_id=tenant_id, user_id=user_id)
        return
    g.tenant_context = TenantContext(
        tenant_id=_clean(session.get('tenant_id')),
        user_id=_clean(session.get('user_id')),
    )


def require_tenant_context():
    """Return the current TenantContext, or None if tenant or user is missing."""
    ctx = g.get('tenant_context')
    if ctx is None or not ctx.is_complete:
        return None
    return ctx
