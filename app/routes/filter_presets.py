"""
Filter preset routes — list + create saved filter configurations for the current tenant.
"""
import logging
from flask import Blueprint, request

from app import api_response as respond
from app.config import DEFAULT_ENTITY_TYPE
from app.database import get_session
from app.services.presets import (
    list_presets as list_tenant_presets,
    create_preset as create_tenant_preset,
    PresetValidationError,
    DuplicatePresetError,
)
from app.tenant import require_tenant_context

logger = logging.getLogger('routes.filter_presets')

bp = Blueprint('filter_presets', __name__)


@bp.route('/api/admin/filter-presets')
def list_presets():
    """List presets visible to the caller for one entity type."""
    ctx = require_tenant_context()
    if ctx is None:
        return respond.unauthorized()

    entity_type = request.args.get('entityType') or DEFAULT_ENTITY_TYPE
    is_public = request.args.get('isPublic') == 'true'
    include_shared = request.args.get('includeShared') != 'false'

    try:
        session = get_session()
        try:
            presets = list_tenant_presets(
                session, ctx.tenant_id, ctx.user_id,
                entity_type=entity_type,
                is_public=is_public,
                include_shared=include_shared,
            )
        finally:
            session.close()
        return respond.ok(presets)
    except Exception:
        logger.error("Failed to fetch filter presets", exc_info=True,
                     extra={'tenant_id': ctx.tenant_id})
        return respond.server_error('Failed to fetch presets')


@bp.route('/api/admin/filter-presets', methods=['POST'])
def create_preset():
    """Save a new filter preset owned by the caller."""
    ctx = require_tenant_context()
    if ctx is None:
        return respond.unauthorized()

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    try:
        session = get_session()
        try:
            preset = create_tenant_preset(session, ctx.tenant_id, ctx.user_id, data)
        finally:
            session.close()
        return respond.created(preset)
    except PresetValidationError as e:
        return respond.bad_request(str(e))
    except DuplicatePresetError as e:
        return respond.conflict(str(e))
    except Exception:
        logger.error("Failed to create filter preset", exc_info=True,
                     extra={'tenant_id': ctx.tenant_id})
        return respond.server_error('Failed to create preset')
