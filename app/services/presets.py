"""
Filter preset service — tenant-scoped listing and creation.

Callers pass in an open session; this module never opens or closes one.
Visibility is one of a closed set of variants, picked by precedence:

  - PUBLIC_ONLY      → isPublic=true requested
  - PUBLIC_OR_OWNED  → default; public presets plus the caller's own
  - OWNED_ONLY       → includeShared=false
"""
import json
import logging

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError

from app.config import DEFAULT_ENTITY_TYPE, DEFAULT_FILTER_LOGIC
from app.models.filter_preset import FilterPreset

logger = logging.getLogger('services.presets')

# Visibility variants
PUBLIC_ONLY = 'public_only'
PUBLIC_OR_OWNED = 'public_or_owned'
OWNED_ONLY = 'owned_only'

MISSING_FIELDS_MESSAGE = 'Missing required fields: name, filterConfig'
DUPLICATE_NAME_MESSAGE = 'Preset with this name already exists'
INVALID_LOGIC_MESSAGE = 'filterConfig.logic must be a string'


class PresetError(Exception):
    """Base class for client-facing preset errors."""


class PresetValidationError(PresetError):
    """Required creation fields are missing or malformed."""
    def __init__(self, message=MISSING_FIELDS_MESSAGE):
        super().__init__(message)


class DuplicatePresetError(PresetError):
    """The caller already owns a preset with this name in this tenant."""
    def __init__(self):
        super().__init__(DUPLICATE_NAME_MESSAGE)


def select_visibility(is_public, include_shared):
    """Pick the visibility variant. is_public wins over include_shared."""
    if is_public:
        return PUBLIC_ONLY
    if include_shared:
        return PUBLIC_OR_OWNED
    return OWNED_ONLY


def _visibility_clause(visibility, user_id):
    if visibility == PUBLIC_ONLY:
        return FilterPreset.is_public.is_(True)
    if visibility == PUBLIC_OR_OWNED:
        return or_(FilterPreset.is_public.is_(True), FilterPreset.created_by == user_id)
    if visibility == OWNED_ONLY:
        return FilterPreset.created_by == user_id
    raise ValueError(f"Unknown visibility: {visibility}")


def decode_filter_config(value):
    """Rows written as serialized text are parsed; structured values pass through."""
    if isinstance(value, str):
        return json.loads(value)
    return value


def _iso(dt):
    return dt.isoformat() if dt else None


def serialize_preset(preset):
    """Shape a FilterPreset row into its camelCase JSON form."""
    return {
        'id': preset.id,
        'tenantId': preset.tenant_id,
        'entityType': preset.entity_type,
        'name': preset.name,
        'description': preset.description,
        'filterConfig': decode_filter_config(preset.filter_config),
        'filterLogic': preset.filter_logic,
        'isPublic': bool(preset.is_public),
        'isDefault': bool(preset.is_default),
        'icon': preset.icon,
        'color': preset.color,
        'usageCount': preset.usage_count or 0,
        'lastUsedAt': _iso(preset.last_used_at),
        'createdBy': preset.created_by,
        'creator': preset.creator.to_creator_dict() if preset.creator else None,
        'createdAt': _iso(preset.created_at),
        'updatedAt': _iso(preset.updated_at),
    }


def list_presets(session, tenant_id, user_id, entity_type=DEFAULT_ENTITY_TYPE,
                 is_public=False, include_shared=True):
    """
    Return the presets visible to user_id in tenant_id for one entity type.

    Ordered default-first, then most used, then most recently created.
    """
    visibility = select_visibility(is_public, include_shared)
    query = (
        session.query(FilterPreset)
        .filter(
            FilterPreset.tenant_id == tenant_id,
            FilterPreset.entity_type == entity_type,
            _visibility_clause(visibility, user_id),
        )
        .order_by(
            FilterPreset.is_default.desc(),
            FilterPreset.usage_count.desc(),
            FilterPreset.created_at.desc(),
        )
    )
    presets = query.all()
    logger.debug("Listed %d %s presets (tenant=%s, visibility=%s)",
                 len(presets), entity_type, tenant_id, visibility)
    return [serialize_preset(p) for p in presets]


def _find_existing(session, tenant_id, user_id, name):
    return (
        session.query(FilterPreset)
        .filter_by(tenant_id=tenant_id, created_by=user_id, name=name)
        .first()
    )


def create_preset(session, tenant_id, user_id, payload):
    """
    Validate payload, enforce per-owner name uniqueness, and insert a preset.

    Raises PresetValidationError when name or filterConfig is missing (or
    filterConfig.logic is not a string) and
    DuplicatePresetError when the caller already has a preset with that name.
    The unique constraint on (tenant_id, created_by, name) backs up the
    pre-check when two identical creates race.
    """
    name = payload.get('name')
    filter_config = payload.get('filterConfig')

    # Stored as submitted; whitespace-only counts as missing
    if not isinstance(name, str) or not name.strip() or not isinstance(filter_config, dict):
        raise PresetValidationError()

    filter_logic = filter_config.get('logic') or DEFAULT_FILTER_LOGIC
    if not isinstance(filter_logic, str):
        raise PresetValidationError(INVALID_LOGIC_MESSAGE)

    if _find_existing(session, tenant_id, user_id, name) is not None:
        raise DuplicatePresetError()

    preset = FilterPreset(
        tenant_id=tenant_id,
        name=name,
        description=payload.get('description') or None,
        entity_type=payload.get('entityType') or DEFAULT_ENTITY_TYPE,
        filter_config=filter_config,
        filter_logic=filter_logic,
        is_public=payload.get('isPublic') is True,
        icon=payload.get('icon') or None,
        color=payload.get('color') or None,
        created_by=user_id,
    )
    session.add(preset)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        # Only a concurrent create with the same name is a conflict; any other
        # integrity failure (e.g. unknown owner) is a server error.
        if _find_existing(session, tenant_id, user_id, name) is None:
            raise
        logger.warning("Duplicate preset name %r for user %s (tenant=%s) caught by constraint",
                       name, user_id, tenant_id)
        raise DuplicatePresetError()

    session.refresh(preset)
    logger.info("Created preset %s (%r) for user %s (tenant=%s)", preset.id, name, user_id, tenant_id)
    return serialize_preset(preset)
