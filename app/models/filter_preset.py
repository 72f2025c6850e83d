"""
FilterPreset model — named, reusable filter configurations per tenant + entity type.

Names are unique per owner inside a tenant: (tenant_id, created_by, name).
"""
import uuid

from sqlalchemy import Column, Integer, Text, Boolean, DateTime, JSON, ForeignKey, UniqueConstraint, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.database import Base
from app.models.user import User


def _new_id():
    return str(uuid.uuid4())


class FilterPreset(Base):
    __tablename__ = 'filter_presets'

    id = Column(Text, primary_key=True, default=_new_id)
    tenant_id = Column(Text, nullable=False)
    entity_type = Column(Text, nullable=False, default='users')
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    filter_config = Column(JSON, nullable=False, default=dict)
    filter_logic = Column(Text, nullable=False, default='AND')  # AND / OR
    is_public = Column(Boolean, nullable=False, default=False)
    is_default = Column(Boolean, nullable=False, default=False)
    icon = Column(Text, nullable=True)
    color = Column(Text, nullable=True)
    usage_count = Column(Integer, nullable=False, default=0)
    last_used_at = Column(DateTime(timezone=True), nullable=True)
    created_by = Column(Text, ForeignKey('users.id'), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    creator = relationship(User, lazy='joined')

    __table_args__ = (
        UniqueConstraint('tenant_id', 'created_by', 'name', name='uq_filter_preset_owner_name'),
        Index('ix_filter_presets_tenant_entity', 'tenant_id', 'entity_type'),
    )
