"""
User model — the owner side of a filter preset.

Rows are written by the identity system; this service only reads them to
populate a preset's `creator`.
"""
from sqlalchemy import Column, Text, DateTime
from sqlalchemy.sql import func

from app.database import Base


class User(Base):
    __tablename__ = 'users'

    id = Column(Text, primary_key=True)
    tenant_id = Column(Text, nullable=False, index=True)
    name = Column(Text, default='')
    email = Column(Text, default='')
    image = Column(Text, nullable=True)  # avatar URL
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def to_creator_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'image': self.image,
        }
