import uuid
from datetime import datetime, timezone
from sqlalchemy import Boolean, Column, DateTime, Integer, Uuid


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditMixin:
    """Storage key, soft-delete flag and audit columns shared by every entity table.

    ``id`` is the internal storage key and is never exposed as the public
    identifier; each model adds its own sequence-assigned ``<entity>_id``.
    """

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    status = Column(Boolean, default=True, nullable=False, index=True)
    created_by = Column(Integer, nullable=False, index=True)
    updated_by = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow,
                        onupdate=utcnow, nullable=False)
