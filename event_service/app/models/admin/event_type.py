# app/models/admin/event_type.py
from sqlalchemy import Column, Integer, String
from shared.core.database import Base
from shared.models.mixins import AuditMixin


class EventType(AuditMixin, Base):
    __tablename__ = "event_types"

    event_type_id = Column(Integer, unique=True, nullable=False, index=True)
    name = Column(String(100), nullable=False)
    emoji = Column(String(10), nullable=False)
