# app/models/events/vibescard_studio.py
from sqlalchemy import Column, Integer, String
from shared.core.database import Base
from shared.models.mixins import AuditMixin


class VibescardStudio(AuditMixin, Base):
    __tablename__ = "vibescard_studios"

    vibescard_studio_id = Column(Integer, unique=True, nullable=False, index=True)
    event_id = Column(Integer, nullable=False, index=True)
    category_id = Column(Integer, nullable=False, index=True)
    templates = Column(String(500))
    color_scheme = Column(String(100))
    canvas_size = Column(String(50))
    zoomlevel = Column(Integer, nullable=False, default=100)
