# app/models/marketplace/decorations.py
from sqlalchemy import Column, Integer, Numeric, String
from shared.core.database import Base
from shared.models.mixins import AuditMixin


class Decoration(AuditMixin, Base):
    __tablename__ = "decorations"

    decorations_id = Column(Integer, unique=True, nullable=False, index=True)
    decorations_name = Column(String(200), nullable=False)
    decorations_price = Column(Numeric(12, 2), nullable=False)
    decorations_type = Column(String(100))
    brand_name = Column(String(200))
