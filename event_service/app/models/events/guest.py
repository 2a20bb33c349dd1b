# app/models/events/guest.py
from sqlalchemy import Column, Integer, String
from shared.core.database import Base
from shared.models.mixins import AuditMixin


class Guest(AuditMixin, Base):
    __tablename__ = "guests"

    guest_id = Column(Integer, unique=True, nullable=False, index=True)
    event_id = Column(Integer, index=True)
    role_id = Column(Integer, index=True)
    name = Column(String(200))
    mobileno = Column(String(20))
    email = Column(String(200))
    specialnote = Column(String(1000))
    img = Column(String(500))
