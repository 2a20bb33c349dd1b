# app/models/events/event_entry_tickets.py
from sqlalchemy import JSON, Column, Integer, Numeric, String
from shared.core.database import Base
from shared.models.mixins import AuditMixin


class EventEntryTicket(AuditMixin, Base):
    __tablename__ = "event_entry_tickets"

    event_entry_tickets_id = Column(Integer, unique=True, nullable=False, index=True)
    event_id = Column(Integer, nullable=False, index=True)
    title = Column(String(200), nullable=False)
    price = Column(Numeric(12, 2), nullable=False)
    total_seats = Column(Integer, nullable=False)
    perks = Column(JSON, default=list)
    tag = Column(String(100))
