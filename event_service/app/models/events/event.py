# app/models/events/event.py
from sqlalchemy import JSON, Boolean, Column, DateTime, Integer, Numeric, String, Text
from shared.core.database import Base
from shared.models.mixins import AuditMixin


class Event(AuditMixin, Base):
    __tablename__ = "events"

    event_id = Column(Integer, unique=True, nullable=False, index=True)
    name_title = Column(String(200), nullable=False)
    event_type_id = Column(Integer, index=True)
    ticketed_events = Column(Boolean, nullable=False, default=False)
    event_visibility = Column(String(16), nullable=False, default="Public")
    entry_price = Column(Numeric(12, 2), nullable=False, default=0)
    description = Column(String(2000), default="")
    venue_details_id = Column(Integer, nullable=False, index=True)
    street_address = Column(String(500), default="")
    country_id = Column(Integer, default=1)
    state_id = Column(Integer, default=1)
    city_id = Column(Integer, default=1, index=True)
    event_category_tags_id = Column(Integer, default=1)
    tags = Column(JSON, default=list)
    date = Column(DateTime(timezone=True), nullable=False, index=True)
    time = Column(String(20), nullable=False)
    max_capacity = Column(Integer, nullable=False)
    event_image = Column(String(500))
    budget_range = Column(Numeric(12, 2))
    expected_guest_count = Column(Integer)
    theme_or_style = Column(JSON, default=list)
    music_preferences = Column(JSON, default=list)
    dietary_restrictions_allergies = Column(String(1000))
    special_requests_notes = Column(Text)
