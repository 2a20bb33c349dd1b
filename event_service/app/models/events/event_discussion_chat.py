# app/models/events/event_discussion_chat.py
from sqlalchemy import Boolean, Column, DateTime, Integer, String
from shared.core.database import Base
from shared.models.mixins import AuditMixin


class EventDiscussionChat(AuditMixin, Base):
    __tablename__ = "event_discussion_chats"

    event_discussion_chat_id = Column(Integer, unique=True, nullable=False, index=True)
    event_id = Column(Integer, nullable=False, index=True)
    user_id = Column(Integer, nullable=False, index=True)
    message = Column(String(1000), nullable=False)
    message_type = Column(String(16), nullable=False, default="text")
    file_url = Column(String(500))
    reply_to = Column(Integer)
    is_edited = Column(Boolean, nullable=False, default=False)
    edited_at = Column(DateTime(timezone=True))
