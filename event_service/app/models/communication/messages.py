# app/models/communication/messages.py
from sqlalchemy import Column, Integer, String
from shared.core.database import Base
from shared.models.mixins import AuditMixin


class Message(AuditMixin, Base):
    __tablename__ = "messages"

    messages_id = Column(Integer, unique=True, nullable=False, index=True)
    sender_id = Column(Integer, nullable=False, index=True)
    receiver_id = Column(Integer, nullable=False, index=True)
    messages_txt = Column(String(1000), nullable=False)
    image = Column(String(500))
    emoji = Column(String(10))
