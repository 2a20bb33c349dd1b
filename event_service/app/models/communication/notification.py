# app/models/communication/notification.py
from sqlalchemy import Boolean, Column, Integer, String
from shared.core.database import Base
from shared.models.mixins import AuditMixin


class Notification(AuditMixin, Base):
    __tablename__ = "notifications"

    notification_id = Column(Integer, unique=True, nullable=False, index=True)
    user_id = Column(Integer, nullable=False, index=True)
    notification_type_id = Column(Integer, nullable=False)
    notification_txt = Column(String(1000), nullable=False)
    is_read = Column(Boolean, nullable=False, default=False)
