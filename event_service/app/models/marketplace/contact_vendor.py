# app/models/marketplace/contact_vendor.py
from sqlalchemy import Column, Integer, String
from shared.core.database import Base
from shared.models.mixins import AuditMixin


class ContactVendor(AuditMixin, Base):
    __tablename__ = "contact_vendors"

    contact_vendor_id = Column(Integer, unique=True, nullable=False, index=True)
    vendor_id = Column(Integer, nullable=False, index=True)
    user_id = Column(Integer, nullable=False, index=True)
    event_id = Column(Integer, nullable=False, index=True)
    topic = Column(String(200), nullable=False)
    description = Column(String(1000), nullable=False)
