# app/models/admin/payment_methods.py
from sqlalchemy import Column, Integer, String
from shared.core.database import Base
from shared.models.mixins import AuditMixin


class PaymentMethod(AuditMixin, Base):
    __tablename__ = "payment_methods"

    payment_methods_id = Column(Integer, unique=True, nullable=False, index=True)
    payment_method = Column(String(100), nullable=False)
    emoji = Column(String(10))
