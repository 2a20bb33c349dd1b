# app/models/admin/coupon_code.py
from sqlalchemy import Column, DateTime, Integer, Numeric, String
from shared.core.database import Base
from shared.models.mixins import AuditMixin


class CouponCode(AuditMixin, Base):
    __tablename__ = "coupon_codes"

    coupon_code_id = Column(Integer, unique=True, nullable=False, index=True)
    code = Column(String(50), unique=True, nullable=False, index=True)
    name = Column(String(100), nullable=False, index=True)
    description = Column(String(500), nullable=False)
    price = Column(Numeric(12, 2), nullable=False)
    min_order_amount = Column(Numeric(12, 2), nullable=False)
    max_discount_amount = Column(Numeric(12, 2), nullable=False)
    usage_limit = Column(Integer, nullable=False)
    used_count = Column(Integer, nullable=False, default=0)
    valid_from = Column(DateTime(timezone=True), nullable=False, index=True)
    valid_until = Column(DateTime(timezone=True), nullable=True, index=True)
    emoji = Column(String(10))
