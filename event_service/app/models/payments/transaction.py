# app/models/payments/transaction.py
from sqlalchemy import Column, DateTime, Integer, Numeric, String, Text
from shared.core.database import Base
from shared.models.mixins import AuditMixin, utcnow


class Transaction(AuditMixin, Base):
    __tablename__ = "transactions"

    transaction_id = Column(Integer, unique=True, nullable=False, index=True)
    user_id = Column(Integer, nullable=False, index=True)
    amount = Column(Numeric(12, 2), nullable=False)
    # payment state; the inherited boolean ``status`` column is the soft-delete flag
    transaction_status = Column(String(32), nullable=False, default="pending", index=True)
    payment_method_id = Column(Integer)
    transaction_type = Column(String(32), nullable=False, index=True)
    escrow_transaction_id = Column(String(100), index=True)
    event_id = Column(Integer, index=True)
    vendor_booking_id = Column(Integer)
    coupon_code_id = Column(Integer)
    original_transaction_id = Column(Integer)
    refund_reason = Column(String(500))
    reference_number = Column(String(100))
    cgst = Column(Numeric(12, 2), nullable=False, default=0)
    sgst = Column(Numeric(12, 2), nullable=False, default=0)
    total_gst = Column(Numeric(12, 2), nullable=False, default=0)
    transaction_metadata = Column(Text)
    transaction_date = Column(DateTime(timezone=True), default=utcnow, nullable=False)
