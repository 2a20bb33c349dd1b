from datetime import datetime
from typing import Literal, Optional
from pydantic import Field

from shared.core.schemas import AuditOut, CommonQueryParams
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel

from ...enum.payment_enum import TransactionStatus, TransactionType


class TransactionCreate(EmptyStringModel):
    # defaults to the caller when omitted
    user_id: Optional[int] = Field(None, ge=1)
    amount: float = Field(..., ge=0)
    transaction_status: TransactionStatus = TransactionStatus.pending
    payment_method_id: Optional[int] = Field(None, ge=1)
    transaction_type: TransactionType
    escrow_transaction_id: Optional[str] = Field(None, max_length=100)
    event_id: Optional[int] = Field(None, ge=1)
    vendor_booking_id: Optional[int] = Field(None, ge=1)
    coupon_code_id: Optional[int] = Field(None, ge=1)
    original_transaction_id: Optional[int] = Field(None, ge=1)
    refund_reason: Optional[str] = Field(None, max_length=500)
    reference_number: Optional[str] = Field(None, max_length=100)
    cgst: float = Field(0, ge=0)
    sgst: float = Field(0, ge=0)
    total_gst: float = Field(0, ge=0)
    transaction_metadata: Optional[str] = None
    status: Optional[bool] = True


class TransactionUpdate(EmptyStringModel):
    transaction_id: int = Field(..., ge=1)
    amount: Optional[float] = Field(None, ge=0)
    transaction_status: Optional[TransactionStatus] = None
    payment_method_id: Optional[int] = Field(None, ge=1)
    transaction_type: Optional[TransactionType] = None
    escrow_transaction_id: Optional[str] = Field(None, max_length=100)
    event_id: Optional[int] = Field(None, ge=1)
    vendor_booking_id: Optional[int] = Field(None, ge=1)
    coupon_code_id: Optional[int] = Field(None, ge=1)
    original_transaction_id: Optional[int] = Field(None, ge=1)
    refund_reason: Optional[str] = Field(None, max_length=500)
    reference_number: Optional[str] = Field(None, max_length=100)
    cgst: Optional[float] = Field(None, ge=0)
    sgst: Optional[float] = Field(None, ge=0)
    total_gst: Optional[float] = Field(None, ge=0)
    transaction_metadata: Optional[str] = None
    status: Optional[bool] = None


class TransactionOut(AuditOut):
    transaction_id: int
    user_id: int
    amount: float
    transaction_status: str
    payment_method_id: Optional[int] = None
    transaction_type: str
    escrow_transaction_id: Optional[str] = None
    event_id: Optional[int] = None
    vendor_booking_id: Optional[int] = None
    coupon_code_id: Optional[int] = None
    original_transaction_id: Optional[int] = None
    refund_reason: Optional[str] = None
    reference_number: Optional[str] = None
    cgst: float
    sgst: float
    total_gst: float
    transaction_metadata: Optional[str] = None
    transaction_date: datetime


class TransactionRequest(CommonQueryParams):
    user_id: Optional[int] = Field(None, ge=1)
    transaction_status: Optional[TransactionStatus] = None
    transaction_type: Optional[TransactionType] = None
    event_id: Optional[int] = Field(None, ge=1)
    escrow_transaction_id: Optional[str] = Field(None, max_length=100)
    sortBy: Literal["created_at", "updated_at", "amount", "transaction_date",
                    "transaction_id"] = "created_at"
