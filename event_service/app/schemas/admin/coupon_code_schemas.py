from datetime import datetime, timezone
from typing import Literal, Optional
from pydantic import Field, model_validator

from shared.core.schemas import AuditOut, CommonQueryParams
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


def as_aware(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive datetimes as UTC so stored and submitted values compare."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def validity_window_ok(valid_from: Optional[datetime], valid_until: Optional[datetime]) -> bool:
    if valid_from is None or valid_until is None:
        return True
    return as_aware(valid_until) >= as_aware(valid_from)


class CouponCodeBase(EmptyStringModel):
    code: str = Field(..., min_length=3, max_length=50)
    name: str = Field(..., min_length=2, max_length=100)
    description: str = Field(..., min_length=1, max_length=500)
    price: float = Field(..., ge=0)
    min_order_amount: float = Field(..., ge=0)
    max_discount_amount: float = Field(..., ge=0)
    usage_limit: int = Field(..., ge=1)
    used_count: int = Field(0, ge=0)
    valid_from: datetime
    valid_until: Optional[datetime] = None
    emoji: Optional[str] = Field(None, max_length=10)


class CouponCodeCreate(CouponCodeBase):
    status: Optional[bool] = True

    @model_validator(mode="after")
    def check_validity_window(self):
        if not validity_window_ok(self.valid_from, self.valid_until):
            raise ValueError("valid_until must not be before valid_from")
        return self


class CouponCodeUpdate(EmptyStringModel):
    coupon_code_id: int = Field(..., ge=1)
    code: Optional[str] = Field(None, min_length=3, max_length=50)
    name: Optional[str] = Field(None, min_length=2, max_length=100)
    description: Optional[str] = Field(None, min_length=1, max_length=500)
    price: Optional[float] = Field(None, ge=0)
    min_order_amount: Optional[float] = Field(None, ge=0)
    max_discount_amount: Optional[float] = Field(None, ge=0)
    usage_limit: Optional[int] = Field(None, ge=1)
    used_count: Optional[int] = Field(None, ge=0)
    valid_from: Optional[datetime] = None
    valid_until: Optional[datetime] = None
    emoji: Optional[str] = Field(None, max_length=10)
    status: Optional[bool] = None


class CouponCodeOut(AuditOut):
    coupon_code_id: int
    code: str
    name: str
    description: str
    price: float
    min_order_amount: float
    max_discount_amount: float
    usage_limit: int
    used_count: int
    valid_from: datetime
    valid_until: Optional[datetime] = None
    emoji: Optional[str] = None


class CouponCodeRequest(CommonQueryParams):
    code: Optional[str] = Field(None, max_length=50)
    sortBy: Literal["created_at", "updated_at", "name", "code",
                    "valid_from", "valid_until", "coupon_code_id"] = "created_at"
