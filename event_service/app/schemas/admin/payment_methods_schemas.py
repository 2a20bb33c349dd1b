from typing import Literal, Optional
from pydantic import Field

from shared.core.schemas import AuditOut, CommonQueryParams
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class PaymentMethodBase(EmptyStringModel):
    payment_method: str = Field(..., min_length=1, max_length=100)
    emoji: Optional[str] = Field(None, max_length=10)


class PaymentMethodCreate(PaymentMethodBase):
    status: Optional[bool] = True


class PaymentMethodUpdate(EmptyStringModel):
    payment_methods_id: int = Field(..., ge=1)
    payment_method: Optional[str] = Field(None, min_length=1, max_length=100)
    emoji: Optional[str] = Field(None, max_length=10)
    status: Optional[bool] = None


class PaymentMethodOut(AuditOut):
    payment_methods_id: int
    payment_method: str
    emoji: Optional[str] = None


class PaymentMethodRequest(CommonQueryParams):
    sortBy: Literal["created_at", "updated_at", "payment_method", "payment_methods_id"] = "created_at"
