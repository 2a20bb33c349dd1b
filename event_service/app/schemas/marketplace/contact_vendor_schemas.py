from typing import Literal, Optional
from pydantic import Field

from shared.core.schemas import AuditOut, CommonQueryParams
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class ContactVendorCreate(EmptyStringModel):
    vendor_id: int = Field(..., ge=1)
    # defaults to the caller when omitted
    user_id: Optional[int] = Field(None, ge=1)
    event_id: int = Field(..., ge=1)
    topic: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1, max_length=1000)
    status: Optional[bool] = True


class ContactVendorUpdate(EmptyStringModel):
    contact_vendor_id: int = Field(..., ge=1)
    vendor_id: Optional[int] = Field(None, ge=1)
    user_id: Optional[int] = Field(None, ge=1)
    event_id: Optional[int] = Field(None, ge=1)
    topic: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, min_length=1, max_length=1000)
    status: Optional[bool] = None


class ContactVendorOut(AuditOut):
    contact_vendor_id: int
    vendor_id: int
    user_id: int
    event_id: int
    topic: str
    description: str


class ContactVendorRequest(CommonQueryParams):
    vendor_id: Optional[int] = Field(None, ge=1)
    user_id: Optional[int] = Field(None, ge=1)
    event_id: Optional[int] = Field(None, ge=1)
    sortBy: Literal["created_at", "updated_at", "topic", "contact_vendor_id"] = "created_at"
