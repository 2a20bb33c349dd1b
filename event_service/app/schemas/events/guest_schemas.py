from typing import Literal, Optional
from pydantic import EmailStr, Field

from shared.core.schemas import AuditOut, CommonQueryParams
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class GuestBase(EmptyStringModel):
    event_id: Optional[int] = Field(None, ge=1)
    role_id: Optional[int] = Field(None, ge=1)
    name: Optional[str] = Field(None, max_length=200)
    mobileno: Optional[str] = Field(None, max_length=20)
    email: Optional[EmailStr] = None
    specialnote: Optional[str] = Field(None, max_length=1000)
    img: Optional[str] = Field(None, max_length=500)


class GuestCreate(GuestBase):
    status: Optional[bool] = True


class GuestUpdate(GuestBase):
    guest_id: int = Field(..., ge=1)
    status: Optional[bool] = None


class GuestOut(AuditOut):
    guest_id: int
    event_id: Optional[int] = None
    role_id: Optional[int] = None
    name: Optional[str] = None
    mobileno: Optional[str] = None
    email: Optional[str] = None
    specialnote: Optional[str] = None
    img: Optional[str] = None


class GuestRequest(CommonQueryParams):
    event_id: Optional[int] = Field(None, ge=1)
    role_id: Optional[int] = Field(None, ge=1)
    sortBy: Literal["created_at", "updated_at", "name", "guest_id"] = "created_at"
