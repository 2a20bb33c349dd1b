from typing import Literal, Optional
from pydantic import Field

from shared.core.schemas import AuditOut, CommonQueryParams
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class NotificationCreate(EmptyStringModel):
    user_id: int = Field(..., ge=1)
    notification_type_id: int = Field(..., ge=1)
    notification_txt: str = Field(..., min_length=1, max_length=1000)
    is_read: bool = False
    status: Optional[bool] = True


class NotificationUpdate(EmptyStringModel):
    notification_id: int = Field(..., ge=1)
    notification_txt: Optional[str] = Field(None, min_length=1, max_length=1000)
    is_read: Optional[bool] = None
    status: Optional[bool] = None


class NotificationOut(AuditOut):
    notification_id: int
    user_id: int
    notification_type_id: int
    notification_txt: str
    is_read: bool


class NotificationRequest(CommonQueryParams):
    user_id: Optional[int] = Field(None, ge=1)
    notification_type_id: Optional[int] = Field(None, ge=1)
    is_read: Optional[bool] = None
    sortBy: Literal["created_at", "updated_at", "notification_id"] = "created_at"
