from typing import Literal, Optional
from pydantic import Field

from shared.core.schemas import AuditOut, CommonQueryParams
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class MessageCreate(EmptyStringModel):
    # defaults to the caller when omitted
    sender_id: Optional[int] = Field(None, ge=1)
    receiver_id: int = Field(..., ge=1)
    messages_txt: str = Field(..., min_length=1, max_length=1000)
    image: Optional[str] = Field(None, max_length=500)
    emoji: Optional[str] = Field(None, max_length=10)
    status: Optional[bool] = True


class MessageUpdate(EmptyStringModel):
    messages_id: int = Field(..., ge=1)
    messages_txt: Optional[str] = Field(None, min_length=1, max_length=1000)
    image: Optional[str] = Field(None, max_length=500)
    emoji: Optional[str] = Field(None, max_length=10)
    status: Optional[bool] = None


class MessageOut(AuditOut):
    messages_id: int
    sender_id: int
    receiver_id: int
    messages_txt: str
    image: Optional[str] = None
    emoji: Optional[str] = None


class MessageRequest(CommonQueryParams):
    sender_id: Optional[int] = Field(None, ge=1)
    receiver_id: Optional[int] = Field(None, ge=1)
    sortBy: Literal["created_at", "updated_at", "messages_id"] = "created_at"
