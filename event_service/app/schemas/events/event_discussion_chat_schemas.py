from datetime import datetime
from typing import Literal, Optional
from pydantic import Field

from shared.core.schemas import AuditOut, CommonQueryParams
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel

from ...enum.event_enum import DiscussionMessageType


class EventDiscussionChatCreate(EmptyStringModel):
    event_id: int = Field(..., ge=1)
    user_id: Optional[int] = Field(None, ge=1)
    message: str = Field(..., min_length=1, max_length=1000)
    message_type: DiscussionMessageType = DiscussionMessageType.text
    file_url: Optional[str] = Field(None, max_length=500)
    reply_to: Optional[int] = Field(None, ge=1)
    status: Optional[bool] = True


class EventDiscussionChatUpdate(EmptyStringModel):
    event_discussion_chat_id: int = Field(..., ge=1)
    message: Optional[str] = Field(None, min_length=1, max_length=1000)
    message_type: Optional[DiscussionMessageType] = None
    file_url: Optional[str] = Field(None, max_length=500)
    reply_to: Optional[int] = Field(None, ge=1)
    status: Optional[bool] = None


class EventDiscussionChatOut(AuditOut):
    event_discussion_chat_id: int
    event_id: int
    user_id: int
    message: str
    message_type: str
    file_url: Optional[str] = None
    reply_to: Optional[int] = None
    is_edited: bool
    edited_at: Optional[datetime] = None


class EventDiscussionChatRequest(CommonQueryParams):
    event_id: Optional[int] = Field(None, ge=1)
    user_id: Optional[int] = Field(None, ge=1)
    message_type: Optional[DiscussionMessageType] = None
    sortBy: Literal["created_at", "updated_at", "event_discussion_chat_id"] = "created_at"
