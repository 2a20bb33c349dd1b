from typing import Literal, Optional
from pydantic import Field

from shared.core.schemas import AuditOut, CommonQueryParams
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class EventTypeBase(EmptyStringModel):
    name: str = Field(..., min_length=1, max_length=100)
    emoji: str = Field(..., min_length=1, max_length=10)


class EventTypeCreate(EventTypeBase):
    status: Optional[bool] = True


class EventTypeUpdate(EmptyStringModel):
    event_type_id: int = Field(..., ge=1)
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    emoji: Optional[str] = Field(None, min_length=1, max_length=10)
    status: Optional[bool] = None


class EventTypeOut(AuditOut):
    event_type_id: int
    name: str
    emoji: str


class EventTypeRequest(CommonQueryParams):
    sortBy: Literal["created_at", "updated_at", "name", "event_type_id"] = "created_at"
