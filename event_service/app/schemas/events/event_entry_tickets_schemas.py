from typing import List, Literal, Optional
from pydantic import Field

from shared.core.schemas import AuditOut, CommonQueryParams
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class EventEntryTicketBase(EmptyStringModel):
    event_id: int = Field(..., ge=1)
    title: str = Field(..., min_length=1, max_length=200)
    price: float = Field(..., ge=0)
    total_seats: int = Field(..., ge=1)
    perks: List[str] = Field(default_factory=list)
    tag: Optional[str] = Field(None, max_length=100)


class EventEntryTicketCreate(EventEntryTicketBase):
    status: Optional[bool] = True


class EventEntryTicketUpdate(EmptyStringModel):
    event_entry_tickets_id: int = Field(..., ge=1)
    event_id: Optional[int] = Field(None, ge=1)
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    price: Optional[float] = Field(None, ge=0)
    total_seats: Optional[int] = Field(None, ge=1)
    perks: Optional[List[str]] = None
    tag: Optional[str] = Field(None, max_length=100)
    status: Optional[bool] = None


class EventEntryTicketOut(AuditOut):
    event_entry_tickets_id: int
    event_id: int
    title: str
    price: float
    total_seats: int
    perks: Optional[List[str]] = None
    tag: Optional[str] = None


class EventEntryTicketRequest(CommonQueryParams):
    event_id: Optional[int] = Field(None, ge=1)
    sortBy: Literal["created_at", "updated_at", "title", "price",
                    "event_entry_tickets_id"] = "created_at"
