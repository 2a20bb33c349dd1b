from datetime import datetime
from typing import List, Literal, Optional
from pydantic import Field

from shared.core.schemas import AuditOut, CommonQueryParams
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel

from ...enum.event_enum import EventVisibility


class EventBase(EmptyStringModel):
    name_title: str = Field(..., min_length=1, max_length=200)
    event_type_id: Optional[int] = Field(None, ge=1)
    ticketed_events: bool = False
    event_visibility: EventVisibility = EventVisibility.public
    entry_price: float = Field(0, ge=0)
    description: Optional[str] = Field("", max_length=2000)
    venue_details_id: int = Field(..., ge=1)
    street_address: Optional[str] = Field("", max_length=500)
    country_id: int = Field(1, ge=1)
    state_id: int = Field(1, ge=1)
    city_id: int = Field(1, ge=1)
    event_category_tags_id: int = Field(1, ge=1)
    tags: List[str] = Field(default_factory=list)
    date: datetime
    time: str = Field(..., min_length=1, max_length=20)
    max_capacity: int = Field(..., ge=1)
    event_image: Optional[str] = Field(None, max_length=500)
    budget_range: Optional[float] = Field(None, ge=0)
    expected_guest_count: Optional[int] = Field(None, ge=0)
    theme_or_style: List[str] = Field(default_factory=list)
    music_preferences: List[str] = Field(default_factory=list)
    dietary_restrictions_allergies: Optional[str] = Field(None, max_length=1000)
    special_requests_notes: Optional[str] = None


class EventCreate(EventBase):
    status: Optional[bool] = True


class EventUpdate(EmptyStringModel):
    event_id: int = Field(..., ge=1)
    name_title: Optional[str] = Field(None, min_length=1, max_length=200)
    event_type_id: Optional[int] = Field(None, ge=1)
    ticketed_events: Optional[bool] = None
    event_visibility: Optional[EventVisibility] = None
    entry_price: Optional[float] = Field(None, ge=0)
    description: Optional[str] = Field(None, max_length=2000)
    venue_details_id: Optional[int] = Field(None, ge=1)
    street_address: Optional[str] = Field(None, max_length=500)
    country_id: Optional[int] = Field(None, ge=1)
    state_id: Optional[int] = Field(None, ge=1)
    city_id: Optional[int] = Field(None, ge=1)
    event_category_tags_id: Optional[int] = Field(None, ge=1)
    tags: Optional[List[str]] = None
    date: Optional[datetime] = None
    time: Optional[str] = Field(None, min_length=1, max_length=20)
    max_capacity: Optional[int] = Field(None, ge=1)
    event_image: Optional[str] = Field(None, max_length=500)
    budget_range: Optional[float] = Field(None, ge=0)
    expected_guest_count: Optional[int] = Field(None, ge=0)
    theme_or_style: Optional[List[str]] = None
    music_preferences: Optional[List[str]] = None
    dietary_restrictions_allergies: Optional[str] = Field(None, max_length=1000)
    special_requests_notes: Optional[str] = None
    status: Optional[bool] = None


class EventOut(AuditOut):
    event_id: int
    name_title: str
    event_type_id: Optional[int] = None
    ticketed_events: bool
    event_visibility: str
    entry_price: float
    description: Optional[str] = None
    venue_details_id: int
    street_address: Optional[str] = None
    country_id: Optional[int] = None
    state_id: Optional[int] = None
    city_id: Optional[int] = None
    event_category_tags_id: Optional[int] = None
    tags: Optional[List[str]] = None
    date: datetime
    time: str
    max_capacity: int
    event_image: Optional[str] = None
    budget_range: Optional[float] = None
    expected_guest_count: Optional[int] = None
    theme_or_style: Optional[List[str]] = None
    music_preferences: Optional[List[str]] = None
    dietary_restrictions_allergies: Optional[str] = None
    special_requests_notes: Optional[str] = None


class EventRequest(CommonQueryParams):
    event_type_id: Optional[int] = Field(None, ge=1)
    city_id: Optional[int] = Field(None, ge=1)
    venue_details_id: Optional[int] = Field(None, ge=1)
    event_visibility: Optional[EventVisibility] = None
    sortBy: Literal["created_at", "updated_at", "name_title", "date",
                    "entry_price", "event_id"] = "created_at"
