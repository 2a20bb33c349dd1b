from typing import Literal, Optional
from pydantic import Field

from shared.core.schemas import AuditOut, CommonQueryParams
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class VibescardStudioBase(EmptyStringModel):
    event_id: int = Field(..., ge=1)
    category_id: int = Field(..., ge=1)
    templates: Optional[str] = Field(None, max_length=500)
    color_scheme: Optional[str] = Field(None, max_length=100)
    canvas_size: Optional[str] = Field(None, max_length=50)
    zoomlevel: int = Field(100, ge=10, le=500)


class VibescardStudioCreate(VibescardStudioBase):
    status: Optional[bool] = True


class VibescardStudioUpdate(EmptyStringModel):
    vibescard_studio_id: int = Field(..., ge=1)
    event_id: Optional[int] = Field(None, ge=1)
    category_id: Optional[int] = Field(None, ge=1)
    templates: Optional[str] = Field(None, max_length=500)
    color_scheme: Optional[str] = Field(None, max_length=100)
    canvas_size: Optional[str] = Field(None, max_length=50)
    zoomlevel: Optional[int] = Field(None, ge=10, le=500)
    status: Optional[bool] = None


class VibescardStudioOut(AuditOut):
    vibescard_studio_id: int
    event_id: int
    category_id: int
    templates: Optional[str] = None
    color_scheme: Optional[str] = None
    canvas_size: Optional[str] = None
    zoomlevel: int


class VibescardStudioRequest(CommonQueryParams):
    event_id: Optional[int] = Field(None, ge=1)
    category_id: Optional[int] = Field(None, ge=1)
    sortBy: Literal["created_at", "updated_at", "vibescard_studio_id"] = "created_at"
