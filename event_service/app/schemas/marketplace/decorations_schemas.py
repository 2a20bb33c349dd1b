from typing import Literal, Optional
from pydantic import Field

from shared.core.schemas import AuditOut, CommonQueryParams
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class DecorationBase(EmptyStringModel):
    decorations_name: str = Field(..., min_length=1, max_length=200)
    decorations_price: float = Field(..., ge=0)
    decorations_type: Optional[str] = Field(None, max_length=100)
    brand_name: Optional[str] = Field(None, max_length=200)


class DecorationCreate(DecorationBase):
    status: Optional[bool] = True


class DecorationUpdate(EmptyStringModel):
    decorations_id: int = Field(..., ge=1)
    decorations_name: Optional[str] = Field(None, min_length=1, max_length=200)
    decorations_price: Optional[float] = Field(None, ge=0)
    decorations_type: Optional[str] = Field(None, max_length=100)
    brand_name: Optional[str] = Field(None, max_length=200)
    status: Optional[bool] = None


class DecorationOut(AuditOut):
    decorations_id: int
    decorations_name: str
    decorations_price: float
    decorations_type: Optional[str] = None
    brand_name: Optional[str] = None


class DecorationRequest(CommonQueryParams):
    decorations_type: Optional[str] = Field(None, max_length=100)
    sortBy: Literal["created_at", "updated_at", "decorations_name",
                    "decorations_price", "decorations_id"] = "created_at"
