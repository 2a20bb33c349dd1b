from pydantic import BaseModel, Field
from datetime import datetime
from typing import Generic, Literal, Optional, TypeVar

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel

# Shared properties
T = TypeVar("T")


class UserToken(BaseModel):
    user_id: int
    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None
    exp: Optional[int] = None


class CommonQueryParams(EmptyStringModel):
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1, le=100)
    search: Optional[str] = Field(None, max_length=100)
    status: Optional[bool] = None
    sortBy: Literal["created_at", "updated_at"] = "created_at"
    sortOrder: Literal["asc", "desc"] = "desc"


class PaginationOut(BaseModel):
    currentPage: int
    totalPages: int
    totalItems: int
    itemsPerPage: int
    hasNextPage: bool
    hasPrevPage: bool


class JsonOutResult(BaseModel, Generic[T]):
    data: Optional[T] = None
    status: str
    status_code: str
    message: str


class FieldError(BaseModel):
    field: str
    message: str


class AuditOut(BaseModel):
    status: bool
    created_by: int
    updated_by: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True
    }
