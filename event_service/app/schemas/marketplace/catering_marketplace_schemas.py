from typing import Literal, Optional
from pydantic import Field

from shared.core.schemas import AuditOut, CommonQueryParams
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class CateringMarketplaceBase(EmptyStringModel):
    catering_marketplace_category_id: int = Field(..., ge=1)
    name: str = Field(..., min_length=1, max_length=200)
    image: Optional[str] = Field(None, max_length=500)
    review_count: int = Field(0, ge=0)
    address: str = Field(..., min_length=1, max_length=500)
    mobile_no: str = Field(..., min_length=5, max_length=20)
    amount_per_guest: float = Field(0, ge=0)


class CateringMarketplaceCreate(CateringMarketplaceBase):
    status: Optional[bool] = True


class CateringMarketplaceUpdate(EmptyStringModel):
    catering_marketplace_id: int = Field(..., ge=1)
    catering_marketplace_category_id: Optional[int] = Field(None, ge=1)
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    image: Optional[str] = Field(None, max_length=500)
    review_count: Optional[int] = Field(None, ge=0)
    address: Optional[str] = Field(None, min_length=1, max_length=500)
    mobile_no: Optional[str] = Field(None, min_length=5, max_length=20)
    amount_per_guest: Optional[float] = Field(None, ge=0)
    status: Optional[bool] = None


class CateringMarketplaceOut(AuditOut):
    catering_marketplace_id: int
    catering_marketplace_category_id: int
    name: str
    image: Optional[str] = None
    review_count: int
    address: str
    mobile_no: str
    amount_per_guest: float


class CateringMarketplaceRequest(CommonQueryParams):
    catering_marketplace_category_id: Optional[int] = Field(None, ge=1)
    sortBy: Literal["created_at", "updated_at", "name", "amount_per_guest",
                    "review_count", "catering_marketplace_id"] = "created_at"
