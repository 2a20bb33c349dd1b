from typing import Literal, Optional
from pydantic import EmailStr, Field

from shared.core.schemas import AuditOut, CommonQueryParams
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class VendorBusinessInformationBase(EmptyStringModel):
    vendor_id: int = Field(..., ge=1)
    business_name: str = Field(..., min_length=1, max_length=200)
    legal_name: Optional[str] = Field(None, max_length=200)
    business_email: EmailStr
    business_phone: str = Field(..., min_length=5, max_length=20)
    description: Optional[str] = Field(None, max_length=1000)
    business_address: Optional[str] = Field(None, max_length=500)
    city_id: Optional[int] = Field(None, ge=1)
    state_id: Optional[int] = Field(None, ge=1)
    country_id: Optional[int] = Field(None, ge=1)
    zip_code: Optional[str] = Field(None, max_length=20)
    business_website_url: Optional[str] = Field(None, max_length=500)
    business_logo_url: Optional[str] = Field(None, max_length=500)
    service_location: Optional[str] = Field(None, max_length=500)
    service_radius: Optional[int] = Field(None, ge=0)


class VendorBusinessInformationCreate(VendorBusinessInformationBase):
    status: Optional[bool] = True


class VendorBusinessInformationUpdate(EmptyStringModel):
    business_information_id: int = Field(..., ge=1)
    vendor_id: Optional[int] = Field(None, ge=1)
    business_name: Optional[str] = Field(None, min_length=1, max_length=200)
    legal_name: Optional[str] = Field(None, max_length=200)
    business_email: Optional[EmailStr] = None
    business_phone: Optional[str] = Field(None, min_length=5, max_length=20)
    description: Optional[str] = Field(None, max_length=1000)
    business_address: Optional[str] = Field(None, max_length=500)
    city_id: Optional[int] = Field(None, ge=1)
    state_id: Optional[int] = Field(None, ge=1)
    country_id: Optional[int] = Field(None, ge=1)
    zip_code: Optional[str] = Field(None, max_length=20)
    business_website_url: Optional[str] = Field(None, max_length=500)
    business_logo_url: Optional[str] = Field(None, max_length=500)
    service_location: Optional[str] = Field(None, max_length=500)
    service_radius: Optional[int] = Field(None, ge=0)
    status: Optional[bool] = None


class VendorBusinessInformationOut(AuditOut):
    business_information_id: int
    vendor_id: int
    business_name: str
    legal_name: Optional[str] = None
    business_email: str
    business_phone: str
    description: Optional[str] = None
    business_address: Optional[str] = None
    city_id: Optional[int] = None
    state_id: Optional[int] = None
    country_id: Optional[int] = None
    zip_code: Optional[str] = None
    business_website_url: Optional[str] = None
    business_logo_url: Optional[str] = None
    service_location: Optional[str] = None
    service_radius: Optional[int] = None


class VendorBusinessInformationRequest(CommonQueryParams):
    vendor_id: Optional[int] = Field(None, ge=1)
    city_id: Optional[int] = Field(None, ge=1)
    sortBy: Literal["created_at", "updated_at", "business_name",
                    "business_information_id"] = "created_at"
