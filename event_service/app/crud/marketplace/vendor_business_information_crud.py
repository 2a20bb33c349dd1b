# crud/marketplace/vendor_business_information_crud.py
from sqlalchemy.orm import Session

from shared.core.schemas import UserToken

from ..common.entity_crud import EntityCrud
from ...models.marketplace.vendor_business_information import VendorBusinessInformation
from ...schemas.marketplace.vendor_business_information_schemas import (
    VendorBusinessInformationCreate, VendorBusinessInformationOut, VendorBusinessInformationRequest, VendorBusinessInformationUpdate)

crud = EntityCrud(
    VendorBusinessInformation,
    public_id="business_information_id",
    out_schema=VendorBusinessInformationOut,
    label="Vendor business information",
    search_fields=("business_name", "legal_name", "business_email", "description"),
    filter_fields=("vendor_id", "city_id"),
    soft_delete=True,
)


def create(db: Session, payload: VendorBusinessInformationCreate, user: UserToken):
    return crud.to_out(crud.create(db, payload, user))


def get_all(db: Session, params: VendorBusinessInformationRequest):
    return crud.get_all(db, params)


def get_by_auth(db: Session, user: UserToken, params: VendorBusinessInformationRequest):
    return crud.get_by_auth(db, user, params)


def get_by_id(db: Session, business_information_id: int):
    return crud.get_by_id(db, business_information_id)


def update(db: Session, payload: VendorBusinessInformationUpdate, user: UserToken):
    return crud.to_out(crud.update(db, payload, user))


def delete(db: Session, business_information_id: int, user: UserToken):
    return crud.delete(db, business_information_id, user)
