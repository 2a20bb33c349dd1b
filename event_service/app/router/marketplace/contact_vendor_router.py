# app/router/marketplace/contact_vendor_router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_db
from shared.core.schemas import UserToken
from shared.helpers.json_response_helper import success_response
from shared.utils.app_status_code import AppStatusCode

from ...crud.marketplace import contact_vendor_crud as crud
from ...schemas.marketplace.contact_vendor_schemas import ContactVendorCreate, ContactVendorRequest, ContactVendorUpdate

router = APIRouter(prefix="/api/contact-vendor", tags=["contact_vendor"], dependencies=[Depends(validate_current_token)])


@router.post("/create", status_code=status.HTTP_201_CREATED)
def create_vendor_contact(
    payload: ContactVendorCreate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.create(db, payload, current_user)
    return success_response(data=result, message="Vendor contact created successfully",
                            status_code=AppStatusCode.CREATED_SUCCESSFULLY)


@router.get("/getAll")
def get_all_vendor_contacts(params: ContactVendorRequest = Depends(), db: Session = Depends(get_db)):
    return success_response(data=crud.get_all(db, params), message="Vendor contact list retrieved successfully")


@router.get("/getByAuth")
def get_vendor_contacts_by_auth(
    params: ContactVendorRequest = Depends(),
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return success_response(data=crud.get_by_auth(db, current_user, params),
                            message="Vendor contact list retrieved successfully")


@router.get("/getById/{contact_vendor_id}")
def get_vendor_contact_by_id(contact_vendor_id: int, db: Session = Depends(get_db)):
    return success_response(data=crud.get_by_id(db, contact_vendor_id), message="Vendor contact retrieved successfully")


@router.put("/update")
def update_vendor_contact(
    payload: ContactVendorUpdate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.update(db, payload, current_user)
    return success_response(data=result, message="Vendor contact updated successfully",
                            status_code=AppStatusCode.UPDATED_SUCCESSFULLY)


@router.delete("/delete/{contact_vendor_id}")
def delete_vendor_contact(
    contact_vendor_id: int,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.delete(db, contact_vendor_id, current_user)
    return success_response(data=result, message="Vendor contact deleted successfully",
                            status_code=AppStatusCode.DELETED_SUCCESSFULLY)
