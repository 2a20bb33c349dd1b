# app/router/marketplace/vendor_business_information_router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_db
from shared.core.schemas import UserToken
from shared.helpers.json_response_helper import success_response
from shared.utils.app_status_code import AppStatusCode

from ...crud.marketplace import vendor_business_information_crud as crud
from ...schemas.marketplace.vendor_business_information_schemas import VendorBusinessInformationCreate, VendorBusinessInformationRequest, VendorBusinessInformationUpdate

router = APIRouter(prefix="/api/vendor/business-information", tags=["vendor_business_information"], dependencies=[Depends(validate_current_token)])


@router.post("/create", status_code=status.HTTP_201_CREATED)
def create_business_information(
    payload: VendorBusinessInformationCreate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.create(db, payload, current_user)
    return success_response(data=result, message="Vendor business information created successfully",
                            status_code=AppStatusCode.CREATED_SUCCESSFULLY)


@router.get("/getAll")
def get_all_business_information(params: VendorBusinessInformationRequest = Depends(), db: Session = Depends(get_db)):
    return success_response(data=crud.get_all(db, params), message="Vendor business information list retrieved successfully")


@router.get("/getByAuth")
def get_business_information_by_auth(
    params: VendorBusinessInformationRequest = Depends(),
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return success_response(data=crud.get_by_auth(db, current_user, params),
                            message="Vendor business information list retrieved successfully")


@router.get("/getById/{business_information_id}")
def get_business_information_by_id(business_information_id: int, db: Session = Depends(get_db)):
    return success_response(data=crud.get_by_id(db, business_information_id), message="Vendor business information retrieved successfully")


@router.put("/update")
def update_business_information(
    payload: VendorBusinessInformationUpdate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.update(db, payload, current_user)
    return success_response(data=result, message="Vendor business information updated successfully",
                            status_code=AppStatusCode.UPDATED_SUCCESSFULLY)


@router.delete("/delete/{business_information_id}")
def delete_business_information(
    business_information_id: int,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.delete(db, business_information_id, current_user)
    return success_response(data=result, message="Vendor business information deleted successfully",
                            status_code=AppStatusCode.DELETED_SUCCESSFULLY)
