# app/router/marketplace/catering_marketplace_router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_db
from shared.core.schemas import UserToken
from shared.helpers.json_response_helper import success_response
from shared.utils.app_status_code import AppStatusCode

from ...crud.marketplace import catering_marketplace_crud as crud
from ...schemas.marketplace.catering_marketplace_schemas import CateringMarketplaceCreate, CateringMarketplaceRequest, CateringMarketplaceUpdate

router = APIRouter(prefix="/api/catering-marketplace", tags=["catering_marketplace"], dependencies=[Depends(validate_current_token)])


@router.post("/create", status_code=status.HTTP_201_CREATED)
def create_catering_marketplace(
    payload: CateringMarketplaceCreate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.create(db, payload, current_user)
    return success_response(data=result, message="Catering marketplace created successfully",
                            status_code=AppStatusCode.CREATED_SUCCESSFULLY)


@router.get("/getAll")
def get_all_catering_marketplaces(params: CateringMarketplaceRequest = Depends(), db: Session = Depends(get_db)):
    return success_response(data=crud.get_all(db, params), message="Catering marketplace list retrieved successfully")


@router.get("/getByAuth")
def get_catering_marketplaces_by_auth(
    params: CateringMarketplaceRequest = Depends(),
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return success_response(data=crud.get_by_auth(db, current_user, params),
                            message="Catering marketplace list retrieved successfully")


@router.get("/getById/{catering_marketplace_id}")
def get_catering_marketplace_by_id(catering_marketplace_id: int, db: Session = Depends(get_db)):
    return success_response(data=crud.get_by_id(db, catering_marketplace_id), message="Catering marketplace retrieved successfully")


@router.put("/update")
def update_catering_marketplace(
    payload: CateringMarketplaceUpdate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.update(db, payload, current_user)
    return success_response(data=result, message="Catering marketplace updated successfully",
                            status_code=AppStatusCode.UPDATED_SUCCESSFULLY)


@router.delete("/delete/{catering_marketplace_id}")
def delete_catering_marketplace(
    catering_marketplace_id: int,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.delete(db, catering_marketplace_id, current_user)
    return success_response(data=result, message="Catering marketplace deleted successfully",
                            status_code=AppStatusCode.DELETED_SUCCESSFULLY)
