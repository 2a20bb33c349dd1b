# app/router/events/guest_router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_db
from shared.core.schemas import UserToken
from shared.helpers.json_response_helper import success_response
from shared.utils.app_status_code import AppStatusCode

from ...crud.events import guest_crud as crud
from ...schemas.events.guest_schemas import GuestCreate, GuestRequest, GuestUpdate

router = APIRouter(prefix="/api/guests", tags=["guests"], dependencies=[Depends(validate_current_token)])


@router.post("/create", status_code=status.HTTP_201_CREATED)
def create_guest(
    payload: GuestCreate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.create(db, payload, current_user)
    return success_response(data=result, message="Guest created successfully",
                            status_code=AppStatusCode.CREATED_SUCCESSFULLY)


@router.get("/getAll")
def get_all_guests(params: GuestRequest = Depends(), db: Session = Depends(get_db)):
    return success_response(data=crud.get_all(db, params), message="Guest list retrieved successfully")


@router.get("/getByAuth")
def get_guests_by_auth(
    params: GuestRequest = Depends(),
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return success_response(data=crud.get_by_auth(db, current_user, params),
                            message="Guest list retrieved successfully")


@router.get("/getById/{guest_id}")
def get_guest_by_id(guest_id: int, db: Session = Depends(get_db)):
    return success_response(data=crud.get_by_id(db, guest_id), message="Guest retrieved successfully")


@router.put("/update")
def update_guest(
    payload: GuestUpdate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.update(db, payload, current_user)
    return success_response(data=result, message="Guest updated successfully",
                            status_code=AppStatusCode.UPDATED_SUCCESSFULLY)


@router.delete("/delete/{guest_id}")
def delete_guest(
    guest_id: int,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.delete(db, guest_id, current_user)
    return success_response(data=result, message="Guest deleted successfully",
                            status_code=AppStatusCode.DELETED_SUCCESSFULLY)
