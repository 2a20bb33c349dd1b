# app/router/admin/event_type_router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_db
from shared.core.schemas import UserToken
from shared.helpers.json_response_helper import success_response
from shared.utils.app_status_code import AppStatusCode

from ...crud.admin import event_type_crud as crud
from ...schemas.admin.event_type_schemas import EventTypeCreate, EventTypeRequest, EventTypeUpdate

router = APIRouter(prefix="/api/event-types", tags=["event_types"], dependencies=[Depends(validate_current_token)])


@router.post("/create", status_code=status.HTTP_201_CREATED)
def create_event_type(
    payload: EventTypeCreate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.create(db, payload, current_user)
    return success_response(data=result, message="Event type created successfully",
                            status_code=AppStatusCode.CREATED_SUCCESSFULLY)


@router.get("/getAll")
def get_all_event_types(params: EventTypeRequest = Depends(), db: Session = Depends(get_db)):
    return success_response(data=crud.get_all(db, params), message="Event type list retrieved successfully")


@router.get("/getByAuth")
def get_event_types_by_auth(
    params: EventTypeRequest = Depends(),
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return success_response(data=crud.get_by_auth(db, current_user, params),
                            message="Event type list retrieved successfully")


@router.get("/getById/{event_type_id}")
def get_event_type_by_id(event_type_id: int, db: Session = Depends(get_db)):
    return success_response(data=crud.get_by_id(db, event_type_id), message="Event type retrieved successfully")


@router.put("/update")
def update_event_type(
    payload: EventTypeUpdate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.update(db, payload, current_user)
    return success_response(data=result, message="Event type updated successfully",
                            status_code=AppStatusCode.UPDATED_SUCCESSFULLY)


@router.delete("/delete/{event_type_id}")
def delete_event_type(
    event_type_id: int,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.delete(db, event_type_id, current_user)
    return success_response(data=result, message="Event type deleted successfully",
                            status_code=AppStatusCode.DELETED_SUCCESSFULLY)
