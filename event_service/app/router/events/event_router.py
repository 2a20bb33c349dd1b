# app/router/events/event_router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_db
from shared.core.schemas import UserToken
from shared.helpers.json_response_helper import success_response
from shared.utils.app_status_code import AppStatusCode

from ...crud.events import event_crud as crud
from ...schemas.events.event_schemas import EventCreate, EventRequest, EventUpdate

router = APIRouter(prefix="/api/events", tags=["events"], dependencies=[Depends(validate_current_token)])


@router.post("/create", status_code=status.HTTP_201_CREATED)
def create_event(
    payload: EventCreate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.create(db, payload, current_user)
    return success_response(data=result, message="Event created successfully",
                            status_code=AppStatusCode.CREATED_SUCCESSFULLY)


@router.get("/getAll")
def get_all_events(params: EventRequest = Depends(), db: Session = Depends(get_db)):
    return success_response(data=crud.get_all(db, params), message="Event list retrieved successfully")


@router.get("/getByAuth")
def get_events_by_auth(
    params: EventRequest = Depends(),
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return success_response(data=crud.get_by_auth(db, current_user, params),
                            message="Event list retrieved successfully")


@router.get("/getById/{event_id}")
def get_event_by_id(event_id: int, db: Session = Depends(get_db)):
    return success_response(data=crud.get_by_id(db, event_id), message="Event retrieved successfully")


@router.put("/update")
def update_event(
    payload: EventUpdate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.update(db, payload, current_user)
    return success_response(data=result, message="Event updated successfully",
                            status_code=AppStatusCode.UPDATED_SUCCESSFULLY)


@router.delete("/delete/{event_id}")
def delete_event(
    event_id: int,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.delete(db, event_id, current_user)
    return success_response(data=result, message="Event deleted successfully",
                            status_code=AppStatusCode.DELETED_SUCCESSFULLY)
