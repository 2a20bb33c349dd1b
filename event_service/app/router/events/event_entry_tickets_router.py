# app/router/events/event_entry_tickets_router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_db
from shared.core.schemas import UserToken
from shared.helpers.json_response_helper import success_response
from shared.utils.app_status_code import AppStatusCode

from ...crud.events import event_entry_tickets_crud as crud
from ...schemas.events.event_entry_tickets_schemas import EventEntryTicketCreate, EventEntryTicketRequest, EventEntryTicketUpdate

router = APIRouter(prefix="/api/event-entry-tickets", tags=["event_entry_tickets"], dependencies=[Depends(validate_current_token)])


@router.post("/create", status_code=status.HTTP_201_CREATED)
def create_event_entry_ticket(
    payload: EventEntryTicketCreate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.create(db, payload, current_user)
    return success_response(data=result, message="Event entry ticket created successfully",
                            status_code=AppStatusCode.CREATED_SUCCESSFULLY)


@router.get("/getAll")
def get_all_event_entry_tickets(params: EventEntryTicketRequest = Depends(), db: Session = Depends(get_db)):
    return success_response(data=crud.get_all(db, params), message="Event entry ticket list retrieved successfully")


@router.get("/getByAuth")
def get_event_entry_tickets_by_auth(
    params: EventEntryTicketRequest = Depends(),
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return success_response(data=crud.get_by_auth(db, current_user, params),
                            message="Event entry ticket list retrieved successfully")


@router.get("/getById/{event_entry_tickets_id}")
def get_event_entry_ticket_by_id(event_entry_tickets_id: int, db: Session = Depends(get_db)):
    return success_response(data=crud.get_by_id(db, event_entry_tickets_id), message="Event entry ticket retrieved successfully")


@router.put("/update")
def update_event_entry_ticket(
    payload: EventEntryTicketUpdate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.update(db, payload, current_user)
    return success_response(data=result, message="Event entry ticket updated successfully",
                            status_code=AppStatusCode.UPDATED_SUCCESSFULLY)


@router.delete("/delete/{event_entry_tickets_id}")
def delete_event_entry_ticket(
    event_entry_tickets_id: int,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.delete(db, event_entry_tickets_id, current_user)
    return success_response(data=result, message="Event entry ticket deleted successfully",
                            status_code=AppStatusCode.DELETED_SUCCESSFULLY)
