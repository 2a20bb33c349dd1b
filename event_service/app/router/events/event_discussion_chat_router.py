# app/router/events/event_discussion_chat_router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_db
from shared.core.schemas import UserToken
from shared.helpers.json_response_helper import success_response
from shared.utils.app_status_code import AppStatusCode

from ...crud.events import event_discussion_chat_crud as crud
from ...schemas.events.event_discussion_chat_schemas import EventDiscussionChatCreate, EventDiscussionChatRequest, EventDiscussionChatUpdate

router = APIRouter(prefix="/api/event-discussion-chat", tags=["event_discussion_chat"], dependencies=[Depends(validate_current_token)])


@router.post("/create", status_code=status.HTTP_201_CREATED)
def create_discussion_message(
    payload: EventDiscussionChatCreate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.create(db, payload, current_user)
    return success_response(data=result, message="Discussion message created successfully",
                            status_code=AppStatusCode.CREATED_SUCCESSFULLY)


@router.get("/getAll")
def get_all_discussion_messages(params: EventDiscussionChatRequest = Depends(), db: Session = Depends(get_db)):
    return success_response(data=crud.get_all(db, params), message="Discussion message list retrieved successfully")


@router.get("/getByAuth")
def get_discussion_messages_by_auth(
    params: EventDiscussionChatRequest = Depends(),
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return success_response(data=crud.get_by_auth(db, current_user, params),
                            message="Discussion message list retrieved successfully")


@router.get("/getById/{event_discussion_chat_id}")
def get_discussion_message_by_id(event_discussion_chat_id: int, db: Session = Depends(get_db)):
    return success_response(data=crud.get_by_id(db, event_discussion_chat_id), message="Discussion message retrieved successfully")


@router.put("/update")
def update_discussion_message(
    payload: EventDiscussionChatUpdate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.update(db, payload, current_user)
    return success_response(data=result, message="Discussion message updated successfully",
                            status_code=AppStatusCode.UPDATED_SUCCESSFULLY)


@router.delete("/delete/{event_discussion_chat_id}")
def delete_discussion_message(
    event_discussion_chat_id: int,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.delete(db, event_discussion_chat_id, current_user)
    return success_response(data=result, message="Discussion message deleted successfully",
                            status_code=AppStatusCode.DELETED_SUCCESSFULLY)
