# app/router/communication/messages_router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_db
from shared.core.schemas import UserToken
from shared.helpers.json_response_helper import success_response
from shared.utils.app_status_code import AppStatusCode

from ...crud.communication import messages_crud as crud
from ...schemas.communication.messages_schemas import MessageCreate, MessageRequest, MessageUpdate

router = APIRouter(prefix="/api/master/messages", tags=["messages"], dependencies=[Depends(validate_current_token)])


@router.post("/create", status_code=status.HTTP_201_CREATED)
def create_message(
    payload: MessageCreate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.create(db, payload, current_user)
    return success_response(data=result, message="Message created successfully",
                            status_code=AppStatusCode.CREATED_SUCCESSFULLY)


@router.get("/getAll")
def get_all_messages(params: MessageRequest = Depends(), db: Session = Depends(get_db)):
    return success_response(data=crud.get_all(db, params), message="Message list retrieved successfully")


@router.get("/getByAuth")
def get_messages_by_auth(
    params: MessageRequest = Depends(),
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return success_response(data=crud.get_by_auth(db, current_user, params),
                            message="Message list retrieved successfully")


@router.get("/getById/{messages_id}")
def get_message_by_id(messages_id: int, db: Session = Depends(get_db)):
    return success_response(data=crud.get_by_id(db, messages_id), message="Message retrieved successfully")


@router.put("/update")
def update_message(
    payload: MessageUpdate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.update(db, payload, current_user)
    return success_response(data=result, message="Message updated successfully",
                            status_code=AppStatusCode.UPDATED_SUCCESSFULLY)


@router.delete("/delete/{messages_id}")
def delete_message(
    messages_id: int,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.delete(db, messages_id, current_user)
    return success_response(data=result, message="Message deleted successfully",
                            status_code=AppStatusCode.DELETED_SUCCESSFULLY)
