# crud/communication/messages_crud.py
from sqlalchemy.orm import Session

from shared.core.schemas import UserToken

from ..common.entity_crud import EntityCrud
from .notification_crud import create_notification
from ...enum.event_enum import NotificationType
from ...models.communication.messages import Message
from ...schemas.communication.messages_schemas import (
    MessageCreate, MessageOut, MessageRequest, MessageUpdate)

crud = EntityCrud(
    Message,
    public_id="messages_id",
    out_schema=MessageOut,
    label="Message",
    search_fields=("messages_txt",),
    filter_fields=("sender_id", "receiver_id"),
    soft_delete=True,
)


def create(db: Session, payload: MessageCreate, user: UserToken):
    record = crud.create(db, payload, user, sender_id=payload.sender_id or user.user_id)
    result = crud.to_out(record)

    create_notification(
        db,
        user_id=record.receiver_id,
        notification_type_id=NotificationType.message.value,
        text=f"You have a new message from user {record.sender_id}.",
        created_by=user.user_id,
    )
    return result


def get_all(db: Session, params: MessageRequest):
    return crud.get_all(db, params)


def get_by_auth(db: Session, user: UserToken, params: MessageRequest):
    return crud.get_by_auth(db, user, params)


def get_by_id(db: Session, messages_id: int):
    return crud.get_by_id(db, messages_id)


def update(db: Session, payload: MessageUpdate, user: UserToken):
    return crud.to_out(crud.update(db, payload, user))


def delete(db: Session, messages_id: int, user: UserToken):
    return crud.delete(db, messages_id, user)
