# crud/events/event_discussion_chat_crud.py
from sqlalchemy.orm import Session

from shared.core.schemas import UserToken
from shared.models.mixins import utcnow

from ..common.entity_crud import EntityCrud
from ...models.events.event_discussion_chat import EventDiscussionChat
from ...schemas.events.event_discussion_chat_schemas import (
    EventDiscussionChatCreate, EventDiscussionChatOut, EventDiscussionChatRequest,
    EventDiscussionChatUpdate)

crud = EntityCrud(
    EventDiscussionChat,
    public_id="event_discussion_chat_id",
    out_schema=EventDiscussionChatOut,
    label="Discussion message",
    search_fields=("message",),
    filter_fields=("event_id", "user_id", "message_type"),
    soft_delete=False,
)


def create(db: Session, payload: EventDiscussionChatCreate, user: UserToken):
    return crud.to_out(crud.create(db, payload, user, user_id=payload.user_id or user.user_id))


def get_all(db: Session, params: EventDiscussionChatRequest):
    return crud.get_all(db, params)


def get_by_auth(db: Session, user: UserToken, params: EventDiscussionChatRequest):
    return crud.get_by_auth(db, user, params)


def get_by_id(db: Session, event_discussion_chat_id: int):
    return crud.get_by_id(db, event_discussion_chat_id)


def update(db: Session, payload: EventDiscussionChatUpdate, user: UserToken):
    record = crud.get_record(db, payload.event_discussion_chat_id, active_only=False)
    data = crud.changes(payload)
    if "message" in data and data["message"] != record.message:
        data["is_edited"] = True
        data["edited_at"] = utcnow()
    return crud.to_out(crud.apply_update(db, record, data, user))


def delete(db: Session, event_discussion_chat_id: int, user: UserToken):
    return crud.delete(db, event_discussion_chat_id, user)
