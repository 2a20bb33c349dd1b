# crud/events/event_crud.py
from sqlalchemy.orm import Session

from shared.core.schemas import UserToken

from ..common.entity_crud import EntityCrud
from ..communication.notification_crud import create_notification
from ...enum.event_enum import NotificationType
from ...models.events.event import Event
from ...schemas.events.event_schemas import EventCreate, EventOut, EventRequest, EventUpdate

crud = EntityCrud(
    Event,
    public_id="event_id",
    out_schema=EventOut,
    label="Event",
    search_fields=("name_title", "description", "street_address"),
    filter_fields=("event_type_id", "city_id", "venue_details_id", "event_visibility"),
    soft_delete=True,
)


def create(db: Session, payload: EventCreate, user: UserToken):
    record = crud.create(db, payload, user)
    result = crud.to_out(record)

    create_notification(
        db,
        user_id=user.user_id,
        notification_type_id=NotificationType.event.value,
        text=f"Your event '{record.name_title}' has been created.",
        created_by=user.user_id,
    )
    return result


def get_all(db: Session, params: EventRequest):
    return crud.get_all(db, params)


def get_by_auth(db: Session, user: UserToken, params: EventRequest):
    return crud.get_by_auth(db, user, params)


def get_by_id(db: Session, event_id: int):
    return crud.get_by_id(db, event_id)


def update(db: Session, payload: EventUpdate, user: UserToken):
    return crud.to_out(crud.update(db, payload, user))


def delete(db: Session, event_id: int, user: UserToken):
    return crud.delete(db, event_id, user)
