# crud/admin/event_type_crud.py
from sqlalchemy import func
from sqlalchemy.orm import Session

from shared.core.schemas import UserToken

from ..common.entity_crud import EntityCrud
from ...models.admin.event_type import EventType
from ...schemas.admin.event_type_schemas import (
    EventTypeCreate, EventTypeOut, EventTypeRequest, EventTypeUpdate)

crud = EntityCrud(
    EventType,
    public_id="event_type_id",
    out_schema=EventTypeOut,
    label="Event type",
    search_fields=("name",),
    soft_delete=True,
)


def _ensure_unique_name(db: Session, name: str, exclude_id: int = None):
    query = db.query(EventType).filter(func.lower(EventType.name) == name.lower())
    if exclude_id is not None:
        query = query.filter(EventType.event_type_id != exclude_id)
    if query.first():
        crud.duplicate(f"Event type '{name}' already exists")


def create(db: Session, payload: EventTypeCreate, user: UserToken):
    _ensure_unique_name(db, payload.name)
    return crud.to_out(crud.create(db, payload, user))


def get_all(db: Session, params: EventTypeRequest):
    return crud.get_all(db, params)


def get_by_auth(db: Session, user: UserToken, params: EventTypeRequest):
    return crud.get_by_auth(db, user, params)


def get_by_id(db: Session, event_type_id: int):
    return crud.get_by_id(db, event_type_id)


def update(db: Session, payload: EventTypeUpdate, user: UserToken):
    if payload.name:
        _ensure_unique_name(db, payload.name, exclude_id=payload.event_type_id)
    return crud.to_out(crud.update(db, payload, user))


def delete(db: Session, event_type_id: int, user: UserToken):
    return crud.delete(db, event_type_id, user)
