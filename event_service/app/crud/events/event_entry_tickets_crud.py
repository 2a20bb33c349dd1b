# crud/events/event_entry_tickets_crud.py
from sqlalchemy.orm import Session

from shared.core.schemas import UserToken

from ..common.entity_crud import EntityCrud
from ...models.events.event_entry_tickets import EventEntryTicket
from ...schemas.events.event_entry_tickets_schemas import (
    EventEntryTicketCreate, EventEntryTicketOut, EventEntryTicketRequest, EventEntryTicketUpdate)

crud = EntityCrud(
    EventEntryTicket,
    public_id="event_entry_tickets_id",
    out_schema=EventEntryTicketOut,
    label="Event entry ticket",
    search_fields=("title", "tag"),
    filter_fields=("event_id",),
    soft_delete=False,
)


def create(db: Session, payload: EventEntryTicketCreate, user: UserToken):
    return crud.to_out(crud.create(db, payload, user))


def get_all(db: Session, params: EventEntryTicketRequest):
    return crud.get_all(db, params)


def get_by_auth(db: Session, user: UserToken, params: EventEntryTicketRequest):
    return crud.get_by_auth(db, user, params)


def get_by_id(db: Session, event_entry_tickets_id: int):
    return crud.get_by_id(db, event_entry_tickets_id)


def update(db: Session, payload: EventEntryTicketUpdate, user: UserToken):
    return crud.to_out(crud.update(db, payload, user))


def delete(db: Session, event_entry_tickets_id: int, user: UserToken):
    return crud.delete(db, event_entry_tickets_id, user)
