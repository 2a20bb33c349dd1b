# crud/events/guest_crud.py
import logging

from sqlalchemy.orm import Session

from shared.core.schemas import UserToken
from shared.helpers.email_helper import EmailHelper

from ..common.entity_crud import EntityCrud
from ...models.events.event import Event
from ...models.events.guest import Guest
from ...schemas.events.guest_schemas import GuestCreate, GuestOut, GuestRequest, GuestUpdate

logger = logging.getLogger(__name__)

crud = EntityCrud(
    Guest,
    public_id="guest_id",
    out_schema=GuestOut,
    label="Guest",
    search_fields=("name", "email", "mobileno"),
    filter_fields=("event_id", "role_id"),
    soft_delete=False,
)


def send_invitation(db: Session, guest: Guest, email_helper: EmailHelper = None) -> bool:
    """Email the guest an invitation to their event; never raises."""
    if not guest.email or guest.event_id is None:
        return False

    event = (
        db.query(Event)
        .filter(Event.event_id == guest.event_id, Event.status.is_(True))
        .first()
    )
    if event is None:
        logger.info("Event %s not found, skipping invitation for guest %s",
                    guest.event_id, guest.guest_id)
        return False

    helper = email_helper or EmailHelper()
    try:
        return helper.send_guest_invitation(
            recipient=guest.email,
            guest_name=guest.name,
            event={
                "title": event.name_title,
                "date": event.date.strftime("%d %b %Y") if event.date else None,
                "time": event.time,
                "location": event.street_address,
            },
            note=guest.specialnote,
        )
    except Exception:
        logger.exception("Failed to send invitation to guest %s", guest.guest_id)
        return False


def create(db: Session, payload: GuestCreate, user: UserToken):
    record = crud.create(db, payload, user)
    result = crud.to_out(record)
    send_invitation(db, record)
    return result


def get_all(db: Session, params: GuestRequest):
    return crud.get_all(db, params)


def get_by_auth(db: Session, user: UserToken, params: GuestRequest):
    return crud.get_by_auth(db, user, params)


def get_by_id(db: Session, guest_id: int):
    return crud.get_by_id(db, guest_id)


def update(db: Session, payload: GuestUpdate, user: UserToken):
    return crud.to_out(crud.update(db, payload, user))


def delete(db: Session, guest_id: int, user: UserToken):
    return crud.delete(db, guest_id, user)
