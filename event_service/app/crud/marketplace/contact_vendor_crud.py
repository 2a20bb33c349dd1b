# crud/marketplace/contact_vendor_crud.py
from sqlalchemy.orm import Session

from shared.core.schemas import UserToken

from ..common.entity_crud import EntityCrud
from ..communication.notification_crud import create_notification
from ...enum.event_enum import NotificationType
from ...models.marketplace.contact_vendor import ContactVendor
from ...schemas.marketplace.contact_vendor_schemas import (
    ContactVendorCreate, ContactVendorOut, ContactVendorRequest, ContactVendorUpdate)

crud = EntityCrud(
    ContactVendor,
    public_id="contact_vendor_id",
    out_schema=ContactVendorOut,
    label="Vendor contact",
    search_fields=("topic", "description"),
    filter_fields=("vendor_id", "user_id", "event_id"),
    soft_delete=False,
)


def create(db: Session, payload: ContactVendorCreate, user: UserToken):
    record = crud.create(db, payload, user, user_id=payload.user_id or user.user_id)
    result = crud.to_out(record)

    create_notification(
        db,
        user_id=record.user_id,
        notification_type_id=NotificationType.contact.value,
        text=f"Your request '{record.topic}' has been sent to the vendor.",
        created_by=user.user_id,
    )
    return result


def get_all(db: Session, params: ContactVendorRequest):
    return crud.get_all(db, params)


def get_by_auth(db: Session, user: UserToken, params: ContactVendorRequest):
    return crud.get_by_auth(db, user, params)


def get_by_id(db: Session, contact_vendor_id: int):
    return crud.get_by_id(db, contact_vendor_id)


def update(db: Session, payload: ContactVendorUpdate, user: UserToken):
    return crud.to_out(crud.update(db, payload, user))


def delete(db: Session, contact_vendor_id: int, user: UserToken):
    return crud.delete(db, contact_vendor_id, user)
