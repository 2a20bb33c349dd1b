# crud/communication/notification_crud.py
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shared.core.schemas import UserToken
from shared.helpers.sequence_helper import next_sequence_value

from ..common.entity_crud import EntityCrud
from ...models.communication.notification import Notification
from ...schemas.communication.notification_schemas import (
    NotificationCreate, NotificationOut, NotificationRequest, NotificationUpdate)

logger = logging.getLogger(__name__)

crud = EntityCrud(
    Notification,
    public_id="notification_id",
    out_schema=NotificationOut,
    label="Notification",
    search_fields=("notification_txt",),
    filter_fields=("user_id", "notification_type_id", "is_read"),
    soft_delete=True,
)


def create_notification(db: Session, user_id: int, notification_type_id: int, text: str,
                        created_by: int):
    """Record a notification as a side effect of another operation.

    Runs after the primary record is committed; any failure is logged and
    swallowed so it never fails the caller's request.
    """
    try:
        notification = Notification(
            notification_id=next_sequence_value(db, crud.sequence_name),
            user_id=user_id,
            notification_type_id=notification_type_id,
            notification_txt=text,
            is_read=False,
            created_by=created_by,
        )
        db.add(notification)
        db.commit()
        return notification
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to create notification for user %s", user_id)
        return None


def create(db: Session, payload: NotificationCreate, user: UserToken):
    return crud.to_out(crud.create(db, payload, user))


def get_all(db: Session, params: NotificationRequest):
    return crud.get_all(db, params)


def get_by_auth(db: Session, user: UserToken, params: NotificationRequest):
    # notifications belong to their recipient, not their creator
    return crud.get_by_auth(db, user, params, owner_field="user_id")


def get_by_id(db: Session, notification_id: int):
    return crud.get_by_id(db, notification_id)


def update(db: Session, payload: NotificationUpdate, user: UserToken):
    return crud.to_out(crud.update(db, payload, user))


def mark_as_read(db: Session, notification_id: int, user: UserToken):
    record = crud.get_record(db, notification_id)
    return crud.to_out(crud.apply_update(db, record, {"is_read": True}, user))


def delete(db: Session, notification_id: int, user: UserToken):
    return crud.delete(db, notification_id, user)
