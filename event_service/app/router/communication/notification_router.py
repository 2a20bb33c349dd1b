# app/router/communication/notification_router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_db
from shared.core.schemas import UserToken
from shared.helpers.json_response_helper import success_response
from shared.utils.app_status_code import AppStatusCode

from ...crud.communication import notification_crud as crud
from ...schemas.communication.notification_schemas import NotificationCreate, NotificationRequest, NotificationUpdate

router = APIRouter(prefix="/api/admin/notifications", tags=["notifications"], dependencies=[Depends(validate_current_token)])


@router.post("/create", status_code=status.HTTP_201_CREATED)
def create_notification(
    payload: NotificationCreate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.create(db, payload, current_user)
    return success_response(data=result, message="Notification created successfully",
                            status_code=AppStatusCode.CREATED_SUCCESSFULLY)


@router.get("/getAll")
def get_all_notifications(params: NotificationRequest = Depends(), db: Session = Depends(get_db)):
    return success_response(data=crud.get_all(db, params), message="Notification list retrieved successfully")


@router.get("/getByAuth")
def get_notifications_by_auth(
    params: NotificationRequest = Depends(),
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return success_response(data=crud.get_by_auth(db, current_user, params),
                            message="Notification list retrieved successfully")


@router.get("/getById/{notification_id}")
def get_notification_by_id(notification_id: int, db: Session = Depends(get_db)):
    return success_response(data=crud.get_by_id(db, notification_id), message="Notification retrieved successfully")


@router.put("/update")
def update_notification(
    payload: NotificationUpdate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.update(db, payload, current_user)
    return success_response(data=result, message="Notification updated successfully",
                            status_code=AppStatusCode.UPDATED_SUCCESSFULLY)


@router.delete("/delete/{notification_id}")
def delete_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.delete(db, notification_id, current_user)
    return success_response(data=result, message="Notification deleted successfully",
                            status_code=AppStatusCode.DELETED_SUCCESSFULLY)


@router.put("/markAsRead/{notification_id}")
def mark_notification_as_read(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.mark_as_read(db, notification_id, current_user)
    return success_response(data=result, message="Notification marked as read",
                            status_code=AppStatusCode.UPDATED_SUCCESSFULLY)
