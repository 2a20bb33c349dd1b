# app/router/admin/payment_methods_router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_db
from shared.core.schemas import UserToken
from shared.helpers.json_response_helper import success_response
from shared.utils.app_status_code import AppStatusCode

from ...crud.admin import payment_methods_crud as crud
from ...schemas.admin.payment_methods_schemas import PaymentMethodCreate, PaymentMethodRequest, PaymentMethodUpdate

router = APIRouter(prefix="/api/admin/payment-methods", tags=["payment_methods"], dependencies=[Depends(validate_current_token)])


@router.post("/create", status_code=status.HTTP_201_CREATED)
def create_payment_method(
    payload: PaymentMethodCreate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.create(db, payload, current_user)
    return success_response(data=result, message="Payment method created successfully",
                            status_code=AppStatusCode.CREATED_SUCCESSFULLY)


@router.get("/getAll")
def get_all_payment_methods(params: PaymentMethodRequest = Depends(), db: Session = Depends(get_db)):
    return success_response(data=crud.get_all(db, params), message="Payment method list retrieved successfully")


@router.get("/getByAuth")
def get_payment_methods_by_auth(
    params: PaymentMethodRequest = Depends(),
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return success_response(data=crud.get_by_auth(db, current_user, params),
                            message="Payment method list retrieved successfully")


@router.get("/getById/{payment_methods_id}")
def get_payment_method_by_id(payment_methods_id: int, db: Session = Depends(get_db)):
    return success_response(data=crud.get_by_id(db, payment_methods_id), message="Payment method retrieved successfully")


@router.put("/update")
def update_payment_method(
    payload: PaymentMethodUpdate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.update(db, payload, current_user)
    return success_response(data=result, message="Payment method updated successfully",
                            status_code=AppStatusCode.UPDATED_SUCCESSFULLY)


@router.delete("/delete/{payment_methods_id}")
def delete_payment_method(
    payment_methods_id: int,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.delete(db, payment_methods_id, current_user)
    return success_response(data=result, message="Payment method deleted successfully",
                            status_code=AppStatusCode.DELETED_SUCCESSFULLY)
