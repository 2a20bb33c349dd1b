# app/router/payments/transaction_router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_db
from shared.core.schemas import UserToken
from shared.helpers.json_response_helper import success_response
from shared.utils.app_status_code import AppStatusCode

from ...crud.payments import transaction_crud as crud
from ...schemas.payments.transaction_schemas import TransactionCreate, TransactionRequest, TransactionUpdate

router = APIRouter(prefix="/api/master/transactions", tags=["transactions"], dependencies=[Depends(validate_current_token)])


@router.post("/create", status_code=status.HTTP_201_CREATED)
def create_transaction(
    payload: TransactionCreate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.create(db, payload, current_user)
    return success_response(data=result, message="Transaction created successfully",
                            status_code=AppStatusCode.CREATED_SUCCESSFULLY)


@router.get("/getAll")
def get_all_transactions(params: TransactionRequest = Depends(), db: Session = Depends(get_db)):
    return success_response(data=crud.get_all(db, params), message="Transaction list retrieved successfully")


@router.get("/getByAuth")
def get_transactions_by_auth(
    params: TransactionRequest = Depends(),
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return success_response(data=crud.get_by_auth(db, current_user, params),
                            message="Transaction list retrieved successfully")


@router.get("/getById/{transaction_id}")
def get_transaction_by_id(transaction_id: int, db: Session = Depends(get_db)):
    return success_response(data=crud.get_by_id(db, transaction_id), message="Transaction retrieved successfully")


@router.put("/update")
def update_transaction(
    payload: TransactionUpdate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.update(db, payload, current_user)
    return success_response(data=result, message="Transaction updated successfully",
                            status_code=AppStatusCode.UPDATED_SUCCESSFULLY)


@router.delete("/delete/{transaction_id}")
def delete_transaction(
    transaction_id: int,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.delete(db, transaction_id, current_user)
    return success_response(data=result, message="Transaction deleted successfully",
                            status_code=AppStatusCode.DELETED_SUCCESSFULLY)
