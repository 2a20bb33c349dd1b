# app/router/integrations/escrow_router.py
from typing import Optional

from fastapi import APIRouter, Depends, Header, Request, status
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_db
from shared.core.schemas import UserToken
from shared.helpers.json_response_helper import success_response
from shared.utils.app_status_code import AppStatusCode

from ...crud.integrations import escrow_crud as crud
from ...schemas.integrations.escrow_schemas import AsCustomerQuery, EscrowListQuery, EscrowPayload

router = APIRouter(prefix="/api/integrations/escrow", tags=["escrow"],
                   dependencies=[Depends(validate_current_token)])


def forwarded_params(request: Request) -> dict:
    """Query string minus ``asCustomer``, passed through to the gateway as-is."""
    return {k: v for k, v in request.query_params.items() if k != "asCustomer"}


# ---------------- Customers ----------------

@router.post("/customers", status_code=status.HTTP_201_CREATED)
def create_escrow_customer(payload: EscrowPayload):
    return success_response(data=crud.create_customer(payload),
                            message="Escrow customer created successfully",
                            status_code=AppStatusCode.CREATED_SUCCESSFULLY)


# declared before /customers/{customer_id} so "me" is not taken as an id
@router.get("/customers/me")
def get_escrow_customer_profile(params: AsCustomerQuery = Depends()):
    return success_response(data=crud.get_customer_profile(params.asCustomer),
                            message="Escrow customer profile retrieved successfully")


@router.get("/customers")
def list_escrow_customers(request: Request, params: EscrowListQuery = Depends()):
    return success_response(data=crud.list_customers(forwarded_params(request), params.asCustomer),
                            message="Escrow customers retrieved successfully")


@router.get("/customers/{customer_id}")
def get_escrow_customer(customer_id: str, params: AsCustomerQuery = Depends()):
    return success_response(data=crud.get_customer(customer_id, params.asCustomer),
                            message="Escrow customer retrieved successfully")


@router.patch("/customers/{customer_id}")
def update_escrow_customer(customer_id: str, payload: EscrowPayload):
    return success_response(data=crud.update_customer(customer_id, payload),
                            message="Escrow customer updated successfully",
                            status_code=AppStatusCode.UPDATED_SUCCESSFULLY)


# ---------------- Transactions ----------------

@router.post("/transactions", status_code=status.HTTP_201_CREATED)
def create_escrow_transaction(
    payload: EscrowPayload,
    idempotency_key: Optional[str] = Header(None, alias="Idempotency-Key"),
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.create_transaction(db, payload, current_user, idempotency_key=idempotency_key)
    return success_response(data=result, message="Escrow transaction created successfully",
                            status_code=AppStatusCode.CREATED_SUCCESSFULLY)


@router.get("/transactions")
def list_escrow_transactions(request: Request, params: EscrowListQuery = Depends()):
    return success_response(data=crud.list_transactions(forwarded_params(request), params.asCustomer),
                            message="Escrow transactions retrieved successfully")


@router.get("/transactions/{transaction_id}")
def get_escrow_transaction(transaction_id: str, params: AsCustomerQuery = Depends()):
    return success_response(data=crud.get_transaction(transaction_id, params.asCustomer),
                            message="Escrow transaction retrieved successfully")


@router.patch("/transactions/{transaction_id}")
def update_escrow_transaction(
    transaction_id: str,
    payload: EscrowPayload,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.update_transaction(db, transaction_id, payload, current_user)
    return success_response(data=result, message="Escrow transaction updated successfully",
                            status_code=AppStatusCode.UPDATED_SUCCESSFULLY)


@router.post("/transactions/{transaction_id}/action")
def perform_escrow_action(transaction_id: str, payload: EscrowPayload):
    return success_response(data=crud.transaction_action(transaction_id, payload),
                            message="Escrow action executed successfully",
                            status_code=AppStatusCode.OPERATION_SUCCESSFUL)


@router.post("/transactions/{transaction_id}/message")
def add_escrow_message(transaction_id: str, payload: EscrowPayload):
    return success_response(data=crud.transaction_message(transaction_id, payload),
                            message="Escrow message sent successfully",
                            status_code=AppStatusCode.OPERATION_SUCCESSFUL)


@router.get("/test-connection")
def test_escrow_connection():
    return success_response(data=crud.check_connection(),
                            message="Escrow API connection successful")
