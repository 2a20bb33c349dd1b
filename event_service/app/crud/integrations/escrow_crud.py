# crud/integrations/escrow_crud.py
import logging
from typing import Optional

from sqlalchemy.orm import Session

from shared.core.schemas import UserToken
from shared.utils import escrow_client
from shared.utils.escrow_client import EscrowApiError, escrow_path

from ..payments.transaction_crud import record_escrow_transaction, sync_escrow_transaction
from ...schemas.integrations.escrow_schemas import EscrowPayload

logger = logging.getLogger(__name__)


# ---------------- Customers ----------------

def create_customer(payload: EscrowPayload):
    as_customer, body = payload.split()
    return escrow_client.call_escrow("post", "/customer", data=body, as_customer=as_customer)


def update_customer(customer_id: str, payload: EscrowPayload):
    as_customer, body = payload.split()
    return escrow_client.call_escrow("patch", escrow_path("customer", customer_id),
                                     data=body, as_customer=as_customer)


def get_customer_profile(as_customer: Optional[str] = None):
    return escrow_client.call_escrow("get", "/customer/me", as_customer=as_customer)


def list_customers(params: dict, as_customer: Optional[str] = None):
    return escrow_client.call_escrow("get", "/customer", params=params or None,
                                     as_customer=as_customer)


def get_customer(customer_id: str, as_customer: Optional[str] = None):
    return escrow_client.call_escrow("get", escrow_path("customer", customer_id),
                                     as_customer=as_customer)


# ---------------- Transactions ----------------

def create_transaction(db: Session, payload: EscrowPayload, user: UserToken,
                       idempotency_key: Optional[str] = None):
    as_customer, body = payload.split()
    response = escrow_client.call_escrow("post", "/transaction", data=body,
                                         as_customer=as_customer,
                                         idempotency_key=idempotency_key)
    record_escrow_transaction(db, response, body, user)
    return response


def list_transactions(params: dict, as_customer: Optional[str] = None):
    return escrow_client.call_escrow("get", "/transaction", params=params or None,
                                     as_customer=as_customer)


def get_transaction(transaction_id: str, as_customer: Optional[str] = None):
    return escrow_client.call_escrow("get", escrow_path("transaction", transaction_id),
                                     as_customer=as_customer)


def update_transaction(db: Session, transaction_id: str, payload: EscrowPayload, user: UserToken):
    as_customer, body = payload.split()
    response = escrow_client.call_escrow("patch", escrow_path("transaction", transaction_id),
                                         data=body, as_customer=as_customer)
    sync_escrow_transaction(db, transaction_id, response, user)
    return response


def transaction_action(transaction_id: str, payload: EscrowPayload):
    as_customer, body = payload.split()
    return escrow_client.call_escrow("post", escrow_path("transaction", transaction_id, "action"),
                                     data=body, as_customer=as_customer)


def transaction_message(transaction_id: str, payload: EscrowPayload):
    as_customer, body = payload.split()
    return escrow_client.call_escrow("post", escrow_path("transaction", transaction_id, "message"),
                                     data=body, as_customer=as_customer)


def check_connection():
    try:
        sample = escrow_client.call_escrow("get", "/transaction", params={"limit": 1})
    except EscrowApiError as e:
        logger.error("Escrow API connection test failed status=%s message=%s",
                     e.status_code, e.message)
        raise
    return {"connected": True, "sample": sample}
