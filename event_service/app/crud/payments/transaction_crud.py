# crud/payments/transaction_crud.py
import logging
from typing import Any

from sqlalchemy.orm import Session

from shared.core.schemas import UserToken
from shared.helpers.sequence_helper import next_sequence_value
from shared.models.mixins import utcnow

from ..common.entity_crud import EntityCrud
from ...enum.payment_enum import ESCROW_STATUS_MAP, TransactionStatus, TransactionType
from ...models.payments.transaction import Transaction
from ...schemas.payments.transaction_schemas import (
    TransactionCreate, TransactionOut, TransactionRequest, TransactionUpdate)

logger = logging.getLogger(__name__)

crud = EntityCrud(
    Transaction,
    public_id="transaction_id",
    out_schema=TransactionOut,
    label="Transaction",
    search_fields=("reference_number", "escrow_transaction_id", "refund_reason"),
    filter_fields=("user_id", "transaction_status", "transaction_type",
                   "event_id", "escrow_transaction_id"),
    soft_delete=True,
)


def map_escrow_status(gateway_status: Any) -> str:
    """Translate a gateway status word into the local transaction status.

    Anything that is not a known status word, including non-string values,
    maps to ``pending``.
    """
    if not isinstance(gateway_status, str):
        return TransactionStatus.pending.value
    key = gateway_status.strip().lower()
    return ESCROW_STATUS_MAP.get(key, TransactionStatus.pending).value


def create(db: Session, payload: TransactionCreate, user: UserToken):
    return crud.to_out(crud.create(db, payload, user, user_id=payload.user_id or user.user_id))


def get_all(db: Session, params: TransactionRequest):
    return crud.get_all(db, params)


def get_by_auth(db: Session, user: UserToken, params: TransactionRequest):
    return crud.get_by_auth(db, user, params)


def get_by_id(db: Session, transaction_id: int):
    return crud.get_by_id(db, transaction_id)


def update(db: Session, payload: TransactionUpdate, user: UserToken):
    return crud.to_out(crud.update(db, payload, user))


def delete(db: Session, transaction_id: int, user: UserToken):
    return crud.delete(db, transaction_id, user)


# ---------------- Escrow mirror ----------------
# The gateway call has already succeeded when these run, so local failures
# are logged and swallowed.

def record_escrow_transaction(db: Session, gateway: dict, request_body: dict, user: UserToken):
    """Mirror a gateway transaction locally; failures are logged, never raised."""
    try:
        gateway = gateway if isinstance(gateway, dict) else {}
        amount = gateway.get("amount")
        if amount is None:
            amount = request_body.get("amount")

        record = Transaction(
            transaction_id=next_sequence_value(db, crud.sequence_name),
            user_id=user.user_id,
            amount=float(amount or 0),
            transaction_status=map_escrow_status(gateway.get("status")),
            transaction_type=TransactionType.escrow_payment.value,
            escrow_transaction_id=str(gateway["id"]) if gateway.get("id") is not None else None,
            created_by=user.user_id,
        )
        db.add(record)
        db.commit()
        db.refresh(record)
        logger.info("Recorded escrow transaction %s as transaction_id=%s",
                    record.escrow_transaction_id, record.transaction_id)
        return record
    except Exception:
        db.rollback()
        logger.exception("Failed to record escrow transaction locally")
        return None


def sync_escrow_transaction(db: Session, escrow_transaction_id: str, gateway: dict, user: UserToken):
    """Refresh the local mirror of a gateway transaction, if one exists."""
    try:
        gateway = gateway if isinstance(gateway, dict) else {}
        record = (
            db.query(Transaction)
            .filter(Transaction.escrow_transaction_id == str(escrow_transaction_id))
            .first()
        )
        if record is None:
            return None

        # non-string statuses leave the mirrored status unchanged
        if isinstance(gateway.get("status"), str):
            record.transaction_status = map_escrow_status(gateway["status"])
        record.updated_by = user.user_id
        record.updated_at = utcnow()
        db.commit()
        return record
    except Exception:
        db.rollback()
        logger.exception("Failed to sync escrow transaction %s", escrow_transaction_id)
        return None
