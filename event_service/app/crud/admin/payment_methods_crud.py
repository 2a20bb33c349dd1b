# crud/admin/payment_methods_crud.py
from sqlalchemy.orm import Session

from shared.core.schemas import UserToken

from ..common.entity_crud import EntityCrud
from ...models.admin.payment_methods import PaymentMethod
from ...schemas.admin.payment_methods_schemas import (
    PaymentMethodCreate, PaymentMethodOut, PaymentMethodRequest, PaymentMethodUpdate)

crud = EntityCrud(
    PaymentMethod,
    public_id="payment_methods_id",
    out_schema=PaymentMethodOut,
    label="Payment method",
    search_fields=("payment_method",),
    soft_delete=True,
)


def create(db: Session, payload: PaymentMethodCreate, user: UserToken):
    return crud.to_out(crud.create(db, payload, user))


def get_all(db: Session, params: PaymentMethodRequest):
    return crud.get_all(db, params)


def get_by_auth(db: Session, user: UserToken, params: PaymentMethodRequest):
    return crud.get_by_auth(db, user, params)


def get_by_id(db: Session, payment_methods_id: int):
    return crud.get_by_id(db, payment_methods_id)


def update(db: Session, payload: PaymentMethodUpdate, user: UserToken):
    return crud.to_out(crud.update(db, payload, user))


def delete(db: Session, payment_methods_id: int, user: UserToken):
    return crud.delete(db, payment_methods_id, user)
