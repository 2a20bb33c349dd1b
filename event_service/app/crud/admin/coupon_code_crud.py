# crud/admin/coupon_code_crud.py
from sqlalchemy.orm import Session

from shared.core.schemas import UserToken

from ..common.entity_crud import EntityCrud
from ...models.admin.coupon_code import CouponCode
from ...schemas.admin.coupon_code_schemas import (
    CouponCodeCreate, CouponCodeOut, CouponCodeRequest, CouponCodeUpdate, validity_window_ok)

crud = EntityCrud(
    CouponCode,
    public_id="coupon_code_id",
    out_schema=CouponCodeOut,
    label="Coupon code",
    search_fields=("code", "name", "description"),
    filter_fields=("code",),
    soft_delete=True,
)


def _ensure_unique_code(db: Session, code: str, exclude_id: int = None):
    query = db.query(CouponCode).filter(CouponCode.code == code)
    if exclude_id is not None:
        query = query.filter(CouponCode.coupon_code_id != exclude_id)
    if query.first():
        crud.duplicate(f"Coupon code '{code}' already exists")


def create(db: Session, payload: CouponCodeCreate, user: UserToken):
    _ensure_unique_code(db, payload.code)
    return crud.to_out(crud.create(db, payload, user))


def get_all(db: Session, params: CouponCodeRequest):
    return crud.get_all(db, params)


def get_by_auth(db: Session, user: UserToken, params: CouponCodeRequest):
    return crud.get_by_auth(db, user, params)


def get_by_id(db: Session, coupon_code_id: int):
    return crud.get_by_id(db, coupon_code_id)


def update(db: Session, payload: CouponCodeUpdate, user: UserToken):
    record = crud.get_record(db, payload.coupon_code_id, active_only=False)
    data = crud.changes(payload)

    if "code" in data:
        _ensure_unique_code(db, data["code"], exclude_id=payload.coupon_code_id)

    valid_from = data.get("valid_from", record.valid_from)
    valid_until = data.get("valid_until", record.valid_until)
    if not validity_window_ok(valid_from, valid_until):
        crud.invalid("valid_until must not be before valid_from")

    return crud.to_out(crud.apply_update(db, record, data, user))


def delete(db: Session, coupon_code_id: int, user: UserToken):
    return crud.delete(db, coupon_code_id, user)
