# app/router/admin/coupon_code_router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_db
from shared.core.schemas import UserToken
from shared.helpers.json_response_helper import success_response
from shared.utils.app_status_code import AppStatusCode

from ...crud.admin import coupon_code_crud as crud
from ...schemas.admin.coupon_code_schemas import CouponCodeCreate, CouponCodeRequest, CouponCodeUpdate

router = APIRouter(prefix="/api/admin/coupon-codes", tags=["coupon_codes"],
                   dependencies=[Depends(validate_current_token)])


@router.post("/create", status_code=status.HTTP_201_CREATED)
def create_coupon_code(
    payload: CouponCodeCreate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.create(db, payload, current_user)
    return success_response(data=result, message="Coupon code created successfully",
                            status_code=AppStatusCode.CREATED_SUCCESSFULLY)


@router.get("/getAll")
def get_all_coupon_codes(params: CouponCodeRequest = Depends(), db: Session = Depends(get_db)):
    return success_response(data=crud.get_all(db, params), message="Coupon codes retrieved successfully")


@router.get("/getByAuth")
@router.get("/getCouponCodeByAuth")
def get_coupon_codes_by_auth(
    params: CouponCodeRequest = Depends(),
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return success_response(data=crud.get_by_auth(db, current_user, params),
                            message="Coupon codes retrieved successfully")


@router.get("/getById/{coupon_code_id}")
@router.get("/getCouponCodeById/{coupon_code_id}")
def get_coupon_code_by_id(coupon_code_id: int, db: Session = Depends(get_db)):
    return success_response(data=crud.get_by_id(db, coupon_code_id),
                            message="Coupon code retrieved successfully")


@router.put("/update")
@router.put("/updateCouponCodeById")
def update_coupon_code(
    payload: CouponCodeUpdate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.update(db, payload, current_user)
    return success_response(data=result, message="Coupon code updated successfully",
                            status_code=AppStatusCode.UPDATED_SUCCESSFULLY)


@router.delete("/delete/{coupon_code_id}")
@router.delete("/deleteCouponCodeById/{coupon_code_id}")
def delete_coupon_code(
    coupon_code_id: int,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.delete(db, coupon_code_id, current_user)
    return success_response(data=result, message="Coupon code deleted successfully",
                            status_code=AppStatusCode.DELETED_SUCCESSFULLY)
