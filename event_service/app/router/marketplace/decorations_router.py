# app/router/marketplace/decorations_router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_db
from shared.core.schemas import UserToken
from shared.helpers.json_response_helper import success_response
from shared.utils.app_status_code import AppStatusCode

from ...crud.marketplace import decorations_crud as crud
from ...schemas.marketplace.decorations_schemas import DecorationCreate, DecorationRequest, DecorationUpdate

router = APIRouter(prefix="/api/master/decorations", tags=["decorations"], dependencies=[Depends(validate_current_token)])


@router.post("/create", status_code=status.HTTP_201_CREATED)
def create_decoration(
    payload: DecorationCreate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.create(db, payload, current_user)
    return success_response(data=result, message="Decoration created successfully",
                            status_code=AppStatusCode.CREATED_SUCCESSFULLY)


@router.get("/getAll")
def get_all_decorations(params: DecorationRequest = Depends(), db: Session = Depends(get_db)):
    return success_response(data=crud.get_all(db, params), message="Decoration list retrieved successfully")


@router.get("/getByAuth")
def get_decorations_by_auth(
    params: DecorationRequest = Depends(),
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return success_response(data=crud.get_by_auth(db, current_user, params),
                            message="Decoration list retrieved successfully")


@router.get("/getById/{decorations_id}")
def get_decoration_by_id(decorations_id: int, db: Session = Depends(get_db)):
    return success_response(data=crud.get_by_id(db, decorations_id), message="Decoration retrieved successfully")


@router.put("/update")
def update_decoration(
    payload: DecorationUpdate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.update(db, payload, current_user)
    return success_response(data=result, message="Decoration updated successfully",
                            status_code=AppStatusCode.UPDATED_SUCCESSFULLY)


@router.delete("/delete/{decorations_id}")
def delete_decoration(
    decorations_id: int,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.delete(db, decorations_id, current_user)
    return success_response(data=result, message="Decoration deleted successfully",
                            status_code=AppStatusCode.DELETED_SUCCESSFULLY)
