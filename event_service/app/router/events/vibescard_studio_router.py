# app/router/events/vibescard_studio_router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_db
from shared.core.schemas import UserToken
from shared.helpers.json_response_helper import success_response
from shared.utils.app_status_code import AppStatusCode

from ...crud.events import vibescard_studio_crud as crud
from ...schemas.events.vibescard_studio_schemas import VibescardStudioCreate, VibescardStudioRequest, VibescardStudioUpdate

router = APIRouter(prefix="/api/vibescard-studio", tags=["vibescard_studio"], dependencies=[Depends(validate_current_token)])


@router.post("/create", status_code=status.HTTP_201_CREATED)
def create_vibescard_studio(
    payload: VibescardStudioCreate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.create(db, payload, current_user)
    return success_response(data=result, message="Vibescard studio created successfully",
                            status_code=AppStatusCode.CREATED_SUCCESSFULLY)


@router.get("/getAll")
def get_all_vibescard_studios(params: VibescardStudioRequest = Depends(), db: Session = Depends(get_db)):
    return success_response(data=crud.get_all(db, params), message="Vibescard studio list retrieved successfully")


@router.get("/getByAuth")
def get_vibescard_studios_by_auth(
    params: VibescardStudioRequest = Depends(),
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return success_response(data=crud.get_by_auth(db, current_user, params),
                            message="Vibescard studio list retrieved successfully")


@router.get("/getById/{vibescard_studio_id}")
def get_vibescard_studio_by_id(vibescard_studio_id: int, db: Session = Depends(get_db)):
    return success_response(data=crud.get_by_id(db, vibescard_studio_id), message="Vibescard studio retrieved successfully")


@router.put("/update")
def update_vibescard_studio(
    payload: VibescardStudioUpdate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.update(db, payload, current_user)
    return success_response(data=result, message="Vibescard studio updated successfully",
                            status_code=AppStatusCode.UPDATED_SUCCESSFULLY)


@router.delete("/delete/{vibescard_studio_id}")
def delete_vibescard_studio(
    vibescard_studio_id: int,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.delete(db, vibescard_studio_id, current_user)
    return success_response(data=result, message="Vibescard studio deleted successfully",
                            status_code=AppStatusCode.DELETED_SUCCESSFULLY)
