# crud/events/vibescard_studio_crud.py
from sqlalchemy.orm import Session

from shared.core.schemas import UserToken

from ..common.entity_crud import EntityCrud
from ...models.events.vibescard_studio import VibescardStudio
from ...schemas.events.vibescard_studio_schemas import (
    VibescardStudioCreate, VibescardStudioOut, VibescardStudioRequest, VibescardStudioUpdate)

crud = EntityCrud(
    VibescardStudio,
    public_id="vibescard_studio_id",
    out_schema=VibescardStudioOut,
    label="Vibescard studio",
    search_fields=("templates", "color_scheme", "canvas_size"),
    filter_fields=("event_id", "category_id"),
    soft_delete=False,
)


def create(db: Session, payload: VibescardStudioCreate, user: UserToken):
    return crud.to_out(crud.create(db, payload, user))


def get_all(db: Session, params: VibescardStudioRequest):
    return crud.get_all(db, params)


def get_by_auth(db: Session, user: UserToken, params: VibescardStudioRequest):
    return crud.get_by_auth(db, user, params)


def get_by_id(db: Session, vibescard_studio_id: int):
    return crud.get_by_id(db, vibescard_studio_id)


def update(db: Session, payload: VibescardStudioUpdate, user: UserToken):
    return crud.to_out(crud.update(db, payload, user))


def delete(db: Session, vibescard_studio_id: int, user: UserToken):
    return crud.delete(db, vibescard_studio_id, user)
