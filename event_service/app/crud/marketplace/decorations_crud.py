# crud/marketplace/decorations_crud.py
from sqlalchemy.orm import Session

from shared.core.schemas import UserToken

from ..common.entity_crud import EntityCrud
from ...models.marketplace.decorations import Decoration
from ...schemas.marketplace.decorations_schemas import (
    DecorationCreate, DecorationOut, DecorationRequest, DecorationUpdate)

crud = EntityCrud(
    Decoration,
    public_id="decorations_id",
    out_schema=DecorationOut,
    label="Decoration",
    search_fields=("decorations_name", "decorations_type", "brand_name"),
    filter_fields=("decorations_type",),
    soft_delete=True,
)


def create(db: Session, payload: DecorationCreate, user: UserToken):
    return crud.to_out(crud.create(db, payload, user))


def get_all(db: Session, params: DecorationRequest):
    return crud.get_all(db, params)


def get_by_auth(db: Session, user: UserToken, params: DecorationRequest):
    return crud.get_by_auth(db, user, params)


def get_by_id(db: Session, decorations_id: int):
    return crud.get_by_id(db, decorations_id)


def update(db: Session, payload: DecorationUpdate, user: UserToken):
    return crud.to_out(crud.update(db, payload, user))


def delete(db: Session, decorations_id: int, user: UserToken):
    return crud.delete(db, decorations_id, user)
