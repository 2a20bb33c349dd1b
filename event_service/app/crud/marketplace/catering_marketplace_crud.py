# crud/marketplace/catering_marketplace_crud.py
from sqlalchemy.orm import Session

from shared.core.schemas import UserToken

from ..common.entity_crud import EntityCrud
from ...models.marketplace.catering_marketplace import CateringMarketplace
from ...schemas.marketplace.catering_marketplace_schemas import (
    CateringMarketplaceCreate, CateringMarketplaceOut, CateringMarketplaceRequest, CateringMarketplaceUpdate)

crud = EntityCrud(
    CateringMarketplace,
    public_id="catering_marketplace_id",
    out_schema=CateringMarketplaceOut,
    label="Catering marketplace",
    search_fields=("name", "address"),
    filter_fields=("catering_marketplace_category_id",),
    soft_delete=True,
)


def create(db: Session, payload: CateringMarketplaceCreate, user: UserToken):
    return crud.to_out(crud.create(db, payload, user))


def get_all(db: Session, params: CateringMarketplaceRequest):
    return crud.get_all(db, params)


def get_by_auth(db: Session, user: UserToken, params: CateringMarketplaceRequest):
    return crud.get_by_auth(db, user, params)


def get_by_id(db: Session, catering_marketplace_id: int):
    return crud.get_by_id(db, catering_marketplace_id)


def update(db: Session, payload: CateringMarketplaceUpdate, user: UserToken):
    return crud.to_out(crud.update(db, payload, user))


def delete(db: Session, catering_marketplace_id: int, user: UserToken):
    return crud.delete(db, catering_marketplace_id, user)
