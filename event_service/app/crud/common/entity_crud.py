# crud/common/entity_crud.py
import logging
from enum import Enum
from typing import Iterable, Optional, Sequence

from fastapi import status
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shared.core.schemas import CommonQueryParams, UserToken
from shared.helpers.json_response_helper import error_response
from shared.helpers.sequence_helper import next_sequence_value
from shared.models.mixins import utcnow
from shared.utils.app_status_code import AppStatusCode

from .listing import list_records

logger = logging.getLogger(__name__)


def column_values(data: dict) -> dict:
    return {k: v.value if isinstance(v, Enum) else v for k, v in data.items()}


class EntityCrud:
    """Create/list/get/update/delete for one entity keyed by its public integer id.

    Methods returning a single record hand back the ORM instance so entity
    modules can run their own follow-up work; ``to_out`` converts it.
    """

    def __init__(
        self,
        model,
        public_id: str,
        out_schema,
        label: str,
        search_fields: Sequence[str] = (),
        filter_fields: Iterable[str] = (),
        soft_delete: bool = True,
    ):
        self.model = model
        self.public_id = public_id
        self.out_schema = out_schema
        self.label = label
        self.search_fields = tuple(search_fields)
        self.filter_fields = tuple(filter_fields)
        self.soft_delete = soft_delete

    @property
    def sequence_name(self) -> str:
        return self.model.__tablename__

    def to_out(self, record):
        return self.out_schema.model_validate(record)

    def not_found(self):
        return error_response(
            message=f"{self.label} not found",
            status_code=AppStatusCode.NOT_FOUND,
            http_status=status.HTTP_404_NOT_FOUND
        )

    def duplicate(self, message: Optional[str] = None):
        return error_response(
            message=message or f"{self.label} already exists",
            status_code=AppStatusCode.DUPLICATE_ADD_ERROR,
            http_status=status.HTTP_400_BAD_REQUEST
        )

    def invalid(self, message: str):
        return error_response(
            message=message,
            status_code=AppStatusCode.INVALID_INPUT,
            http_status=status.HTTP_400_BAD_REQUEST
        )

    # ---------------- Read ----------------

    def get_record(self, db: Session, public_id: int, active_only: bool = True):
        query = db.query(self.model).filter(
            getattr(self.model, self.public_id) == public_id)
        if active_only:
            query = query.filter(self.model.status.is_(True))
        record = query.first()
        if record is None:
            self.not_found()
        return record

    def get_by_id(self, db: Session, public_id: int):
        return self.to_out(self.get_record(db, public_id))

    def get_all(self, db: Session, params: CommonQueryParams, base_query=None) -> dict:
        query = base_query if base_query is not None else db.query(self.model)
        return list_records(
            query, self.model, params, self.out_schema,
            search_fields=self.search_fields,
            filter_fields=self.filter_fields,
        )

    def get_by_auth(self, db: Session, user: UserToken, params: CommonQueryParams,
                    owner_field: str = "created_by") -> dict:
        query = db.query(self.model).filter(
            getattr(self.model, owner_field) == user.user_id)
        return self.get_all(db, params, base_query=query)

    # ---------------- Write ----------------

    def _commit(self, db: Session, record):
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            logger.warning("Integrity error saving %s: %s", self.label, e.orig)
            return self.duplicate()
        db.refresh(record)
        return record

    def create(self, db: Session, payload: BaseModel, user: UserToken, **overrides):
        data = column_values(payload.model_dump(exclude_none=True))
        data.update(overrides)

        record = self.model(**data)
        setattr(record, self.public_id, next_sequence_value(db, self.sequence_name))
        record.created_by = user.user_id
        db.add(record)
        self._commit(db, record)

        logger.info("Created %s %s=%s by user %s", self.label, self.public_id,
                    getattr(record, self.public_id), user.user_id)
        return record

    def changes(self, payload: BaseModel) -> dict:
        """Fields the caller actually sent, without the public id."""
        data = column_values(payload.model_dump(exclude_unset=True, exclude_none=True))
        data.pop(self.public_id, None)
        return data

    def apply_update(self, db: Session, record, data: dict, user: UserToken):
        for key, value in data.items():
            setattr(record, key, value)
        record.updated_by = user.user_id
        record.updated_at = utcnow()
        self._commit(db, record)

        logger.info("Updated %s %s=%s by user %s", self.label, self.public_id,
                    getattr(record, self.public_id), user.user_id)
        return record

    def update(self, db: Session, payload: BaseModel, user: UserToken):
        # soft-deleted records stay reachable so status=true can restore them
        record = self.get_record(db, getattr(payload, self.public_id), active_only=False)
        return self.apply_update(db, record, self.changes(payload), user)

    def delete(self, db: Session, public_id: int, user: UserToken):
        if self.soft_delete:
            record = self.get_record(db, public_id)
            record.status = False
            record.updated_by = user.user_id
            record.updated_at = utcnow()
            db.commit()
            db.refresh(record)
            logger.info("Soft deleted %s %s=%s by user %s", self.label,
                        self.public_id, public_id, user.user_id)
            return self.to_out(record)

        record = self.get_record(db, public_id, active_only=False)
        removed = self.to_out(record)
        db.delete(record)
        db.commit()
        logger.info("Deleted %s %s=%s by user %s", self.label,
                    self.public_id, public_id, user.user_id)
        return removed
