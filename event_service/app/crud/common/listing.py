# crud/common/listing.py
from typing import Iterable, Optional, Sequence

from sqlalchemy import asc, desc, or_
from sqlalchemy.orm import Query

from shared.core.schemas import CommonQueryParams
from shared.helpers.json_response_helper import build_pagination


def apply_status_filter(query: Query, model, status: Optional[bool]) -> Query:
    # status=false lists soft-deleted records; absent or true lists active ones
    if status is False:
        return query.filter(model.status.is_(False))
    return query.filter(model.status.is_(True))


def apply_search(query: Query, model, search: Optional[str], fields: Sequence[str]) -> Query:
    if not search or not fields:
        return query
    # search text is literal, so LIKE wildcards in it are escaped
    escaped = search.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    term = f"%{escaped}%"
    return query.filter(or_(*[getattr(model, f).ilike(term, escape="\\") for f in fields]))


def apply_exact_filters(query: Query, model, params: CommonQueryParams, fields: Iterable[str]) -> Query:
    for field in fields:
        value = getattr(params, field, None)
        if value is None:
            continue
        if hasattr(value, "value"):
            value = value.value
        query = query.filter(getattr(model, field) == value)
    return query


def apply_sort(query: Query, model, sort_by: str, sort_order: str) -> Query:
    column = getattr(model, sort_by)
    return query.order_by(desc(column) if sort_order == "desc" else asc(column))


def paginate(query: Query, params: CommonQueryParams, out_schema) -> dict:
    total = query.order_by(None).count()
    skip = (params.page - 1) * params.limit
    rows = query.offset(skip).limit(params.limit).all()

    return {
        "items": [out_schema.model_validate(r) for r in rows],
        "pagination": build_pagination(params.page, params.limit, total),
    }


def list_records(
    query: Query,
    model,
    params: CommonQueryParams,
    out_schema,
    search_fields: Sequence[str] = (),
    filter_fields: Iterable[str] = (),
) -> dict:
    """Filter, sort and page ``query`` the same way for every entity listing."""
    query = apply_status_filter(query, model, params.status)
    query = apply_search(query, model, params.search, search_fields)
    query = apply_exact_filters(query, model, params, filter_fields)
    query = apply_sort(query, model, params.sortBy, params.sortOrder)
    return paginate(query, params, out_schema)
