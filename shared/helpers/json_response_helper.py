# shared/helpers/json_response_helper.py
import math
from fastapi import HTTPException
from typing import Any

from shared.utils.app_status_code import AppStatusCode
from shared.core.schemas import JsonOutResult, PaginationOut


def success_response(data: Any, message: str = "Success", status_code: str = AppStatusCode.DATA_RETRIEVED_SUCCESSFULLY):
    return JsonOutResult(
        data=data,
        status="Success",
        status_code=status_code,
        message=message
    )


def error_response(message: str, status_code: str = AppStatusCode.OPERATION_FAILED, http_status: int = 400, data: Any = None):
    raise HTTPException(
        status_code=http_status,
        detail=JsonOutResult(
            data=data,
            status="Failure",
            status_code=status_code,
            message=message
        ).model_dump()
    )


def build_pagination(page: int, limit: int, total: int) -> PaginationOut:
    total_pages = math.ceil(total / limit) if limit else 0
    return PaginationOut(
        currentPage=page,
        totalPages=total_pages,
        totalItems=total,
        itemsPerPage=limit,
        hasNextPage=page < total_pages,
        hasPrevPage=page > 1
    )
