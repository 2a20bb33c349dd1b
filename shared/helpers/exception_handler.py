import logging
from fastapi import FastAPI, Request, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.core.schemas import FieldError, JsonOutResult
from shared.utils.app_status_code import AppStatusCode
from shared.utils.escrow_client import EscrowApiError

logger = logging.getLogger(__name__)


def _field_errors(errors) -> list[FieldError]:
    field_errors = []
    for err in errors:
        # drop the "body"/"query"/"path" prefix FastAPI adds to locations
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
        field_errors.append(FieldError(
            field=".".join(loc) or "request",
            message=err.get("msg", "Invalid value")
        ))
    return field_errors


def _validation_response(errors) -> JSONResponse:
    field_errors = _field_errors(errors)
    message = "; ".join(f"{e.field}: {e.message}" for e in field_errors)
    wrapped = JsonOutResult(
        data=field_errors,
        status="Failure",
        status_code=AppStatusCode.INVALID_INPUT,
        message=f"Validation failed: {message}" if message else "Validation failed"
    ).model_dump()
    return JSONResponse(content=jsonable_encoder(wrapped), status_code=400)


def setup_exception_handlers(app: FastAPI):

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        # error_response() already shaped the envelope
        if isinstance(exc.detail, dict) and {"status", "status_code", "message"}.issubset(exc.detail.keys()):
            return JSONResponse(content=jsonable_encoder(exc.detail), status_code=exc.status_code,
                                headers=getattr(exc, "headers", None))

        wrapped = JsonOutResult(
            data=None,
            status="Failure",
            status_code=str(exc.status_code),
            message=str(exc.detail)
        ).model_dump()
        return JSONResponse(content=wrapped, status_code=exc.status_code,
                            headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return _validation_response(exc.errors())

    # Query models built through Depends() validate inside the dependency call
    @app.exception_handler(ValidationError)
    async def model_validation_exception_handler(request: Request, exc: ValidationError):
        return _validation_response(exc.errors())

    @app.exception_handler(EscrowApiError)
    async def escrow_exception_handler(request: Request, exc: EscrowApiError):
        wrapped = JsonOutResult(
            data=exc.details,
            status="Failure",
            status_code=AppStatusCode.INTEGRATION_ERROR,
            message=exc.message
        ).model_dump()
        return JSONResponse(content=jsonable_encoder(wrapped), status_code=exc.status_code)

    # Catch all unhandled exceptions
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s",
                         request.method, request.url.path)

        wrapped = JsonOutResult(
            data=None,
            status="Failure",
            status_code=AppStatusCode.OPERATION_FAILED,
            message="Internal Server Error"
        ).model_dump()
        return JSONResponse(content=wrapped, status_code=500)
