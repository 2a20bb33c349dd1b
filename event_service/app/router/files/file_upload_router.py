# app/router/files/file_upload_router.py
from typing import List

from fastapi import APIRouter, Depends, File, UploadFile

from shared.core.auth import validate_current_token
from shared.core.schemas import UserToken
from shared.helpers.json_response_helper import success_response
from shared.utils.app_status_code import AppStatusCode

from ...crud.files import file_upload_crud as crud
from ...schemas.files.file_upload_schemas import Base64UploadRequest, PresignedUrlRequest

router = APIRouter(prefix="/api/file-upload", tags=["file_upload"],
                   dependencies=[Depends(validate_current_token)])


@router.post("/upload-single")
def upload_single_file(
    file: UploadFile = File(...),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.upload_single(file, current_user)
    return success_response(data=result, message="File uploaded successfully",
                            status_code=AppStatusCode.CREATED_SUCCESSFULLY)


@router.post("/upload-multiple")
def upload_multiple_files(
    files: List[UploadFile] = File(...),
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.upload_multiple(files, current_user)
    return success_response(data=result, message=f"{result.count} files uploaded successfully",
                            status_code=AppStatusCode.CREATED_SUCCESSFULLY)


@router.post("/upload-base64")
def upload_base64_file(
    payload: Base64UploadRequest,
    current_user: UserToken = Depends(validate_current_token)
):
    result = crud.upload_base64(payload, current_user)
    return success_response(data=result, message="File uploaded successfully",
                            status_code=AppStatusCode.CREATED_SUCCESSFULLY)


@router.post("/presigned-url")
def create_presigned_url(
    payload: PresignedUrlRequest,
    current_user: UserToken = Depends(validate_current_token)
):
    return success_response(data=crud.presigned_url(payload, current_user),
                            message="Presigned URL generated successfully")


@router.get("/info/{file_key:path}")
def get_file_info(file_key: str):
    return success_response(data=crud.file_info(file_key), message="File info retrieved successfully")


@router.delete("/delete/{file_key:path}")
def delete_file(
    file_key: str,
    current_user: UserToken = Depends(validate_current_token)
):
    return success_response(data=crud.delete_file(file_key, current_user),
                            message="File deleted successfully",
                            status_code=AppStatusCode.DELETED_SUCCESSFULLY)
