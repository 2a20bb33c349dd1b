# crud/files/file_upload_crud.py
import base64
import binascii
import io
import logging
import os
import re
import secrets
import time
from typing import List

from botocore.exceptions import BotoCoreError, ClientError
from fastapi import UploadFile, status

from shared.core.config import settings
from shared.core.schemas import UserToken
from shared.helpers.json_response_helper import error_response
from shared.utils import storage_client
from shared.utils.app_status_code import AppStatusCode
from shared.utils.storage_client import StorageNotFoundError

from ...enum.file_upload_enum import ALLOWED_MIME_TYPES, StorageFolder
from ...schemas.files.file_upload_schemas import (
    Base64UploadRequest, FileInfoOut, PresignedUrlOut, PresignedUrlRequest,
    UploadedFileOut, UploadedFilesOut)

logger = logging.getLogger(__name__)

DATA_URI_PATTERN = re.compile(r"^data:(?P<type>[\w.+/-]+);base64,(?P<data>.*)$", re.DOTALL)
UNSAFE_NAME_CHARS = re.compile(r"[^A-Za-z0-9_-]+")


def max_upload_bytes() -> int:
    return settings.MAX_UPLOAD_SIZE_MB * 1024 * 1024


def folder_for(content_type: str) -> str:
    if content_type.startswith("image/"):
        return StorageFolder.images.value
    if content_type.startswith("video/"):
        return StorageFolder.videos.value
    if content_type.startswith("audio/"):
        return StorageFolder.audio.value
    if content_type == "application/pdf":
        return StorageFolder.documents.value
    return StorageFolder.general.value


def build_file_key(file_name: str, content_type: str) -> str:
    """``<folder>/<stem>-<epoch ms>-<random><ext>``"""
    stem, ext = os.path.splitext(os.path.basename(file_name or ""))
    stem = UNSAFE_NAME_CHARS.sub("-", stem).strip("-") or "file"
    ext = ext.lower() if re.fullmatch(r"\.[A-Za-z0-9]{1,10}", ext or "") else ""
    millis = int(time.time() * 1000)
    return f"{folder_for(content_type)}/{stem}-{millis}-{secrets.token_hex(4)}{ext}"


def validate_file(content_type: str, size: int):
    if content_type not in ALLOWED_MIME_TYPES:
        error_response(
            message=f"File type '{content_type}' is not allowed",
            status_code=AppStatusCode.FILE_TYPE_NOT_ALLOWED,
            http_status=status.HTTP_400_BAD_REQUEST
        )
    if size > max_upload_bytes():
        error_response(
            message=f"File exceeds the {settings.MAX_UPLOAD_SIZE_MB} MB limit",
            status_code=AppStatusCode.FILE_TOO_LARGE,
            http_status=status.HTTP_400_BAD_REQUEST
        )
    if size == 0:
        error_response(
            message="File is empty",
            status_code=AppStatusCode.INVALID_INPUT,
            http_status=status.HTTP_400_BAD_REQUEST
        )


def storage_failure(action: str, error: Exception):
    logger.error("Storage %s failed: %s", action, error)
    return error_response(
        message=f"File storage {action} failed",
        status_code=AppStatusCode.STORAGE_ERROR,
        http_status=status.HTTP_502_BAD_GATEWAY
    )


def file_not_found(file_key: str):
    return error_response(
        message=f"File '{file_key}' not found",
        status_code=AppStatusCode.NOT_FOUND,
        http_status=status.HTTP_404_NOT_FOUND
    )


def _store(content: bytes, file_name: str, content_type: str, user: UserToken) -> UploadedFileOut:
    validate_file(content_type, len(content))
    key = build_file_key(file_name, content_type)
    client = storage_client.get_storage_client()
    try:
        stored = client.upload(
            io.BytesIO(content), key, content_type,
            metadata={"original-name": file_name, "uploaded-by": user.user_id},
        )
    except (ClientError, BotoCoreError) as e:
        return storage_failure("upload", e)

    return UploadedFileOut(
        file_key=key,
        file_url=stored["url"],
        file_name=file_name,
        file_size=len(content),
        file_type=content_type,
        folder=key.split("/", 1)[0],
        uploaded_by=user.user_id,
    )


def _read_upload(file: UploadFile) -> bytes:
    # one byte past the limit is enough to reject oversize files
    return file.file.read(max_upload_bytes() + 1)


def upload_single(file: UploadFile, user: UserToken) -> UploadedFileOut:
    content = _read_upload(file)
    return _store(content, file.filename, file.content_type or "", user)


def upload_multiple(files: List[UploadFile], user: UserToken) -> UploadedFilesOut:
    if not files:
        error_response(
            message="At least one file is required",
            status_code=AppStatusCode.INVALID_INPUT,
            http_status=status.HTTP_400_BAD_REQUEST
        )
    if len(files) > settings.MAX_UPLOAD_FILES:
        error_response(
            message=f"At most {settings.MAX_UPLOAD_FILES} files can be uploaded at once",
            status_code=AppStatusCode.INVALID_INPUT,
            http_status=status.HTTP_400_BAD_REQUEST
        )

    contents = []
    for file in files:
        content = _read_upload(file)
        validate_file(file.content_type or "", len(content))
        contents.append((file, content))

    uploaded = [_store(content, file.filename, file.content_type or "", user)
                for file, content in contents]
    return UploadedFilesOut(files=uploaded, count=len(uploaded))


def upload_base64(payload: Base64UploadRequest, user: UserToken) -> UploadedFileOut:
    data = payload.file_data
    match = DATA_URI_PATTERN.match(data)
    if match:
        data = match.group("data")

    try:
        content = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError):
        return error_response(
            message="file_data is not valid base64",
            status_code=AppStatusCode.INVALID_INPUT,
            http_status=status.HTTP_400_BAD_REQUEST
        )
    return _store(content, payload.file_name, payload.file_type, user)


def presigned_url(payload: PresignedUrlRequest, user: UserToken) -> PresignedUrlOut:
    if payload.file_type not in ALLOWED_MIME_TYPES:
        error_response(
            message=f"File type '{payload.file_type}' is not allowed",
            status_code=AppStatusCode.FILE_TYPE_NOT_ALLOWED,
            http_status=status.HTTP_400_BAD_REQUEST
        )

    key = build_file_key(payload.file_name, payload.file_type)
    client = storage_client.get_storage_client()
    try:
        url = client.presigned_put_url(key, payload.file_type, payload.expires_in)
    except (ClientError, BotoCoreError) as e:
        return storage_failure("presign", e)

    logger.info("Issued presigned upload url for %s to user %s", key, user.user_id)
    return PresignedUrlOut(
        upload_url=url,
        file_key=key,
        file_url=client.public_url(key),
        expires_in=payload.expires_in,
    )


def file_info(file_key: str) -> FileInfoOut:
    client = storage_client.get_storage_client()
    try:
        head = client.head(file_key)
    except StorageNotFoundError:
        return file_not_found(file_key)
    except (ClientError, BotoCoreError) as e:
        return storage_failure("lookup", e)

    last_modified = head.get("LastModified")
    return FileInfoOut(
        file_key=file_key,
        file_url=client.public_url(file_key),
        file_size=head.get("ContentLength", 0),
        file_type=head.get("ContentType"),
        last_modified=last_modified.isoformat() if last_modified else None,
        metadata=head.get("Metadata") or {},
    )


def delete_file(file_key: str, user: UserToken) -> dict:
    client = storage_client.get_storage_client()
    try:
        client.delete(file_key)
    except StorageNotFoundError:
        return file_not_found(file_key)
    except (ClientError, BotoCoreError) as e:
        return storage_failure("delete", e)

    logger.info("User %s deleted file %s", user.user_id, file_key)
    return {"file_key": file_key, "deleted": True}
