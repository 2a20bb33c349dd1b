from typing import List, Optional
from pydantic import BaseModel, Field

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class Base64UploadRequest(EmptyStringModel):
    file_name: str = Field(..., min_length=1, max_length=255)
    file_type: str = Field(..., min_length=1, max_length=100)
    # raw base64 or a data URI ("data:<type>;base64,<payload>")
    file_data: str = Field(..., min_length=1)


class PresignedUrlRequest(EmptyStringModel):
    file_name: str = Field(..., min_length=1, max_length=255)
    file_type: str = Field(..., min_length=1, max_length=100)
    expires_in: int = Field(3600, ge=60, le=604800)


class UploadedFileOut(BaseModel):
    file_key: str
    file_url: str
    file_name: str
    file_size: int
    file_type: str
    folder: str
    uploaded_by: int


class UploadedFilesOut(BaseModel):
    files: List[UploadedFileOut]
    count: int


class PresignedUrlOut(BaseModel):
    upload_url: str
    file_key: str
    file_url: str
    expires_in: int


class FileInfoOut(BaseModel):
    file_key: str
    file_url: str
    file_size: int
    file_type: Optional[str] = None
    last_modified: Optional[str] = None
    metadata: dict = Field(default_factory=dict)
