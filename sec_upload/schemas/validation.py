from pydantic import BaseModel, Field
from typing import Optional
from uuid import UUID
from sec_upload.core.file_validation import FileClassification


class FileValidationRequest(BaseModel):
    path: str = Field(min_length=1)
    check_extension: bool = True


class FileValidationResponse(BaseModel):
    path: str
    classification: FileClassification
    label: str


class UrlValidationRequest(BaseModel):
    url: str
    # None = use the configured whitelist (if any)
    whitelist: Optional[list[str]] = None


class UrlValidationResponse(BaseModel):
    url: str
    valid: bool


class UuidValidationRequest(BaseModel):
    uuid: str


class UuidValidationResponse(BaseModel):
    uuid: str
    valid: bool


class FileUuidValidationRequest(BaseModel):
    path: str = Field(min_length=1)
    uuid: str
    namespace: Optional[UUID] = None


class FileUuidValidationResponse(BaseModel):
    path: str
    uuid: str
    valid: bool
