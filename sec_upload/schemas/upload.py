from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from uuid import UUID


class UploadCreate(BaseModel):
    path: str = Field(min_length=1)


class UploadedFileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    file_path: str
    kind: str
    created_at: datetime


class UploadedFileListResponse(BaseModel):
    total: int
    uploads: list[UploadedFileResponse]


class FileUrlResponse(BaseModel):
    id: UUID
    url: str
