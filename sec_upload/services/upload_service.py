from fastapi import HTTPException
from uuid import UUID
from sec_upload.core.exceptions import UnknownFileTypeError
from sec_upload.core.file_validation import FileClassification, validate_file
from sec_upload.core.uuid_validation import derive_uuid, validate_uuid
from sec_upload.models.upload import UploadedFile
from sec_upload.repositories.upload_repository_interface import IUploadRepository
from sec_upload.schemas.upload import (
    FileUrlResponse,
    UploadedFileListResponse,
    UploadedFileResponse,
)
from sec_upload.services.validation_service import ensure_regular_file, file_error_to_http
import asyncio
import logging

logger = logging.getLogger(__name__)


class UploadService:
    """
    Registers image and video files by path and hands out their UUIDs.

    The UUID of an upload is the version-5 UUID of its lowercased path
    under the configured namespace, so registering the same path twice
    is detected without any lookup by path.
    """

    def __init__(
        self,
        repository: IUploadRepository,
        namespace: UUID,
        url_prefix: str,
        check_extension: bool = True,
        max_file_size_mb: float = 10.0,
    ) -> None:
        self.repository = repository
        self.namespace = namespace
        self.url_prefix = url_prefix.rstrip("/")
        self.check_extension = check_extension
        self.max_file_size_mb = max_file_size_mb

    def upload_id(self, file_path: str) -> UUID:
        return derive_uuid(self.namespace, file_path.lower().encode("utf-8"))

    async def upload_file(self, file_path: str) -> UploadedFileResponse:
        ensure_regular_file(file_path, self.max_file_size_mb)
        try:
            classification = await asyncio.to_thread(
                validate_file, file_path, self.check_extension
            )
        except (OSError, UnknownFileTypeError) as e:
            logger.warning(f"Upload rejected for {file_path}: {e}")
            raise file_error_to_http(file_path, e)

        if classification == FileClassification.INVALID:
            raise HTTPException(
                status_code=400,
                detail="Invalid file contents. Only images and videos "
                "with a matching extension are accepted.",
            )

        key = self.upload_id(file_path)
        if await self.repository.exists(key):
            raise HTTPException(
                status_code=409,
                detail="This file is already uploaded.",
            )

        try:
            upload = await self.repository.create(
                UploadedFile(id=key, file_path=file_path, classification=classification)
            )
        except KeyError:
            # Lost a race with a concurrent upload of the same path
            raise HTTPException(
                status_code=409,
                detail="This file is already uploaded.",
            )
        logger.info(f"Uploaded {upload.kind} {file_path} as {key}")
        return UploadedFileResponse.model_validate(upload)

    async def _get_upload(self, upload_id: str) -> UploadedFile:
        if not validate_uuid(upload_id):
            raise HTTPException(status_code=400, detail="Invalid uuid !")

        upload = await self.repository.get_by_id(UUID(upload_id))
        if not upload:
            raise HTTPException(
                status_code=404,
                detail=f"File {upload_id} doesn't exist.",
            )
        return upload

    async def verify_file(self, upload_id: str) -> UploadedFileResponse:
        upload = await self._get_upload(upload_id)
        return UploadedFileResponse.model_validate(upload)

    async def get_file_url(self, upload_id: str) -> FileUrlResponse:
        upload = await self._get_upload(upload_id)
        folder = "videos" if upload.is_video else "images"
        return FileUrlResponse(
            id=upload.id,
            url=f"{self.url_prefix}/{folder}/{upload.file_path}",
        )

    async def get_all_uploads(self) -> UploadedFileListResponse:
        uploads = await self.repository.get_all()
        return UploadedFileListResponse(
            total=len(uploads),
            uploads=[UploadedFileResponse.model_validate(u) for u in uploads],
        )

    async def delete_upload(self, upload_id: str) -> dict:
        upload = await self._get_upload(upload_id)
        await self.repository.delete(upload.id)
        logger.info(f"Upload {upload.id} deleted")
        return {"message": f"Upload {upload.id} deleted successfully"}
