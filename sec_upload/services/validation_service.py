from fastapi import HTTPException
from pathlib import Path
from typing import Optional
from uuid import UUID
from sec_upload.core.exceptions import UnknownFileTypeError, WhitelistError
from sec_upload.core.file_validation import validate_file
from sec_upload.core.url_validation import validate_url
from sec_upload.core.uuid_validation import validate_file_uuid, validate_uuid
from sec_upload.schemas.validation import (
    FileUuidValidationRequest,
    FileUuidValidationResponse,
    FileValidationRequest,
    FileValidationResponse,
    UrlValidationRequest,
    UrlValidationResponse,
    UuidValidationRequest,
    UuidValidationResponse,
)
import asyncio
import logging

logger = logging.getLogger(__name__)


def file_error_to_http(path: str, error: Exception) -> HTTPException:
    """Translate a file validation failure into the HTTP error reported to the client."""
    if isinstance(error, FileNotFoundError):
        return HTTPException(status_code=404, detail=f"File '{path}' not found")
    if isinstance(error, OSError):
        return HTTPException(
            status_code=400,
            detail=f"File '{path}' could not be read: {error.strerror or error}",
        )
    return HTTPException(status_code=400, detail=str(error))


def ensure_regular_file(path: str, max_size_mb: float) -> None:
    """
    Reject anything that is not an existing regular file of acceptable size,
    before it is opened. Devices and FIFOs would block or never end.

    Raises:
        HTTPException: 404 if missing, 400 if not a regular file, 413 if too large
    """
    file_path = Path(path)
    try:
        if not file_path.exists():
            raise FileNotFoundError(path)
        if not file_path.is_file():
            raise HTTPException(
                status_code=400,
                detail=f"'{path}' is not a regular file",
            )
        size_mb: float = file_path.stat().st_size / (1024 * 1024)
    except OSError as e:
        raise file_error_to_http(path, e)

    if size_mb > max_size_mb:
        raise HTTPException(
            status_code=413,
            detail=f"File too large: {size_mb:.1f}MB. Max: {max_size_mb}MB",
        )


def read_file_bounded(path: str, max_bytes: int) -> bytes:
    """Read at most max_bytes + 1 bytes, so a file that grew after the size check shows up as too long."""
    with open(path, "rb") as f:
        return f.read(max_bytes + 1)


class ValidationService:
    """
    Exposes the four validators to the API.

    The validators themselves raise typed exceptions and never log; this
    layer decides what becomes an HTTP error and what gets logged.
    """

    def __init__(
        self,
        namespace: UUID,
        default_whitelist: Optional[list[str]] = None,
        max_file_size_mb: float = 10.0,
    ) -> None:
        self.namespace = namespace
        self.default_whitelist = default_whitelist
        self.max_file_size_mb = max_file_size_mb

    async def validate_file(
        self,
        data: FileValidationRequest,
    ) -> FileValidationResponse:
        ensure_regular_file(data.path, self.max_file_size_mb)
        # Blocking read: keep it off the event loop
        try:
            result = await asyncio.to_thread(
                validate_file, data.path, data.check_extension
            )
        except (OSError, UnknownFileTypeError) as e:
            logger.warning(f"File validation failed for {data.path}: {e}")
            raise file_error_to_http(data.path, e)

        logger.info(f"File {data.path} classified as {result.name}")
        return FileValidationResponse(
            path=data.path,
            classification=result,
            label=result.name.lower(),
        )

    def validate_url(self, data: UrlValidationRequest) -> UrlValidationResponse:
        whitelist = (
            data.whitelist if data.whitelist is not None else self.default_whitelist
        )
        try:
            valid = validate_url(data.url, whitelist)
        except WhitelistError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return UrlValidationResponse(url=data.url, valid=valid)

    def validate_uuid(self, data: UuidValidationRequest) -> UuidValidationResponse:
        return UuidValidationResponse(uuid=data.uuid, valid=validate_uuid(data.uuid))

    async def validate_file_uuid(
        self,
        data: FileUuidValidationRequest,
    ) -> FileUuidValidationResponse:
        ensure_regular_file(data.path, self.max_file_size_mb)
        max_bytes = int(self.max_file_size_mb * 1024 * 1024)
        try:
            content = await asyncio.to_thread(read_file_bounded, data.path, max_bytes)
        except OSError as e:
            logger.warning(f"Could not read {data.path}: {e}")
            raise file_error_to_http(data.path, e)

        if len(content) > max_bytes:
            raise HTTPException(
                status_code=413,
                detail=f"File too large. Max: {self.max_file_size_mb}MB",
            )

        namespace = data.namespace or self.namespace
        valid = validate_file_uuid(namespace, content, data.uuid)
        if not valid:
            logger.info(f"UUID {data.uuid} does not match content of {data.path}")
        return FileUuidValidationResponse(path=data.path, uuid=data.uuid, valid=valid)
