from fastapi import APIRouter, Depends
from sec_upload.core.dependencies import get_validation_service
from sec_upload.services.validation_service import ValidationService
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

router = APIRouter()


@router.post(
    "/file",
    response_model=FileValidationResponse,
    summary="Classify a file from its content",
)
async def validate_file(
    data: FileValidationRequest,
    service: ValidationService = Depends(get_validation_service),
) -> FileValidationResponse:
    """
    Sniff the file's magic number and classify it as image, video or invalid.
    With check_extension the filename must also end with the extension of
    the detected type (case-insensitive).
    """
    return await service.validate_file(data)


@router.post(
    "/url",
    response_model=UrlValidationResponse,
    summary="Check the syntax of a URL",
)
async def validate_url(
    data: UrlValidationRequest,
    service: ValidationService = Depends(get_validation_service),
) -> UrlValidationResponse:
    return service.validate_url(data)


@router.post(
    "/uuid",
    response_model=UuidValidationResponse,
    summary="Check that a string is a version-5 UUID",
)
async def validate_uuid(
    data: UuidValidationRequest,
    service: ValidationService = Depends(get_validation_service),
) -> UuidValidationResponse:
    return service.validate_uuid(data)


@router.post(
    "/file-uuid",
    response_model=FileUuidValidationResponse,
    summary="Check that a UUID was derived from a file's content",
)
async def validate_file_uuid(
    data: FileUuidValidationRequest,
    service: ValidationService = Depends(get_validation_service),
) -> FileUuidValidationResponse:
    return await service.validate_file_uuid(data)
