from fastapi import APIRouter, Depends
from sec_upload.core.dependencies import get_upload_service
from sec_upload.services.upload_service import UploadService
from sec_upload.schemas.upload import (
    FileUrlResponse,
    UploadCreate,
    UploadedFileListResponse,
    UploadedFileResponse,
)

router = APIRouter()


@router.post(
    "/",
    response_model=UploadedFileResponse,
    summary="Register an image or video file",
    status_code=201,
)
async def upload_file(
    data: UploadCreate,
    service: UploadService = Depends(get_upload_service),
) -> UploadedFileResponse:
    """
    Validate the file at the given path and register it.

    The file must be an image or a video whose extension matches its
    content. The returned id is the version-5 UUID of the path.
    """
    return await service.upload_file(data.path)


@router.get(
    "/",
    response_model=UploadedFileListResponse,
    summary="List uploaded files",
)
async def list_uploads(
    service: UploadService = Depends(get_upload_service),
) -> UploadedFileListResponse:
    return await service.get_all_uploads()


@router.get(
    "/{upload_id}",
    response_model=UploadedFileResponse,
    summary="Verify that an uploaded file exists",
)
async def verify_file(
    upload_id: str,
    service: UploadService = Depends(get_upload_service),
) -> UploadedFileResponse:
    return await service.verify_file(upload_id)


@router.get(
    "/{upload_id}/url",
    response_model=FileUrlResponse,
    summary="Get the public URL of an uploaded file",
)
async def get_file_url(
    upload_id: str,
    service: UploadService = Depends(get_upload_service),
) -> FileUrlResponse:
    return await service.get_file_url(upload_id)


@router.delete(
    "/{upload_id}",
    summary="Remove an uploaded file",
)
async def delete_upload(
    upload_id: str,
    service: UploadService = Depends(get_upload_service),
) -> dict:
    return await service.delete_upload(upload_id)
