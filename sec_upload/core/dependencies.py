from fastapi import Depends
from sec_upload.core.config import settings
from sec_upload.services.upload_service import UploadService
from sec_upload.services.validation_service import ValidationService
from sec_upload.repositories.upload_repository import InMemoryUploadRepository
from sec_upload.repositories.upload_repository_interface import IUploadRepository

# One table for the whole process; uploads live as long as the server does.
_upload_repository = InMemoryUploadRepository()


def get_upload_repository() -> IUploadRepository:
    return _upload_repository


def get_upload_service(
    repository: IUploadRepository = Depends(get_upload_repository),
) -> UploadService:
    return UploadService(
        repository,
        namespace=settings.UPLOAD_NAMESPACE,
        url_prefix=settings.URL_PREFIX,
        check_extension=settings.CHECK_EXTENSION,
        max_file_size_mb=settings.MAX_FILE_SIZE_MB,
    )


def get_validation_service() -> ValidationService:
    return ValidationService(
        namespace=settings.UPLOAD_NAMESPACE,
        default_whitelist=settings.tld_whitelist_list,
        max_file_size_mb=settings.MAX_FILE_SIZE_MB,
    )
