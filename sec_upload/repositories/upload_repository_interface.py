from abc import abstractmethod
from uuid import UUID
from sec_upload.repositories.base_repository import BaseRepository
from sec_upload.models.upload import UploadedFile


class IUploadRepository(BaseRepository[UploadedFile]):

    @abstractmethod
    async def exists(self, entity_id: UUID) -> bool:
        raise NotImplementedError
