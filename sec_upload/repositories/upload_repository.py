import asyncio
from typing import Optional
from uuid import UUID
from sec_upload.repositories.upload_repository_interface import IUploadRepository
from sec_upload.models.upload import UploadedFile
import logging

logger = logging.getLogger(__name__)


class InMemoryUploadRepository(IUploadRepository):
    """Upload table kept in process memory; it is gone on restart."""

    def __init__(self) -> None:
        self._uploads: dict[UUID, UploadedFile] = {}
        self._lock = asyncio.Lock()

    async def create(self, entity: UploadedFile) -> UploadedFile:
        async with self._lock:
            if entity.id in self._uploads:
                raise KeyError(f"Upload {entity.id} already exists")
            self._uploads[entity.id] = entity
        logger.info(f"Stored upload: {entity.id}")
        return entity

    async def get_by_id(self, entity_id: UUID) -> Optional[UploadedFile]:
        return self._uploads.get(entity_id)

    async def exists(self, entity_id: UUID) -> bool:
        return entity_id in self._uploads

    async def get_all(self) -> list[UploadedFile]:
        return sorted(self._uploads.values(), key=lambda u: u.created_at)

    async def delete(self, entity_id: UUID) -> bool:
        async with self._lock:
            removed = self._uploads.pop(entity_id, None)
        if removed is None:
            return False
        logger.info(f"Removed upload: {entity_id}")
        return True
