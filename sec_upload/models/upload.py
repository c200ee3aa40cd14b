import uuid
from dataclasses import dataclass, field
from datetime import datetime

from sec_upload.core.file_validation import FileClassification


@dataclass
class UploadedFile:
    id: uuid.UUID
    file_path: str
    classification: FileClassification
    created_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def is_video(self) -> bool:
        return self.classification == FileClassification.VIDEO

    @property
    def kind(self) -> str:
        return "video" if self.is_video else "image"

    def __repr__(self) -> str:
        return f"<UploadedFile {self.id} {self.file_path}>"
