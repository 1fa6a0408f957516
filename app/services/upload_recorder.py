import logging
import uuid
from dataclasses import dataclass

from app.models.photo import Photo
from app.services.photo_storage import PhotoStorage
from app.services.photo_validator import IncomingPhoto, validate_batch
from app.services.session_store import SessionStore

logger = logging.getLogger(__name__)


@dataclass
class UploadResult:
    files: list[Photo]
    message: str


class UploadRecorder:
    def __init__(
        self,
        store: SessionStore,
        storage: PhotoStorage,
        max_size_bytes: int,
        max_files: int,
    ):
        self.store = store
        self.storage = storage
        self.max_size_bytes = max_size_bytes
        self.max_files = max_files

    def add_photos(self, session_id: str, incoming: list[IncomingPhoto]) -> UploadResult:
        session = self.store.get(session_id)

        files = [f for f in incoming if not f.is_empty]
        validate_batch(files, self.max_size_bytes, self.max_files)

        photos = []
        for f in files:
            filename = self.storage.generate_filename(f.original_name)
            self.storage.write(filename, f.data)
            photos.append(
                Photo(
                    id=str(uuid.uuid4()),
                    filename=filename,
                    original_name=f.original_name,
                    path=self.storage.public_path(filename),
                    size=len(f.data),
                )
            )

        session.photos.extend(photos)
        self.store.save(session)
        logger.info("Stored %d photos in session %s", len(photos), session_id)

        noun = "image" if len(photos) == 1 else "images"
        return UploadResult(files=photos, message=f"Successfully uploaded {len(photos)} {noun}")
