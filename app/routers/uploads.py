from fastapi import APIRouter, Depends, File, UploadFile

from app.containers import AppContainer
from app.dependencies import get_container
from app.schemas.upload import UploadResponse
from app.services.photo_validator import IncomingPhoto

router = APIRouter(tags=["uploads"])


@router.post("/upload/{session_id}")
async def upload_photos(
    session_id: str,
    photos: list[UploadFile] | None = File(default=None),
    container: AppContainer = Depends(get_container),
):
    # unknown sessions are rejected before any file is inspected
    container.session_store.get(session_id)

    # one byte past the limit is enough to tell the file is too large
    limit = container.settings.max_photo_size_bytes + 1
    incoming = []
    for upload in photos or []:
        incoming.append(
            IncomingPhoto(
                original_name=upload.filename or "",
                content_type=upload.content_type or "",
                data=await upload.read(limit),
            )
        )

    result = container.upload_recorder.add_photos(session_id, incoming)
    return UploadResponse(files=result.files, message=result.message).model_dump(by_alias=True)
