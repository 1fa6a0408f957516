from app.models.base import CamelModel
from app.models.photo import Photo


class UploadResponse(CamelModel):
    success: bool = True
    files: list[Photo]
    message: str
