"""Extension, content type, size and count checks for an upload batch."""
import os
from dataclasses import dataclass

from app.utils.exceptions import UploadValidationError

ALLOWED_EXTENSIONS = {".jpeg", ".jpg", ".png", ".gif", ".webp"}
ALLOWED_CONTENT_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp"}


@dataclass
class IncomingPhoto:
    original_name: str
    content_type: str
    data: bytes

    @property
    def is_empty(self) -> bool:
        return not self.original_name and not self.data


def format_size_limit(size_bytes: int) -> str:
    mib = 1024 * 1024
    if size_bytes >= mib and size_bytes % mib == 0:
        return f"{size_bytes // mib}MB"
    return f"{size_bytes} bytes"


def is_supported_image(original_name: str, content_type: str) -> bool:
    _, ext = os.path.splitext(original_name)
    mime = content_type.split(";")[0].strip().lower()
    return ext.lower() in ALLOWED_EXTENSIONS and mime in ALLOWED_CONTENT_TYPES


def validate_batch(files: list[IncomingPhoto], max_size_bytes: int, max_files: int) -> None:
    """Raise UploadValidationError for the first rule the batch breaks."""
    if not files:
        raise UploadValidationError(
            "No files uploaded",
            details="Please select at least one image to upload",
        )

    if len(files) > max_files:
        raise UploadValidationError(
            "Too many files",
            details=f"Maximum {max_files} files allowed at once",
        )

    for incoming in files:
        if not is_supported_image(incoming.original_name, incoming.content_type):
            raise UploadValidationError(
                "Invalid file type",
                details=(
                    f'File "{incoming.original_name}" is not a supported image format. '
                    "Allowed formats: JPEG, JPG, PNG, GIF, WEBP"
                ),
                field=incoming.original_name,
            )
        if len(incoming.data) > max_size_bytes:
            raise UploadValidationError(
                "File too large",
                details=f"File size exceeds {format_size_limit(max_size_bytes)} limit",
                field=incoming.original_name,
            )
