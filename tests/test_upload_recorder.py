import os

import pytest

from app.services.photo_storage import PhotoStorage
from app.services.photo_validator import IncomingPhoto
from app.services.upload_recorder import UploadRecorder
from app.utils.exceptions import NotFoundError, UploadValidationError


@pytest.fixture
def uploads_dir(tmp_path):
    return str(tmp_path / "uploads")


@pytest.fixture
def recorder(store, uploads_dir):
    return UploadRecorder(store, PhotoStorage(uploads_dir), max_size_bytes=1024, max_files=100)


def _jpeg(name):
    return IncomingPhoto(original_name=name, content_type="image/jpeg", data=b"\xff\xd8" + name.encode())


def test_add_photos_appends_in_arrival_order(store, recorder, uploads_dir):
    session = store.create()

    first = recorder.add_photos(session.id, [_jpeg("a.jpg"), _jpeg("b.jpg")])
    second = recorder.add_photos(session.id, [_jpeg("c.jpeg")])

    names = [p.original_name for p in store.get(session.id).photos]
    assert names == ["a.jpg", "b.jpg", "c.jpeg"]
    assert first.message == "Successfully uploaded 2 images"
    assert second.message == "Successfully uploaded 1 image"

    photo = second.files[0]
    assert photo.filename.endswith(".jpeg")
    assert photo.path == f"/uploads/{photo.filename}"
    with open(os.path.join(uploads_dir, photo.filename), "rb") as f:
        assert f.read() == b"\xff\xd8c.jpeg"


def test_photo_ids_and_filenames_are_unique(store, recorder):
    session = store.create()
    result = recorder.add_photos(session.id, [_jpeg("same.jpg") for _ in range(5)])

    assert len({p.id for p in result.files}) == 5
    assert len({p.filename for p in result.files}) == 5


def test_empty_entries_are_filtered(store, recorder):
    session = store.create()
    empty = IncomingPhoto(original_name="", content_type="application/octet-stream", data=b"")

    with pytest.raises(UploadValidationError) as exc_info:
        recorder.add_photos(session.id, [empty])
    assert exc_info.value.message == "No files uploaded"

    result = recorder.add_photos(session.id, [empty, _jpeg("a.jpg")])
    assert len(result.files) == 1


def test_invalid_batch_writes_nothing(store, recorder, uploads_dir):
    session = store.create()
    files = [_jpeg(f"{i}.jpg") for i in range(4)]
    files.append(IncomingPhoto(original_name="x.txt", content_type="text/plain", data=b"hi"))

    with pytest.raises(UploadValidationError):
        recorder.add_photos(session.id, files)

    assert store.get(session.id).photos == []
    assert not os.path.exists(uploads_dir)


def test_unknown_session(recorder):
    with pytest.raises(NotFoundError):
        recorder.add_photos("missing", [_jpeg("a.jpg")])


def test_generated_filename_keeps_extension(uploads_dir):
    storage = PhotoStorage(uploads_dir)
    filename = storage.generate_filename("Holiday Pic.WEBP")

    stamp, rest = filename.split("-", 1)
    assert stamp.isdigit()
    assert rest.endswith(".WEBP")
