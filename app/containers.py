"""Dependency container wiring for the application."""
from dataclasses import dataclass

from app.config import Settings
from app.persistence import SessionFileRepository
from app.services.photo_storage import PhotoStorage
from app.services.results import ResultsRanker
from app.services.session_store import SessionStore
from app.services.upload_recorder import UploadRecorder
from app.services.vote_ledger import VoteLedger


@dataclass
class AppContainer:
    settings: Settings
    session_store: SessionStore
    upload_recorder: UploadRecorder
    vote_ledger: VoteLedger
    results_ranker: ResultsRanker


def build_container(settings: Settings) -> AppContainer:
    repository = SessionFileRepository(
        settings.sessions_dir,
        atomic_writes=settings.atomic_session_writes,
    )
    store = SessionStore(repository)
    return AppContainer(
        settings=settings,
        session_store=store,
        upload_recorder=UploadRecorder(
            store,
            PhotoStorage(settings.uploads_dir),
            max_size_bytes=settings.max_photo_size_bytes,
            max_files=settings.max_photos_per_upload,
        ),
        vote_ledger=VoteLedger(
            store,
            allow_unknown_photos=settings.allow_votes_on_unknown_photos,
        ),
        results_ranker=ResultsRanker(store),
    )
