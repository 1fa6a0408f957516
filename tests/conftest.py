from datetime import datetime, timedelta, timezone

import pytest

from app.config import Settings
from app.main import create_app
from app.persistence import SessionFileRepository
from app.services.session_store import SessionStore


@pytest.fixture
def settings(tmp_path):
    return Settings(
        sessions_dir=str(tmp_path / "sessions"),
        uploads_dir=str(tmp_path / "uploads"),
        public_dir=str(tmp_path / "public"),
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def repository(settings):
    return SessionFileRepository(settings.sessions_dir)


class FakeClock:
    """Returns a timestamp one minute later on every call."""

    def __init__(self, start: datetime | None = None):
        self.current = start or datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        value = self.current
        self.current += timedelta(minutes=1)
        return value


@pytest.fixture
def store(repository):
    return SessionStore(repository, clock=FakeClock())
