"""Process-wide session map mirrored to the session file repository."""
import logging
import uuid
from collections.abc import Callable
from datetime import datetime, timezone

from app.models.session import Session
from app.persistence import SessionFileRepository
from app.schemas.session import ProjectSummary
from app.utils.exceptions import NotFoundError

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def default_session_name(created_at: datetime) -> str:
    """Label from the server's local calendar date."""
    local = created_at.astimezone()
    return f"Project {local.month}/{local.day}/{local.year}"


class SessionStore:
    def __init__(
        self,
        repository: SessionFileRepository,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.repository = repository
        self._clock = clock
        self._sessions: dict[str, Session] = {}

    def load_all(self) -> int:
        """Populate the map from every persisted session. Run once at startup."""
        for session in self.repository.load_all():
            self._sessions[session.id] = session
        logger.info("Loaded %d existing sessions", len(self._sessions))
        return len(self._sessions)

    def clear(self) -> None:
        self._sessions.clear()

    def save(self, session: Session) -> None:
        self._sessions[session.id] = session
        self.repository.save(session)

    def create(self, name: str | None = None, owner_id: str | None = None) -> Session:
        created_at = self._clock()
        session = Session(
            id=str(uuid.uuid4()),
            name=name or default_session_name(created_at),
            owner_id=owner_id or str(uuid.uuid4()),
            created_at=created_at,
        )
        self.save(session)
        logger.info("Created session %s for owner %s", session.id, session.owner_id)
        return session

    def get(self, session_id: str) -> Session:
        session = self._sessions.get(session_id)
        if session is not None:
            return session

        session = self.repository.load(session_id)
        if session is None:
            raise NotFoundError()
        self._sessions[session_id] = session
        return session

    def rename(self, session_id: str, name: str | None) -> Session:
        try:
            session = self.get(session_id)
        except NotFoundError:
            raise NotFoundError("Project not found") from None

        cleaned = (name or "").strip()
        if cleaned:
            session.name = cleaned
            self.save(session)
            logger.info("Renamed session %s", session_id)
        return session

    def list_by_owner(self, owner_id: str | None) -> list[ProjectSummary]:
        if not owner_id:
            return []

        owned = [s for s in self._sessions.values() if s.owner_id == owner_id]
        owned.sort(key=lambda s: s.created_at, reverse=True)
        return [
            ProjectSummary(
                id=s.id,
                name=s.name,
                created_at=s.created_at,
                photo_count=len(s.photos),
                vote_count=s.vote_count(),
            )
            for s in owned
        ]
