"""One JSON document per session, named after the session id."""
import json
import logging
import os
import tempfile

from pydantic import ValidationError

from app.models.session import Session

logger = logging.getLogger(__name__)


def _is_plain_id(session_id: str) -> bool:
    if not session_id or session_id in {".", ".."}:
        return False
    return os.path.basename(session_id) == session_id and "\\" not in session_id


class SessionFileRepository:
    def __init__(self, directory: str, atomic_writes: bool = False):
        self.directory = directory
        self.atomic_writes = atomic_writes

    def _path(self, session_id: str) -> str:
        return os.path.join(self.directory, f"{session_id}.json")

    def save(self, session: Session) -> None:
        """Overwrite the session's document in full."""
        os.makedirs(self.directory, exist_ok=True)
        payload = session.model_dump_json(by_alias=True, indent=2)
        path = self._path(session.id)

        if not self.atomic_writes:
            with open(path, "w", encoding="utf-8") as f:
                f.write(payload)
            return

        fd, tmp_path = tempfile.mkstemp(dir=self.directory, prefix=f".{session.id}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_path, path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def load(self, session_id: str) -> Session | None:
        if not _is_plain_id(session_id):
            return None
        path = self._path(session_id)
        if not os.path.isfile(path):
            return None
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"session document {session_id} is not a JSON object")
        # older documents carry the id only in their file name
        data.setdefault("id", session_id)
        return Session.model_validate(data)

    def load_all(self) -> list[Session]:
        if not os.path.isdir(self.directory):
            return []

        sessions = []
        for filename in sorted(os.listdir(self.directory)):
            if not filename.endswith(".json"):
                continue
            session_id = filename[: -len(".json")]
            try:
                session = self.load(session_id)
            except (ValueError, ValidationError):
                logger.warning("Skipping unreadable session file %s", filename)
                continue
            if session is not None:
                sessions.append(session)
        return sessions
