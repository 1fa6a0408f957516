from app.models.vote import Stance, VoteRecord
from app.services.session_store import SessionStore
from app.utils.exceptions import NotFoundError


class VoteLedger:
    """At most one stance per voter per photo, persisted after every vote."""

    def __init__(self, store: SessionStore, allow_unknown_photos: bool = True):
        self.store = store
        self.allow_unknown_photos = allow_unknown_photos

    def cast_vote(self, session_id: str, photo_id: str, voter_id: str, stance: Stance) -> VoteRecord:
        session = self.store.get(session_id)
        if not self.allow_unknown_photos and not session.has_photo(photo_id):
            raise NotFoundError("Photo not found")

        record = session.votes.setdefault(photo_id, VoteRecord())
        record.apply(voter_id, stance)
        self.store.save(session)
        return record
