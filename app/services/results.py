from app.models.vote import VoteRecord
from app.schemas.results import PhotoResult
from app.services.session_store import SessionStore


class ResultsRanker:
    def __init__(self, store: SessionStore):
        self.store = store

    def rank(self, session_id: str) -> list[PhotoResult]:
        """Photos by score, highest first; equal scores keep upload order."""
        session = self.store.get(session_id)

        results = []
        for photo in session.photos:
            record = session.votes.get(photo.id) or VoteRecord()
            upvotes = len(record.upvotes)
            downvotes = len(record.downvotes)
            results.append(
                PhotoResult(
                    **photo.model_dump(),
                    upvotes=upvotes,
                    downvotes=downvotes,
                    score=upvotes - downvotes,
                )
            )

        # sorted() is stable, so ties stay in upload order
        return sorted(results, key=lambda r: r.score, reverse=True)
