from pydantic import field_validator

from app.models.base import CamelModel
from app.models.vote import VoteRecord


class VoteRequest(CamelModel):
    photo_id: str
    voter_id: str
    # free-form on the wire; unknown values clear the voter's stance
    vote: str | None = None

    @field_validator("photo_id", "voter_id", "vote", mode="before")
    @classmethod
    def _numbers_as_text(cls, value):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class VoteResponse(CamelModel):
    success: bool = True
    votes: VoteRecord
