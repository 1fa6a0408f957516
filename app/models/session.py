from datetime import datetime, timezone

from pydantic import Field, field_validator

from app.models.base import CamelModel
from app.models.photo import Photo
from app.models.vote import VoteRecord


class Session(CamelModel):
    id: str
    name: str
    owner_id: str = Field(alias="userId")
    created_at: datetime
    photos: list[Photo] = Field(default_factory=list)
    votes: dict[str, VoteRecord] = Field(default_factory=dict)

    @field_validator("created_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # documents written without an offset are read as UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    def has_photo(self, photo_id: str) -> bool:
        return any(photo.id == photo_id for photo in self.photos)

    def vote_count(self) -> int:
        return sum(record.total for record in self.votes.values())
