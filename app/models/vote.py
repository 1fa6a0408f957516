from enum import Enum

from pydantic import Field

from app.models.base import CamelModel


class Stance(str, Enum):
    UP = "up"
    DOWN = "down"
    CLEAR = "clear"

    @classmethod
    def parse(cls, value: str | None) -> "Stance":
        """Map a client-supplied vote string to a stance; anything unknown clears."""
        if value == cls.UP.value:
            return cls.UP
        if value == cls.DOWN.value:
            return cls.DOWN
        return cls.CLEAR


class VoteRecord(CamelModel):
    upvotes: list[str] = Field(default_factory=list)
    downvotes: list[str] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.upvotes) + len(self.downvotes)

    def apply(self, voter_id: str, stance: Stance) -> None:
        """Replace whatever stance the voter held with the new one."""
        self.upvotes = [v for v in self.upvotes if v != voter_id]
        self.downvotes = [v for v in self.downvotes if v != voter_id]
        if stance is Stance.UP:
            self.upvotes.append(voter_id)
        elif stance is Stance.DOWN:
            self.downvotes.append(voter_id)
