from app.models.photo import Photo
from app.models.session import Session
from app.models.vote import Stance, VoteRecord

__all__ = ["Photo", "Session", "Stance", "VoteRecord"]
