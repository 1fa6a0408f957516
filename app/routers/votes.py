from fastapi import APIRouter, Depends

from app.containers import AppContainer
from app.dependencies import get_container
from app.models.vote import Stance
from app.schemas.vote import VoteRequest, VoteResponse

router = APIRouter(tags=["votes"])


@router.post("/vote/{session_id}")
async def cast_vote(
    session_id: str,
    payload: VoteRequest,
    container: AppContainer = Depends(get_container),
):
    record = container.vote_ledger.cast_vote(
        session_id,
        payload.photo_id,
        payload.voter_id,
        Stance.parse(payload.vote),
    )
    return VoteResponse(votes=record).model_dump(by_alias=True)
