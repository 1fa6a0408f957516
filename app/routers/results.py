from fastapi import APIRouter, Depends

from app.containers import AppContainer
from app.dependencies import get_container

router = APIRouter(tags=["results"])


@router.get("/results/{session_id}")
async def get_results(session_id: str, container: AppContainer = Depends(get_container)):
    results = container.results_ranker.rank(session_id)
    return [r.model_dump(by_alias=True) for r in results]
