from fastapi import APIRouter, Depends, Response

from app.containers import AppContainer
from app.dependencies import get_container, get_owner_id
from app.schemas.session import SessionCreate, SessionCreated

router = APIRouter(tags=["sessions"])


@router.post("/session")
async def create_session(
    response: Response,
    payload: SessionCreate | None = None,
    owner_id: str | None = Depends(get_owner_id),
    container: AppContainer = Depends(get_container),
):
    name = payload.name if payload else None
    session = container.session_store.create(name=name, owner_id=owner_id)

    if not owner_id:
        settings = container.settings
        response.set_cookie(
            settings.owner_cookie_name,
            session.owner_id,
            max_age=settings.owner_cookie_max_age,
            httponly=True,
            samesite="lax",
        )

    return SessionCreated(session_id=session.id, user_id=session.owner_id).model_dump(by_alias=True)


@router.get("/session/{session_id}")
async def get_session(session_id: str, container: AppContainer = Depends(get_container)):
    session = container.session_store.get(session_id)
    return session.model_dump(mode="json", by_alias=True)
