from fastapi import APIRouter, Depends

from app.containers import AppContainer
from app.dependencies import get_container, get_owner_id
from app.schemas.session import ProjectList, ProjectRename, ProjectRenamed

router = APIRouter(tags=["projects"])


@router.get("/user/projects")
async def list_projects(
    owner_id: str | None = Depends(get_owner_id),
    container: AppContainer = Depends(get_container),
):
    projects = container.session_store.list_by_owner(owner_id)
    return ProjectList(projects=projects, user_id=owner_id).model_dump(mode="json", by_alias=True)


@router.put("/project/{session_id}")
async def rename_project(
    session_id: str,
    payload: ProjectRename | None = None,
    container: AppContainer = Depends(get_container),
):
    session = container.session_store.rename(session_id, payload.name if payload else None)
    return ProjectRenamed(name=session.name).model_dump(by_alias=True)
