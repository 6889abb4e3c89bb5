"""Client project endpoints (admin only)."""

from uuid import UUID

from fastapi import APIRouter, Request, status

from src.lovgol.api.dependencies import CurrentAdmin, ProjectServiceDep
from src.lovgol.core.exceptions import NotFoundError
from src.lovgol.schemas.project import (
    ProjectCreate,
    ProjectRead,
    ProjectUpdate,
    ProjectUpdateResponse,
)
from src.lovgol.services.project_service import PROJECT_NOT_FOUND

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get(
    "",
    response_model=list[ProjectRead],
    summary="List projects",
    description="All projects, newest first.",
)
async def list_projects(service: ProjectServiceDep, _admin: CurrentAdmin) -> list[ProjectRead]:
    projects = await service.list_projects()
    return [ProjectRead.model_validate(p) for p in projects]


@router.get(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Get project",
    responses={404: {"description": "Project not found"}},
)
async def get_project(
    project_id: UUID,
    service: ProjectServiceDep,
    _admin: CurrentAdmin,
) -> ProjectRead:
    return ProjectRead.model_validate(await service.get_project(project_id))


@router.post(
    "",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    description="Create a project. A client access token is generated once and never changes.",
)
async def create_project(
    data: ProjectCreate,
    service: ProjectServiceDep,
    _admin: CurrentAdmin,
) -> ProjectRead:
    return ProjectRead.model_validate(await service.create_project(data))


@router.put(
    "/{project_id}",
    response_model=ProjectUpdateResponse,
    summary="Update project",
    description=(
        "Partial update. The response carries `shouldSendEmail` and `emailData` "
        "when the progress percentage changed."
    ),
    responses={404: {"description": "Project not found"}},
)
async def update_project(
    project_id: UUID,
    data: ProjectUpdate,
    request: Request,
    service: ProjectServiceDep,
    _admin: CurrentAdmin,
) -> ProjectUpdateResponse:
    return await service.update_project(project_id, data, base_url=str(request.base_url))


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete project",
    responses={404: {"description": "Project not found"}},
)
async def delete_project(
    project_id: UUID,
    service: ProjectServiceDep,
    _admin: CurrentAdmin,
) -> None:
    if not await service.delete_project(project_id):
        raise NotFoundError(PROJECT_NOT_FOUND)
