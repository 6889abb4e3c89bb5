"""Token-gated client project view (public)."""

from fastapi import APIRouter

from src.lovgol.api.dependencies import ProjectServiceDep
from src.lovgol.schemas.project import ClientProjectView

router = APIRouter(prefix="/client-project", tags=["client"])


@router.get(
    "/{token}",
    response_model=ClientProjectView,
    summary="Client project status",
    description="Progress view for the holder of a project's access token.",
    responses={404: {"description": "Project not found"}},
)
async def get_client_project(token: str, service: ProjectServiceDep) -> ClientProjectView:
    return await service.get_client_view(token)
