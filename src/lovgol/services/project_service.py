"""Project service - admin CRUD, client access and progress notifications."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.lovgol.core.exceptions import NotFoundError
from src.lovgol.core.logging import get_logger
from src.lovgol.models import Project
from src.lovgol.repositories import ProjectRepository
from src.lovgol.schemas.project import (
    ClientProjectView,
    ProjectCreate,
    ProjectRead,
    ProjectUpdate,
    ProjectUpdateResponse,
)
from src.lovgol.services.base import BaseService
from src.lovgol.services.progress_notification import decide_progress_notification

logger = get_logger(__name__)

PROJECT_NOT_FOUND = "Project not found"


class ProjectService(BaseService):
    def __init__(self, project_repo: ProjectRepository, session: AsyncSession):
        super().__init__(session)
        self.project_repo = project_repo

    async def list_projects(self) -> list[Project]:
        return await self.project_repo.list_all()

    async def get_project(self, project_id: UUID) -> Project:
        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            raise NotFoundError(PROJECT_NOT_FOUND)
        return project

    async def create_project(self, data: ProjectCreate) -> Project:
        project = self.project_repo.create(data)
        await self.commit(project, action="create project")
        logger.info("Project created", project_id=str(project.id))
        return project

    async def update_project(
        self,
        project_id: UUID,
        data: ProjectUpdate,
        base_url: str,
    ) -> ProjectUpdateResponse:
        """Apply a partial update and report whether the client should be emailed.

        Raises:
            NotFoundError: If the project does not exist.
        """
        project = await self.get_project(project_id)
        before = ProjectRead.model_validate(project)

        self.project_repo.update(project, data.changes())
        await self.commit(project, action="update project")

        after = ProjectRead.model_validate(project)
        notification = decide_progress_notification(before, data, after, base_url)
        logger.info(
            "Project updated",
            project_id=str(project.id),
            fields=sorted(data.model_fields_set),
            should_send_email=notification.should_send_email,
        )
        return ProjectUpdateResponse(
            **after.model_dump(),
            should_send_email=notification.should_send_email,
            email_data=notification.email_data,
        )

    async def delete_project(self, project_id: UUID) -> bool:
        """Delete a project. Returns False when it did not exist."""
        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            return False
        await self.project_repo.delete(project)
        await self.commit(action="delete project")
        logger.info("Project deleted", project_id=str(project_id))
        return True

    async def get_client_view(self, token: str) -> ClientProjectView:
        """Client-safe projection for the holder of an access token.

        Raises:
            NotFoundError: For unknown and malformed tokens alike.
        """
        project = await self.project_repo.get_by_token(token)
        if project is None:
            raise NotFoundError(PROJECT_NOT_FOUND)
        return ClientProjectView.model_validate(project)
