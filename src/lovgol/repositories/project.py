"""Repository for client projects.

This is the only write path for ``Project`` rows. It owns identifier and
token generation, status defaults and id assignment for log entries.
"""

from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel
from pydantic_core import to_jsonable_python
from sqlmodel import select

from src.lovgol.core.security import generate_client_access_token
from src.lovgol.models import PROJECT_LOG_FIELDS, Project
from src.lovgol.models.project import (
    DEFAULT_ESTIMATED_DELIVERY_DAYS,
    DEFAULT_PROGRESS_PERCENTAGE,
)
from src.lovgol.models.enums import DeliveryStatus, PaymentStatus, ProjectHealth
from src.lovgol.repositories.base import BaseRepository
from src.lovgol.schemas.project import ProjectCreate

STATUS_DEFAULTS: dict[str, str] = {
    "progress_percentage": DEFAULT_PROGRESS_PERCENTAGE,
    "estimated_delivery_days": DEFAULT_ESTIMATED_DELIVERY_DAYS,
    "delivery_status": DeliveryStatus.PENDING.value,
    "payment_status": PaymentStatus.PENDING.value,
    "project_health": ProjectHealth.GREEN.value,
}


def assign_entry_ids(entries: list[Any]) -> list[dict[str, Any]]:
    """Return JSON-ready copies of ``entries``; entries without an id get a fresh one.

    Existing ids are kept as-is.
    """
    prepared: list[dict[str, Any]] = []
    for entry in entries:
        if isinstance(entry, BaseModel):
            entry = entry.model_dump()
        item = to_jsonable_python(entry)
        if not item.get("id"):
            item["id"] = str(uuid4())
        prepared.append(item)
    return prepared


class ProjectRepository(BaseRepository[Project]):
    model = Project

    def create(self, data: ProjectCreate) -> Project:
        """Build and stage a new project (no commit)."""
        values = data.model_dump(exclude=set(PROJECT_LOG_FIELDS))
        for field, default in STATUS_DEFAULTS.items():
            if values.get(field) is None:
                values[field] = default
        for field in PROJECT_LOG_FIELDS:
            values[field] = assign_entry_ids(getattr(data, field))

        project = Project(client_access_token=generate_client_access_token(), **values)
        self.add(project)
        return project

    async def get_by_token(self, token: str) -> Project | None:
        """Look up by access token, falling back to the project id.

        Malformed values simply find nothing.
        """
        result = await self.session.execute(
            select(Project).where(Project.client_access_token == token)
        )
        project = result.scalar_one_or_none()
        if project is not None:
            return project
        try:
            project_id = UUID(token)
        except ValueError:
            return None
        return await self.get_by_id(project_id)

    def update(self, project: Project, changes: dict[str, Any]) -> Project:
        """Merge supplied fields. Supplied log collections replace the stored ones."""
        changes = dict(changes)
        for field in PROJECT_LOG_FIELDS:
            if field in changes:
                changes[field] = assign_entry_ids(changes[field])
        return self.apply_changes(project, changes)

    async def list_all(self) -> list[Project]:
        """All projects, newest first."""
        return await self.list_ordered(Project.created_at)
