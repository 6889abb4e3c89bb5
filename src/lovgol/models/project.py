"""Client project model.

Log sub-collections (milestones, updates, feedback, next steps, risks) are
embedded JSON arrays on the project row. They are always read and written
together with their parent, so they are not normalized into child tables.
"""

from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import JSON
from sqlmodel import Field, SQLModel

from src.lovgol.models.base import utc_now
from src.lovgol.models.enums import DeliveryStatus, PaymentStatus, ProjectHealth

DEFAULT_PROGRESS_PERCENTAGE = "0"
DEFAULT_ESTIMATED_DELIVERY_DAYS = "30"

# Sub-collection attribute names, in storage order.
PROJECT_LOG_FIELDS = (
    "milestones",
    "team_updates",
    "client_feedback",
    "next_steps",
    "risk_issues",
)


class Project(SQLModel, table=True):
    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    client_access_token: str = Field(max_length=64, unique=True, index=True)

    title: str = Field(max_length=200)
    client_name: str = Field(max_length=200)
    client_email: str = Field(max_length=255)
    description: str
    category: str = Field(max_length=100)
    technology: str = Field(max_length=100)

    progress_percentage: str = Field(default=DEFAULT_PROGRESS_PERCENTAGE, max_length=3)
    progress_description: str | None = Field(default=None)
    estimated_delivery_days: str = Field(default=DEFAULT_ESTIMATED_DELIVERY_DAYS, max_length=10)
    delivery_status: str = Field(default=DeliveryStatus.PENDING.value, max_length=20)
    payment_status: str = Field(default=PaymentStatus.PENDING.value, max_length=20)
    project_health: str = Field(default=ProjectHealth.GREEN.value, max_length=20)

    milestones: list[dict[str, Any]] = Field(default_factory=list, sa_type=JSON)
    team_updates: list[dict[str, Any]] = Field(default_factory=list, sa_type=JSON)
    client_feedback: list[dict[str, Any]] = Field(default_factory=list, sa_type=JSON)
    next_steps: list[dict[str, Any]] = Field(default_factory=list, sa_type=JSON)
    risk_issues: list[dict[str, Any]] = Field(default_factory=list, sa_type=JSON)

    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now)
