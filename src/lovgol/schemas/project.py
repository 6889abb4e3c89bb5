"""Project schemas for API request/response."""

import datetime as dt
from typing import Annotated, Any
from uuid import UUID

from pydantic import BaseModel, BeforeValidator, EmailStr, Field, model_validator

from src.lovgol.models.enums import (
    DeliveryStatus,
    FeedbackType,
    MilestoneStatus,
    PaymentStatus,
    Priority,
    ProjectHealth,
    RiskSeverity,
    RiskStatus,
)
from src.lovgol.schemas.base import CamelModel, NonEmptyStr, UpdateModel


def _integer_string(minimum: int, maximum: int | None = None, *, max_length: int):
    """Build a validator for string-encoded integers (forms post them as text).

    The text is stored as given, so ``max_length`` matches the column width.
    """
    bounds = f"between {minimum} and {maximum}" if maximum is not None else f">= {minimum}"

    def validate(value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        if not isinstance(value, str):
            raise ValueError("must be a whole number")
        value = value.strip()
        if not value.isdigit():
            raise ValueError("must be a whole number")
        if len(value) > max_length:
            raise ValueError(f"must be at most {max_length} digits")
        number = int(value)
        if number < minimum or (maximum is not None and number > maximum):
            raise ValueError(f"must be {bounds}")
        return value

    return validate


ProgressPercentage = Annotated[str, BeforeValidator(_integer_string(0, 100, max_length=3))]
DeliveryDays = Annotated[str, BeforeValidator(_integer_string(0, max_length=10))]


# --- Log entries ---------------------------------------------------------
# ``id`` is optional on input; the store assigns one to every entry without it.


class Milestone(CamelModel):
    id: str | None = None
    title: NonEmptyStr
    description: str = ""
    status: MilestoneStatus = MilestoneStatus.PENDING
    due_date: dt.date | None = None


class TeamUpdate(CamelModel):
    id: str | None = None
    date: dt.date
    text: NonEmptyStr
    author: NonEmptyStr


class ClientFeedback(CamelModel):
    id: str | None = None
    date: dt.date
    text: NonEmptyStr
    type: FeedbackType = FeedbackType.GENERAL


class NextStep(CamelModel):
    id: str | None = None
    task: NonEmptyStr
    priority: Priority = Priority.MEDIUM
    assignee: str | None = None
    due_date: dt.date | None = None


class RiskIssue(CamelModel):
    id: str | None = None
    title: NonEmptyStr
    description: str = ""
    severity: RiskSeverity = RiskSeverity.MEDIUM
    status: RiskStatus = RiskStatus.OPEN
    reported_date: dt.date


# --- Requests ------------------------------------------------------------


class ProjectCreate(CamelModel):
    """Required descriptive fields; omitted status fields get store defaults."""

    title: NonEmptyStr = Field(max_length=200)
    client_name: NonEmptyStr = Field(max_length=200)
    client_email: EmailStr
    description: NonEmptyStr
    category: NonEmptyStr = Field(max_length=100)
    technology: NonEmptyStr = Field(max_length=100)

    progress_percentage: ProgressPercentage | None = None
    progress_description: str | None = None
    estimated_delivery_days: DeliveryDays | None = None
    delivery_status: DeliveryStatus | None = None
    payment_status: PaymentStatus | None = None
    project_health: ProjectHealth | None = None

    milestones: list[Milestone] = Field(default_factory=list)
    team_updates: list[TeamUpdate] = Field(default_factory=list)
    client_feedback: list[ClientFeedback] = Field(default_factory=list)
    next_steps: list[NextStep] = Field(default_factory=list)
    risk_issues: list[RiskIssue] = Field(default_factory=list)


class ProjectUpdate(UpdateModel):
    """Partial update. Supplied log collections replace the stored ones."""

    nullable_fields = frozenset({"progress_description"})

    title: NonEmptyStr | None = Field(default=None, max_length=200)
    client_name: NonEmptyStr | None = Field(default=None, max_length=200)
    client_email: EmailStr | None = None
    description: NonEmptyStr | None = None
    category: NonEmptyStr | None = Field(default=None, max_length=100)
    technology: NonEmptyStr | None = Field(default=None, max_length=100)

    progress_percentage: ProgressPercentage | None = None
    progress_description: str | None = None
    estimated_delivery_days: DeliveryDays | None = None
    delivery_status: DeliveryStatus | None = None
    payment_status: PaymentStatus | None = None
    project_health: ProjectHealth | None = None

    milestones: list[Milestone] | None = None
    team_updates: list[TeamUpdate] | None = None
    client_feedback: list[ClientFeedback] | None = None
    next_steps: list[NextStep] | None = None
    risk_issues: list[RiskIssue] | None = None

    @model_validator(mode="before")
    @classmethod
    def accept_legacy_progress_key(cls, data: Any) -> Any:
        # Older admin clients posted the percentage as ``currentProgress``.
        if isinstance(data, dict) and "currentProgress" in data:
            data = dict(data)
            legacy = data.pop("currentProgress")
            if "progressPercentage" not in data and "progress_percentage" not in data:
                data["progressPercentage"] = legacy
        return data


# --- Responses -----------------------------------------------------------


class ProjectRead(CamelModel):
    """Full admin view of a project."""

    id: UUID
    client_access_token: str
    title: str
    client_name: str
    client_email: str
    description: str
    category: str
    technology: str
    progress_percentage: str
    progress_description: str | None
    estimated_delivery_days: str
    delivery_status: str
    payment_status: str
    project_health: str
    milestones: list[Milestone]
    team_updates: list[TeamUpdate]
    client_feedback: list[ClientFeedback]
    next_steps: list[NextStep]
    risk_issues: list[RiskIssue]
    created_at: dt.datetime
    updated_at: dt.datetime


class ClientProjectView(CamelModel):
    """Client-safe projection served to holders of the access token.

    Never add contact details, the token itself or internal logs here.
    """

    id: UUID
    title: str
    description: str
    category: str
    technology: str
    progress_percentage: str
    progress_description: str | None
    estimated_delivery_days: str
    delivery_status: str
    payment_status: str
    project_health: str
    milestones: list[Milestone]
    client_feedback: list[ClientFeedback]
    created_at: dt.datetime
    updated_at: dt.datetime


class ProjectUpdateEmail(BaseModel):
    """Payload handed to the email collaborator (snake_case keys on the wire)."""

    to_email: str
    client_name: str
    project_title: str
    progress_percentage: str
    progress_description: str
    client_project_link: str
    estimated_delivery_days: str
    project_health: str
    delivery_status: str
    payment_status: str


class ProjectUpdateResponse(ProjectRead):
    should_send_email: bool = False
    email_data: ProjectUpdateEmail | None = None


class NotificationDispatchResponse(CamelModel):
    sent: bool
