"""Shared enums for models and schemas."""

from enum import Enum


class DeliveryStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"


class PaymentStatus(str, Enum):
    """Manually-set payment label; no payment processing happens here."""

    PENDING = "pending"
    PARTIAL = "partial"
    COMPLETED = "completed"


class ProjectHealth(str, Enum):
    """Traffic-light label set by an admin, independent of progress."""

    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


class MilestoneStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class FeedbackType(str, Enum):
    GENERAL = "general"
    REQUEST = "request"
    APPROVAL = "approval"
    CONCERN = "concern"


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class RiskSeverity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class RiskStatus(str, Enum):
    OPEN = "open"
    RESOLVED = "resolved"


class ServiceCategory(str, Enum):
    WEB = "web"
    APP = "app"
    AUTOMATION = "automation"


class ReactionType(str, Enum):
    LIKE = "like"
    LOVE = "love"
    INSIGHTFUL = "insightful"
    HELPFUL = "helpful"
    COMMENT = "comment"
