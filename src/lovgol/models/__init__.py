"""Model exports.

Import from here: `from src.lovgol.models import Project, BlogPost`
"""

from src.lovgol.models.admin import Admin
from src.lovgol.models.content import BlogPost, BlogReaction, CaseStudy, ServicePreview
from src.lovgol.models.enums import (
    DeliveryStatus,
    FeedbackType,
    MilestoneStatus,
    PaymentStatus,
    Priority,
    ProjectHealth,
    ReactionType,
    RiskSeverity,
    RiskStatus,
    ServiceCategory,
)
from src.lovgol.models.project import PROJECT_LOG_FIELDS, Project
from src.lovgol.models.submission import ContactSubmission, InquirySubmission

__all__ = [
    # Enums
    "DeliveryStatus",
    "FeedbackType",
    "MilestoneStatus",
    "PaymentStatus",
    "Priority",
    "ProjectHealth",
    "ReactionType",
    "RiskSeverity",
    "RiskStatus",
    "ServiceCategory",
    # Tables
    "Admin",
    "BlogPost",
    "BlogReaction",
    "CaseStudy",
    "ContactSubmission",
    "InquirySubmission",
    "Project",
    "ServicePreview",
    # Constants
    "PROJECT_LOG_FIELDS",
]
