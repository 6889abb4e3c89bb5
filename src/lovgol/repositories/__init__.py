"""Repository layer - data access abstraction."""

from src.lovgol.repositories.admin import AdminRepository
from src.lovgol.repositories.base import BaseRepository
from src.lovgol.repositories.content import (
    BlogPostRepository,
    BlogReactionRepository,
    CaseStudyRepository,
    ServicePreviewRepository,
)
from src.lovgol.repositories.project import ProjectRepository
from src.lovgol.repositories.submission import (
    ContactSubmissionRepository,
    InquirySubmissionRepository,
)

__all__ = [
    # Base
    "BaseRepository",
    # Accounts
    "AdminRepository",
    # Projects
    "ProjectRepository",
    # Content
    "BlogPostRepository",
    "BlogReactionRepository",
    "CaseStudyRepository",
    "ServicePreviewRepository",
    # Submissions
    "ContactSubmissionRepository",
    "InquirySubmissionRepository",
]
