from src.lovgol.schemas.auth import AdminRead, AuthStatus, LoginRequest
from src.lovgol.schemas.content import (
    BlogPostCreate,
    BlogPostRead,
    BlogPostUpdate,
    BlogReactionCreate,
    BlogReactionRead,
    CaseStudyCreate,
    CaseStudyRead,
    CaseStudyUpdate,
    ServicePreviewCreate,
    ServicePreviewRead,
    ServicePreviewUpdate,
)
from src.lovgol.schemas.project import (
    ClientProjectView,
    NotificationDispatchResponse,
    ProjectCreate,
    ProjectRead,
    ProjectUpdate,
    ProjectUpdateEmail,
    ProjectUpdateResponse,
)
from src.lovgol.schemas.submission import (
    ContactSubmissionCreate,
    ContactSubmissionRead,
    InquirySubmissionCreate,
    InquirySubmissionRead,
)

__all__ = [
    # Auth
    "AdminRead",
    "AuthStatus",
    "LoginRequest",
    # Content
    "BlogPostCreate",
    "BlogPostRead",
    "BlogPostUpdate",
    "BlogReactionCreate",
    "BlogReactionRead",
    "CaseStudyCreate",
    "CaseStudyRead",
    "CaseStudyUpdate",
    "ServicePreviewCreate",
    "ServicePreviewRead",
    "ServicePreviewUpdate",
    # Project
    "ClientProjectView",
    "NotificationDispatchResponse",
    "ProjectCreate",
    "ProjectRead",
    "ProjectUpdate",
    "ProjectUpdateEmail",
    "ProjectUpdateResponse",
    # Submissions
    "ContactSubmissionCreate",
    "ContactSubmissionRead",
    "InquirySubmissionCreate",
    "InquirySubmissionRead",
]
