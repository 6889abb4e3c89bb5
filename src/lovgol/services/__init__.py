from src.lovgol.services.auth_service import AuthService
from src.lovgol.services.content_service import (
    BlogPostService,
    BlogReactionService,
    CaseStudyService,
    ServicePreviewService,
)
from src.lovgol.services.progress_notification import (
    ProgressNotification,
    decide_progress_notification,
)
from src.lovgol.services.project_service import ProjectService
from src.lovgol.services.submission_service import SubmissionService

__all__ = [
    "AuthService",
    "BlogPostService",
    "BlogReactionService",
    "CaseStudyService",
    "ProgressNotification",
    "ProjectService",
    "ServicePreviewService",
    "SubmissionService",
    "decide_progress_notification",
]
