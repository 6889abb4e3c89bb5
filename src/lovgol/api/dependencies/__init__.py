"""FastAPI dependency injection definitions."""

from src.lovgol.api.dependencies.auth import (
    CurrentAdmin,
    OptionalAdmin,
    SessionId,
    get_current_admin,
    get_optional_admin,
    get_session_id,
)
from src.lovgol.api.dependencies.db import DBSession, get_db_session
from src.lovgol.api.dependencies.services import (
    AuthServiceDep,
    BlogPostServiceDep,
    BlogReactionServiceDep,
    CaseStudyServiceDep,
    ProjectServiceDep,
    ServicePreviewServiceDep,
    SubmissionServiceDep,
)

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Auth
    "CurrentAdmin",
    "OptionalAdmin",
    "SessionId",
    "get_current_admin",
    "get_optional_admin",
    "get_session_id",
    # Services
    "AuthServiceDep",
    "BlogPostServiceDep",
    "BlogReactionServiceDep",
    "CaseStudyServiceDep",
    "ProjectServiceDep",
    "ServicePreviewServiceDep",
    "SubmissionServiceDep",
]
