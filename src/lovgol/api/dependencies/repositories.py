"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.lovgol.api.dependencies.db import DBSession
from src.lovgol.repositories import (
    AdminRepository,
    BlogPostRepository,
    BlogReactionRepository,
    CaseStudyRepository,
    ContactSubmissionRepository,
    InquirySubmissionRepository,
    ProjectRepository,
    ServicePreviewRepository,
)


def get_admin_repository(session: DBSession) -> AdminRepository:
    return AdminRepository(session)


def get_project_repository(session: DBSession) -> ProjectRepository:
    return ProjectRepository(session)


def get_service_preview_repository(session: DBSession) -> ServicePreviewRepository:
    return ServicePreviewRepository(session)


def get_blog_post_repository(session: DBSession) -> BlogPostRepository:
    return BlogPostRepository(session)


def get_blog_reaction_repository(session: DBSession) -> BlogReactionRepository:
    return BlogReactionRepository(session)


def get_case_study_repository(session: DBSession) -> CaseStudyRepository:
    return CaseStudyRepository(session)


def get_contact_submission_repository(session: DBSession) -> ContactSubmissionRepository:
    return ContactSubmissionRepository(session)


def get_inquiry_submission_repository(session: DBSession) -> InquirySubmissionRepository:
    return InquirySubmissionRepository(session)


AdminRepo = Annotated[AdminRepository, Depends(get_admin_repository)]
ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]
ServicePreviewRepo = Annotated[ServicePreviewRepository, Depends(get_service_preview_repository)]
BlogPostRepo = Annotated[BlogPostRepository, Depends(get_blog_post_repository)]
BlogReactionRepo = Annotated[BlogReactionRepository, Depends(get_blog_reaction_repository)]
CaseStudyRepo = Annotated[CaseStudyRepository, Depends(get_case_study_repository)]
ContactSubmissionRepo = Annotated[
    ContactSubmissionRepository, Depends(get_contact_submission_repository)
]
InquirySubmissionRepo = Annotated[
    InquirySubmissionRepository, Depends(get_inquiry_submission_repository)
]
