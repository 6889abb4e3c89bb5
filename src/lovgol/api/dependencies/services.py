"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.lovgol.api.dependencies.db import DBSession
from src.lovgol.api.dependencies.repositories import (
    AdminRepo,
    BlogPostRepo,
    BlogReactionRepo,
    CaseStudyRepo,
    ContactSubmissionRepo,
    InquirySubmissionRepo,
    ProjectRepo,
    ServicePreviewRepo,
)
from src.lovgol.services import (
    AuthService,
    BlogPostService,
    BlogReactionService,
    CaseStudyService,
    ProjectService,
    ServicePreviewService,
    SubmissionService,
)


def get_auth_service(admin_repo: AdminRepo, session: DBSession) -> AuthService:
    return AuthService(admin_repo, session)


def get_project_service(project_repo: ProjectRepo, session: DBSession) -> ProjectService:
    return ProjectService(project_repo, session)


def get_service_preview_service(
    repo: ServicePreviewRepo, session: DBSession
) -> ServicePreviewService:
    return ServicePreviewService(repo, session)


def get_blog_post_service(
    repo: BlogPostRepo, reaction_repo: BlogReactionRepo, session: DBSession
) -> BlogPostService:
    return BlogPostService(repo, reaction_repo, session)


def get_blog_reaction_service(
    repo: BlogReactionRepo, post_repo: BlogPostRepo, session: DBSession
) -> BlogReactionService:
    return BlogReactionService(repo, post_repo, session)


def get_case_study_service(
    repo: CaseStudyRepo, service_repo: ServicePreviewRepo, session: DBSession
) -> CaseStudyService:
    return CaseStudyService(repo, service_repo, session)


def get_submission_service(
    contact_repo: ContactSubmissionRepo,
    inquiry_repo: InquirySubmissionRepo,
    session: DBSession,
) -> SubmissionService:
    return SubmissionService(contact_repo, inquiry_repo, session)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
ServicePreviewServiceDep = Annotated[ServicePreviewService, Depends(get_service_preview_service)]
BlogPostServiceDep = Annotated[BlogPostService, Depends(get_blog_post_service)]
BlogReactionServiceDep = Annotated[BlogReactionService, Depends(get_blog_reaction_service)]
CaseStudyServiceDep = Annotated[CaseStudyService, Depends(get_case_study_service)]
SubmissionServiceDep = Annotated[SubmissionService, Depends(get_submission_service)]
