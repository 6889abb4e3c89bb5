from fastapi import APIRouter

from src.lovgol.api.routes import (
    auth,
    blog_posts,
    blog_reactions,
    case_studies,
    client_projects,
    notifications,
    projects,
    service_previews,
    submissions,
)

api_router = APIRouter(prefix="/api")
api_router.include_router(auth.router)
api_router.include_router(projects.router)
api_router.include_router(client_projects.router)
api_router.include_router(notifications.router)
api_router.include_router(service_previews.router)
api_router.include_router(blog_posts.router)
api_router.include_router(blog_reactions.router)
api_router.include_router(case_studies.router)
api_router.include_router(submissions.router)
