"""Blog reaction endpoints (public)."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status

from src.lovgol.api.dependencies import BlogReactionServiceDep
from src.lovgol.schemas.content import BlogReactionCreate, BlogReactionRead

router = APIRouter(prefix="/blog-reactions", tags=["blog"])


@router.get("", response_model=list[BlogReactionRead], summary="List reactions")
async def list_blog_reactions(
    service: BlogReactionServiceDep,
    post_id: Annotated[UUID | None, Query(alias="postId", description="Only this post")] = None,
) -> list[BlogReactionRead]:
    reactions = await service.list_reactions(post_id)
    return [BlogReactionRead.model_validate(r) for r in reactions]


@router.post(
    "",
    response_model=BlogReactionRead,
    status_code=status.HTTP_201_CREATED,
    summary="React to a blog post",
    responses={404: {"description": "Blog post not found"}},
)
async def create_blog_reaction(
    data: BlogReactionCreate, service: BlogReactionServiceDep
) -> BlogReactionRead:
    return BlogReactionRead.model_validate(await service.add_reaction(data))
