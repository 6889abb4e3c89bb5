"""Blog post endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status

from src.lovgol.api.dependencies import BlogPostServiceDep, CurrentAdmin, OptionalAdmin
from src.lovgol.schemas.content import BlogPostCreate, BlogPostRead, BlogPostUpdate

router = APIRouter(prefix="/blog-posts", tags=["blog"])


@router.get(
    "",
    response_model=list[BlogPostRead],
    summary="List blog posts",
    description=(
        "`published=true` lists published posts by publish date. Otherwise an admin "
        "session sees every post by creation date; anonymous callers still only get "
        "published posts."
    ),
)
async def list_blog_posts(
    service: BlogPostServiceDep,
    admin: OptionalAdmin,
    published: Annotated[bool, Query(description="Only published posts")] = False,
) -> list[BlogPostRead]:
    posts = await service.list_posts(published_only=published or admin is None)
    return [BlogPostRead.model_validate(p) for p in posts]


@router.get(
    "/slug/{slug}",
    response_model=BlogPostRead,
    summary="Read blog post by slug",
    description="Public reader endpoint; every fetch counts as a view.",
)
async def get_blog_post_by_slug(slug: str, service: BlogPostServiceDep) -> BlogPostRead:
    return BlogPostRead.model_validate(await service.view_post_by_slug(slug))


@router.get("/{post_id}", response_model=BlogPostRead, summary="Get blog post")
async def get_blog_post(post_id: UUID, service: BlogPostServiceDep) -> BlogPostRead:
    return BlogPostRead.model_validate(await service.get_post(post_id))


@router.post(
    "",
    response_model=BlogPostRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create blog post",
    responses={409: {"description": "Slug already in use"}},
)
async def create_blog_post(
    data: BlogPostCreate,
    service: BlogPostServiceDep,
    _admin: CurrentAdmin,
) -> BlogPostRead:
    return BlogPostRead.model_validate(await service.create_post(data))


@router.put(
    "/{post_id}",
    response_model=BlogPostRead,
    summary="Update blog post",
    responses={409: {"description": "Slug already in use"}},
)
async def update_blog_post(
    post_id: UUID,
    data: BlogPostUpdate,
    service: BlogPostServiceDep,
    _admin: CurrentAdmin,
) -> BlogPostRead:
    return BlogPostRead.model_validate(await service.update_post(post_id, data))


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete blog post",
    description="Deletes the post together with its reactions.",
)
async def delete_blog_post(
    post_id: UUID,
    service: BlogPostServiceDep,
    _admin: CurrentAdmin,
) -> None:
    await service.delete_post(post_id)
