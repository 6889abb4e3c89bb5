"""Repositories for marketing content: service previews, blog, case studies."""

from uuid import UUID

from sqlalchemy import delete as sa_delete
from sqlalchemy import update as sa_update
from sqlmodel import select

from src.lovgol.models import BlogPost, BlogReaction, CaseStudy, ServicePreview
from src.lovgol.repositories.base import BaseRepository


class ServicePreviewRepository(BaseRepository[ServicePreview]):
    model = ServicePreview

    async def list_filtered(
        self,
        category: str | None = None,
        technology: str | None = None,
    ) -> list[ServicePreview]:
        """List previews newest first, optionally narrowed by category and/or technology."""
        query = select(ServicePreview)
        if category:
            query = query.where(ServicePreview.category == category)
        if technology:
            query = query.where(ServicePreview.technology == technology)
        return await self.list_ordered(ServicePreview.created_at, query)


class BlogPostRepository(BaseRepository[BlogPost]):
    model = BlogPost

    async def get_by_slug(self, slug: str) -> BlogPost | None:
        result = await self.session.execute(select(BlogPost).where(BlogPost.slug == slug))
        return result.scalar_one_or_none()

    async def list_published(self) -> list[BlogPost]:
        query = select(BlogPost).where(BlogPost.is_published == True)  # noqa: E712
        return await self.list_ordered(BlogPost.published_at, query)

    async def list_all(self) -> list[BlogPost]:
        return await self.list_ordered(BlogPost.created_at)

    async def increment_view_count(self, post_id: UUID) -> None:
        """Atomic in-database increment; concurrent readers do not lose views."""
        await self.session.execute(
            sa_update(BlogPost)
            .where(BlogPost.id == post_id)  # type: ignore[arg-type]
            .values(view_count=BlogPost.view_count + 1)
        )

    async def increment_like_count(self, post_id: UUID) -> None:
        await self.session.execute(
            sa_update(BlogPost)
            .where(BlogPost.id == post_id)  # type: ignore[arg-type]
            .values(like_count=BlogPost.like_count + 1)
        )


class BlogReactionRepository(BaseRepository[BlogReaction]):
    model = BlogReaction

    async def list_for_post(self, post_id: UUID | None = None) -> list[BlogReaction]:
        query = select(BlogReaction)
        if post_id is not None:
            query = query.where(BlogReaction.post_id == post_id)
        return await self.list_ordered(BlogReaction.created_at, query)

    async def delete_for_post(self, post_id: UUID) -> None:
        await self.session.execute(
            sa_delete(BlogReaction).where(BlogReaction.post_id == post_id)  # type: ignore[arg-type]
        )


class CaseStudyRepository(BaseRepository[CaseStudy]):
    model = CaseStudy

    async def get_by_slug(self, slug: str) -> CaseStudy | None:
        result = await self.session.execute(select(CaseStudy).where(CaseStudy.slug == slug))
        return result.scalar_one_or_none()

    async def list_all(self) -> list[CaseStudy]:
        return await self.list_ordered(CaseStudy.created_at)
