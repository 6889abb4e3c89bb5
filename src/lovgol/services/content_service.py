"""Content services - service previews, blog posts, reactions and case studies."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.lovgol.core.exceptions import NotFoundError, ValidationError
from src.lovgol.core.logging import get_logger
from src.lovgol.models import BlogPost, BlogReaction, CaseStudy, ServicePreview
from src.lovgol.models.base import utc_now
from src.lovgol.models.enums import ReactionType
from src.lovgol.repositories import (
    BlogPostRepository,
    BlogReactionRepository,
    CaseStudyRepository,
    ServicePreviewRepository,
)
from src.lovgol.schemas.content import (
    BlogPostCreate,
    BlogPostUpdate,
    BlogReactionCreate,
    CaseStudyCreate,
    CaseStudyUpdate,
    ServicePreviewCreate,
    ServicePreviewUpdate,
)
from src.lovgol.services.base import BaseService

logger = get_logger(__name__)


class ServicePreviewService(BaseService):
    def __init__(self, repo: ServicePreviewRepository, session: AsyncSession):
        super().__init__(session)
        self.repo = repo

    async def list_previews(
        self, category: str | None = None, technology: str | None = None
    ) -> list[ServicePreview]:
        return await self.repo.list_filtered(category=category, technology=technology)

    async def get_preview(self, preview_id: UUID) -> ServicePreview:
        preview = await self.repo.get_by_id(preview_id)
        if preview is None:
            raise NotFoundError("Service preview not found")
        return preview

    async def create_preview(self, data: ServicePreviewCreate) -> ServicePreview:
        preview = ServicePreview(**data.model_dump())
        self.repo.add(preview)
        await self.commit(preview, action="create service preview")
        return preview

    async def update_preview(self, preview_id: UUID, data: ServicePreviewUpdate) -> ServicePreview:
        preview = await self.get_preview(preview_id)
        self.repo.apply_changes(preview, data.changes())
        await self.commit(preview, action="update service preview")
        return preview

    async def delete_preview(self, preview_id: UUID) -> None:
        preview = await self.get_preview(preview_id)
        await self.repo.delete(preview)
        await self.commit(
            action="delete service preview",
            conflict_detail="Service preview is referenced by a case study",
        )


class BlogPostService(BaseService):
    """Blog posts. Publishing without an explicit date stamps ``published_at``."""

    def __init__(
        self,
        repo: BlogPostRepository,
        reaction_repo: BlogReactionRepository,
        session: AsyncSession,
    ):
        super().__init__(session)
        self.repo = repo
        self.reaction_repo = reaction_repo

    @staticmethod
    def _slug_taken(slug: str) -> str:
        return f"Blog post with slug '{slug}' already exists"

    async def list_posts(self, published_only: bool = False) -> list[BlogPost]:
        if published_only:
            return await self.repo.list_published()
        return await self.repo.list_all()

    async def get_post(self, post_id: UUID) -> BlogPost:
        post = await self.repo.get_by_id(post_id)
        if post is None:
            raise NotFoundError("Blog post not found")
        return post

    async def view_post_by_slug(self, slug: str) -> BlogPost:
        """Fetch a post for a reader and count the view."""
        post = await self.repo.get_by_slug(slug)
        if post is None:
            raise NotFoundError("Blog post not found")
        await self.repo.increment_view_count(post.id)
        await self.commit(post, action="record blog view")
        return post

    async def create_post(self, data: BlogPostCreate) -> BlogPost:
        values = data.model_dump()
        if values["is_published"] and values["published_at"] is None:
            values["published_at"] = utc_now()
        post = BlogPost(**values)
        self.repo.add(post)
        await self.commit(
            post, action="create blog post", conflict_detail=self._slug_taken(data.slug)
        )
        logger.info("Blog post created", post_id=str(post.id), slug=post.slug)
        return post

    async def update_post(self, post_id: UUID, data: BlogPostUpdate) -> BlogPost:
        post = await self.get_post(post_id)
        changes = data.changes()
        becomes_published = changes.get("is_published") is True
        if becomes_published and changes.get("published_at") is None and post.published_at is None:
            changes["published_at"] = utc_now()
        self.repo.apply_changes(post, changes)
        await self.commit(
            post,
            action="update blog post",
            conflict_detail=self._slug_taken(changes.get("slug", post.slug)),
        )
        return post

    async def delete_post(self, post_id: UUID) -> None:
        post = await self.get_post(post_id)
        await self.reaction_repo.delete_for_post(post.id)
        await self.repo.delete(post)
        await self.commit(action="delete blog post")
        logger.info("Blog post deleted", post_id=str(post_id))


class BlogReactionService(BaseService):
    def __init__(
        self,
        repo: BlogReactionRepository,
        post_repo: BlogPostRepository,
        session: AsyncSession,
    ):
        super().__init__(session)
        self.repo = repo
        self.post_repo = post_repo

    async def list_reactions(self, post_id: UUID | None = None) -> list[BlogReaction]:
        return await self.repo.list_for_post(post_id)

    async def add_reaction(self, data: BlogReactionCreate) -> BlogReaction:
        """Record a reaction. Likes also bump the post's like counter.

        Raises:
            NotFoundError: If the post does not exist.
        """
        post = await self.post_repo.get_by_id(data.post_id)
        if post is None:
            raise NotFoundError("Blog post not found")

        reaction = BlogReaction(**data.model_dump())
        self.repo.add(reaction)
        if data.reaction_type == ReactionType.LIKE.value:
            await self.post_repo.increment_like_count(post.id)
        await self.commit(reaction, action="create blog reaction")
        return reaction


class CaseStudyService(BaseService):
    def __init__(
        self,
        repo: CaseStudyRepository,
        service_repo: ServicePreviewRepository,
        session: AsyncSession,
    ):
        super().__init__(session)
        self.repo = repo
        self.service_repo = service_repo

    async def _check_service(self, service_id: UUID | None) -> None:
        if service_id is not None and await self.service_repo.get_by_id(service_id) is None:
            raise ValidationError("serviceId does not match any service preview")

    @staticmethod
    def _slug_taken(slug: str) -> str:
        return f"Case study with slug '{slug}' already exists"

    async def list_case_studies(self) -> list[CaseStudy]:
        return await self.repo.list_all()

    async def get_case_study(self, case_study_id: UUID) -> CaseStudy:
        case_study = await self.repo.get_by_id(case_study_id)
        if case_study is None:
            raise NotFoundError("Case study not found")
        return case_study

    async def get_by_slug(self, slug: str) -> CaseStudy:
        case_study = await self.repo.get_by_slug(slug)
        if case_study is None:
            raise NotFoundError("Case study not found")
        return case_study

    async def create_case_study(self, data: CaseStudyCreate) -> CaseStudy:
        await self._check_service(data.service_id)
        case_study = CaseStudy(**data.model_dump())
        self.repo.add(case_study)
        await self.commit(
            case_study, action="create case study", conflict_detail=self._slug_taken(data.slug)
        )
        return case_study

    async def update_case_study(self, case_study_id: UUID, data: CaseStudyUpdate) -> CaseStudy:
        case_study = await self.get_case_study(case_study_id)
        changes = data.changes()
        await self._check_service(changes.get("service_id"))
        self.repo.apply_changes(case_study, changes)
        await self.commit(
            case_study,
            action="update case study",
            conflict_detail=self._slug_taken(changes.get("slug", case_study.slug)),
        )
        return case_study

    async def delete_case_study(self, case_study_id: UUID) -> None:
        case_study = await self.get_case_study(case_study_id)
        await self.repo.delete(case_study)
        await self.commit(action="delete case study")
