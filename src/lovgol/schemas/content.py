"""Marketing content schemas - service previews, blog posts, reactions, case studies."""

from datetime import datetime
from typing import Self
from uuid import UUID

from pydantic import EmailStr, Field, field_validator, model_validator

from src.lovgol.models.enums import ReactionType, ServiceCategory
from src.lovgol.schemas.base import CamelModel, NonEmptyStr, OptionalUrl, UpdateModel, Url

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


def _clean_tags(tags: list[str]) -> list[str]:
    """Strip, drop blanks and de-duplicate while keeping order."""
    seen: list[str] = []
    for tag in tags:
        tag = tag.strip()
        if tag and tag not in seen:
            seen.append(tag)
    return seen


# --- Service previews ----------------------------------------------------


class ServicePreviewCreate(CamelModel):
    title: NonEmptyStr = Field(max_length=200)
    description: NonEmptyStr
    category: ServiceCategory
    technology: NonEmptyStr = Field(max_length=100)
    tags: list[str] = Field(default_factory=list)
    image_url: OptionalUrl = None

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[str]) -> list[str]:
        return _clean_tags(v)


class ServicePreviewUpdate(UpdateModel):
    nullable_fields = frozenset({"image_url"})

    title: NonEmptyStr | None = Field(default=None, max_length=200)
    description: NonEmptyStr | None = None
    category: ServiceCategory | None = None
    technology: NonEmptyStr | None = Field(default=None, max_length=100)
    tags: list[str] | None = None
    image_url: OptionalUrl = None

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[str] | None) -> list[str] | None:
        return _clean_tags(v) if v is not None else v


class ServicePreviewRead(CamelModel):
    id: UUID
    title: str
    description: str
    category: str
    technology: str
    tags: list[str]
    image_url: str | None
    created_at: datetime
    updated_at: datetime


# --- Blog posts ----------------------------------------------------------


class BlogPostCreate(CamelModel):
    title: NonEmptyStr = Field(max_length=300)
    slug: NonEmptyStr = Field(max_length=300, pattern=SLUG_PATTERN)
    excerpt: NonEmptyStr
    content: NonEmptyStr
    featured_image: OptionalUrl = None
    category: NonEmptyStr = Field(max_length=100)
    tags: list[str] = Field(default_factory=list)
    is_published: bool = False
    published_at: datetime | None = None

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[str]) -> list[str]:
        return _clean_tags(v)


class BlogPostUpdate(UpdateModel):
    nullable_fields = frozenset({"featured_image", "published_at"})

    title: NonEmptyStr | None = Field(default=None, max_length=300)
    slug: NonEmptyStr | None = Field(default=None, max_length=300, pattern=SLUG_PATTERN)
    excerpt: NonEmptyStr | None = None
    content: NonEmptyStr | None = None
    featured_image: OptionalUrl = None
    category: NonEmptyStr | None = Field(default=None, max_length=100)
    tags: list[str] | None = None
    is_published: bool | None = None
    published_at: datetime | None = None

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[str] | None) -> list[str] | None:
        return _clean_tags(v) if v is not None else v


class BlogPostRead(CamelModel):
    id: UUID
    title: str
    slug: str
    excerpt: str
    content: str
    featured_image: str | None
    category: str
    tags: list[str]
    is_published: bool
    published_at: datetime | None
    view_count: int
    like_count: int
    created_at: datetime
    updated_at: datetime


# --- Blog reactions ------------------------------------------------------


class BlogReactionCreate(CamelModel):
    post_id: UUID
    reaction_type: ReactionType
    user_name: str | None = Field(default=None, max_length=100)
    user_email: EmailStr | None = None
    comment: str | None = None

    @model_validator(mode="after")
    def validate_comment(self) -> Self:
        if self.reaction_type == ReactionType.COMMENT.value:
            if not (self.user_name and self.user_name.strip()):
                raise ValueError("userName is required for comments")
            if not self.user_email:
                raise ValueError("userEmail is required for comments")
            if not (self.comment and self.comment.strip()):
                raise ValueError("comment cannot be empty")
            self.user_name = self.user_name.strip()
            self.comment = self.comment.strip()
        return self


class BlogReactionRead(CamelModel):
    id: UUID
    post_id: UUID
    reaction_type: str
    user_name: str | None
    comment: str | None
    created_at: datetime


# --- Case studies --------------------------------------------------------


class CaseStudyCreate(CamelModel):
    title: NonEmptyStr = Field(max_length=300)
    slug: NonEmptyStr = Field(max_length=300, pattern=SLUG_PATTERN)
    client: NonEmptyStr = Field(max_length=200)
    industry: NonEmptyStr = Field(max_length=100)
    timeline: NonEmptyStr = Field(max_length=100)
    team_size: NonEmptyStr = Field(max_length=100)
    challenge: NonEmptyStr
    solution: NonEmptyStr
    hero_image: Url
    live_url: OptionalUrl = None
    service_id: UUID | None = None
    technologies: list[str] = Field(default_factory=list)
    results: list[str] = Field(default_factory=list)
    images: list[Url] = Field(default_factory=list)


class CaseStudyUpdate(UpdateModel):
    nullable_fields = frozenset({"live_url", "service_id"})

    title: NonEmptyStr | None = Field(default=None, max_length=300)
    slug: NonEmptyStr | None = Field(default=None, max_length=300, pattern=SLUG_PATTERN)
    client: NonEmptyStr | None = Field(default=None, max_length=200)
    industry: NonEmptyStr | None = Field(default=None, max_length=100)
    timeline: NonEmptyStr | None = Field(default=None, max_length=100)
    team_size: NonEmptyStr | None = Field(default=None, max_length=100)
    challenge: NonEmptyStr | None = None
    solution: NonEmptyStr | None = None
    hero_image: Url | None = None
    live_url: OptionalUrl = None
    service_id: UUID | None = None
    technologies: list[str] | None = None
    results: list[str] | None = None
    images: list[Url] | None = None


class CaseStudyRead(CamelModel):
    id: UUID
    title: str
    slug: str
    client: str
    industry: str
    timeline: str
    team_size: str
    challenge: str
    solution: str
    hero_image: str
    live_url: str | None
    service_id: UUID | None
    technologies: list[str]
    results: list[str]
    images: list[str]
    created_at: datetime
    updated_at: datetime
