"""Marketing content models - service previews, blog, case studies."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import JSON
from sqlmodel import Field, SQLModel

from src.lovgol.models.base import utc_now


class ServicePreview(SQLModel, table=True):
    __tablename__ = "services_previews"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=200)
    description: str
    category: str = Field(max_length=50, index=True)
    technology: str = Field(max_length=100, index=True)
    tags: list[str] = Field(default_factory=list, sa_type=JSON)
    image_url: str | None = Field(default=None, max_length=1000)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class BlogPost(SQLModel, table=True):
    __tablename__ = "blog_posts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=300)
    slug: str = Field(max_length=300, unique=True, index=True)
    excerpt: str
    content: str
    featured_image: str | None = Field(default=None, max_length=1000)
    category: str = Field(max_length=100)
    tags: list[str] = Field(default_factory=list, sa_type=JSON)
    is_published: bool = Field(default=False, index=True)
    published_at: datetime | None = Field(default=None)
    view_count: int = Field(default=0)
    like_count: int = Field(default=0)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class BlogReaction(SQLModel, table=True):
    __tablename__ = "blog_reactions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    post_id: UUID = Field(foreign_key="blog_posts.id", index=True)
    reaction_type: str = Field(max_length=20)
    user_name: str | None = Field(default=None, max_length=100)
    user_email: str | None = Field(default=None, max_length=255)
    comment: str | None = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now)


class CaseStudy(SQLModel, table=True):
    __tablename__ = "case_studies"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=300)
    slug: str = Field(max_length=300, unique=True, index=True)
    client: str = Field(max_length=200)
    industry: str = Field(max_length=100)
    timeline: str = Field(max_length=100)
    team_size: str = Field(max_length=100)
    challenge: str
    solution: str
    hero_image: str = Field(max_length=1000)
    live_url: str | None = Field(default=None, max_length=1000)
    service_id: UUID | None = Field(default=None, foreign_key="services_previews.id")
    technologies: list[str] = Field(default_factory=list, sa_type=JSON)
    results: list[str] = Field(default_factory=list, sa_type=JSON)
    images: list[str] = Field(default_factory=list, sa_type=JSON)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
