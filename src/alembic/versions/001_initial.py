"""Initial schema: admins, projects, site content and form submissions

Revision ID: 001
Revises:
Create Date: 2025-06-02 00:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
import sqlmodel

from alembic import op

revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    ]


def upgrade() -> None:
    # 1. Admin accounts
    op.create_table(
        "admins",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("username", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column("hashed_password", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_admins_username", "admins", ["username"], unique=True)

    # 2. Client projects (log collections embedded as JSON)
    op.create_table(
        "projects",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "client_access_token", sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False
        ),
        sa.Column("title", sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column("client_name", sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column("client_email", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column("description", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("category", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column("technology", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column(
            "progress_percentage", sqlmodel.sql.sqltypes.AutoString(length=3), nullable=False
        ),
        sa.Column("progress_description", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column(
            "estimated_delivery_days", sqlmodel.sql.sqltypes.AutoString(length=10), nullable=False
        ),
        sa.Column("delivery_status", sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column("payment_status", sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column("project_health", sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column("milestones", sa.JSON(), nullable=False),
        sa.Column("team_updates", sa.JSON(), nullable=False),
        sa.Column("client_feedback", sa.JSON(), nullable=False),
        sa.Column("next_steps", sa.JSON(), nullable=False),
        sa.Column("risk_issues", sa.JSON(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_projects_client_access_token", "projects", ["client_access_token"], unique=True
    )
    op.create_index("ix_projects_created_at", "projects", ["created_at"], unique=False)

    # 3. Service previews
    op.create_table(
        "services_previews",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("title", sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column("description", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("category", sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.Column("technology", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column("tags", sa.JSON(), nullable=False),
        sa.Column("image_url", sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_services_previews_category", "services_previews", ["category"], unique=False
    )
    op.create_index(
        "ix_services_previews_technology", "services_previews", ["technology"], unique=False
    )

    # 4. Blog posts and reactions
    op.create_table(
        "blog_posts",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("title", sqlmodel.sql.sqltypes.AutoString(length=300), nullable=False),
        sa.Column("slug", sqlmodel.sql.sqltypes.AutoString(length=300), nullable=False),
        sa.Column("excerpt", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("content", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("featured_image", sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        sa.Column("category", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column("tags", sa.JSON(), nullable=False),
        sa.Column("is_published", sa.Boolean(), nullable=False),
        sa.Column("published_at", sa.DateTime(), nullable=True),
        sa.Column("view_count", sa.Integer(), nullable=False),
        sa.Column("like_count", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_blog_posts_slug", "blog_posts", ["slug"], unique=True)
    op.create_index("ix_blog_posts_is_published", "blog_posts", ["is_published"], unique=False)

    op.create_table(
        "blog_reactions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("post_id", sa.Uuid(), nullable=False),
        sa.Column("reaction_type", sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column("user_name", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
        sa.Column("user_email", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column("comment", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["post_id"], ["blog_posts.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_blog_reactions_post_id", "blog_reactions", ["post_id"], unique=False)

    # 5. Case studies
    op.create_table(
        "case_studies",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("title", sqlmodel.sql.sqltypes.AutoString(length=300), nullable=False),
        sa.Column("slug", sqlmodel.sql.sqltypes.AutoString(length=300), nullable=False),
        sa.Column("client", sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column("industry", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column("timeline", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column("team_size", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column("challenge", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("solution", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("hero_image", sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=False),
        sa.Column("live_url", sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        sa.Column("service_id", sa.Uuid(), nullable=True),
        sa.Column("technologies", sa.JSON(), nullable=False),
        sa.Column("results", sa.JSON(), nullable=False),
        sa.Column("images", sa.JSON(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["service_id"], ["services_previews.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_case_studies_slug", "case_studies", ["slug"], unique=True)

    # 6. Form submissions
    op.create_table(
        "contact_submissions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column("email", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column("service", sqlmodel.sql.sqltypes.AutoString(length=200), nullable=True),
        sa.Column("budget", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
        sa.Column("message", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("submitted_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_contact_submissions_submitted_at", "contact_submissions", ["submitted_at"]
    )

    op.create_table(
        "inquiry_submissions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column("email", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column("service", sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column("details", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("submitted_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_inquiry_submissions_submitted_at", "inquiry_submissions", ["submitted_at"]
    )


def downgrade() -> None:
    op.drop_index("ix_inquiry_submissions_submitted_at", table_name="inquiry_submissions")
    op.drop_table("inquiry_submissions")
    op.drop_index("ix_contact_submissions_submitted_at", table_name="contact_submissions")
    op.drop_table("contact_submissions")
    op.drop_index("ix_case_studies_slug", table_name="case_studies")
    op.drop_table("case_studies")
    op.drop_index("ix_blog_reactions_post_id", table_name="blog_reactions")
    op.drop_table("blog_reactions")
    op.drop_index("ix_blog_posts_is_published", table_name="blog_posts")
    op.drop_index("ix_blog_posts_slug", table_name="blog_posts")
    op.drop_table("blog_posts")
    op.drop_index("ix_services_previews_technology", table_name="services_previews")
    op.drop_index("ix_services_previews_category", table_name="services_previews")
    op.drop_table("services_previews")
    op.drop_index("ix_projects_created_at", table_name="projects")
    op.drop_index("ix_projects_client_access_token", table_name="projects")
    op.drop_table("projects")
    op.drop_index("ix_admins_username", table_name="admins")
    op.drop_table("admins")
