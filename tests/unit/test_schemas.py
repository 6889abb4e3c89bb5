"""Tests for request schema validation at the API boundary."""

import pytest
from pydantic import ValidationError

from src.lovgol.schemas.content import BlogPostCreate, BlogReactionCreate, ServicePreviewCreate
from src.lovgol.schemas.project import ProjectCreate, ProjectUpdate

pytestmark = pytest.mark.unit

VALID_PROJECT = {
    "title": "Storefront",
    "clientName": "Acme Corp",
    "clientEmail": "owner@acme.example",
    "description": "Headless commerce build",
    "category": "web",
    "technology": "Next.js",
}


class TestProjectCreate:
    def test_accepts_camel_case(self):
        data = ProjectCreate.model_validate(VALID_PROJECT)
        assert data.client_name == "Acme Corp"
        assert data.progress_percentage is None
        assert data.milestones == []

    @pytest.mark.parametrize("missing", sorted(VALID_PROJECT))
    def test_required_fields(self, missing):
        payload = {k: v for k, v in VALID_PROJECT.items() if k != missing}
        with pytest.raises(ValidationError):
            ProjectCreate.model_validate(payload)

    def test_rejects_bad_email(self):
        with pytest.raises(ValidationError):
            ProjectCreate.model_validate({**VALID_PROJECT, "clientEmail": "not-an-email"})

    def test_rejects_blank_title(self):
        with pytest.raises(ValidationError):
            ProjectCreate.model_validate({**VALID_PROJECT, "title": "   "})

    @pytest.mark.parametrize("value", ["101", "-1", "abc", "12.5", ""])
    def test_rejects_out_of_range_progress(self, value):
        with pytest.raises(ValidationError):
            ProjectCreate.model_validate({**VALID_PROJECT, "progressPercentage": value})

    def test_integer_progress_is_stored_as_string(self):
        data = ProjectCreate.model_validate({**VALID_PROJECT, "progressPercentage": 40})
        assert data.progress_percentage == "40"

    @pytest.mark.parametrize(
        ("field", "value"),
        [("progressPercentage", "00050"), ("estimatedDeliveryDays", "12345678901")],
    )
    def test_rejects_values_wider_than_column(self, field, value):
        with pytest.raises(ValidationError, match="at most"):
            ProjectCreate.model_validate({**VALID_PROJECT, field: value})

    def test_padded_progress_within_width_is_kept(self):
        data = ProjectCreate.model_validate({**VALID_PROJECT, "progressPercentage": "050"})
        assert data.progress_percentage == "050"

    def test_rejects_unknown_status(self):
        with pytest.raises(ValidationError):
            ProjectCreate.model_validate({**VALID_PROJECT, "projectHealth": "purple"})

    def test_log_entry_enum_validation(self):
        with pytest.raises(ValidationError):
            ProjectCreate.model_validate(
                {**VALID_PROJECT, "milestones": [{"title": "Design", "status": "done"}]}
            )


class TestProjectUpdate:
    def test_only_supplied_fields_are_changes(self):
        update = ProjectUpdate.model_validate({"clientName": "New"})
        assert update.changes() == {"client_name": "New"}

    def test_empty_update(self):
        assert ProjectUpdate.model_validate({}).changes() == {}

    def test_null_rejected_for_required_column(self):
        with pytest.raises(ValidationError, match="title cannot be null"):
            ProjectUpdate.model_validate({"title": None})

    def test_progress_description_may_be_cleared(self):
        update = ProjectUpdate.model_validate({"progressDescription": None})
        assert update.changes() == {"progress_description": None}

    def test_legacy_current_progress(self):
        update = ProjectUpdate.model_validate({"currentProgress": "60"})
        assert update.changes() == {"progress_percentage": "60"}

    def test_canonical_key_wins_over_legacy(self):
        update = ProjectUpdate.model_validate({"currentProgress": "60", "progressPercentage": "70"})
        assert update.progress_percentage == "70"

    def test_ignores_client_computed_flags(self):
        """Older admin UIs post shouldSendEmail/emailData back; they carry no weight."""
        update = ProjectUpdate.model_validate(
            {"progressPercentage": "10", "shouldSendEmail": True, "emailData": {"x": 1}}
        )
        assert update.changes() == {"progress_percentage": "10"}


class TestContentSchemas:
    def test_service_preview_tags_are_cleaned(self):
        preview = ServicePreviewCreate.model_validate(
            {
                "title": "Web apps",
                "description": "SPAs",
                "category": "web",
                "technology": "React",
                "tags": [" react ", "", "react", "spa"],
            }
        )
        assert preview.tags == ["react", "spa"]

    def test_service_preview_category_enum(self):
        with pytest.raises(ValidationError):
            ServicePreviewCreate.model_validate(
                {"title": "x", "description": "y", "category": "games", "technology": "z"}
            )

    @pytest.mark.parametrize("slug", ["Has Caps", "trailing-", "double--dash", "spaces here"])
    def test_blog_slug_format(self, slug):
        with pytest.raises(ValidationError):
            BlogPostCreate.model_validate(
                {
                    "title": "t",
                    "slug": slug,
                    "excerpt": "e",
                    "content": "c",
                    "category": "news",
                }
            )

    def test_blank_featured_image_becomes_none(self):
        post = BlogPostCreate.model_validate(
            {
                "title": "t",
                "slug": "hello-world",
                "excerpt": "e",
                "content": "c",
                "category": "news",
                "featuredImage": "",
            }
        )
        assert post.featured_image is None

    def test_comment_reaction_requires_identity(self):
        post_id = "7d0f2a52-4c1e-4d55-9d6e-1c2b3a4d5e6f"
        with pytest.raises(ValidationError, match="userName is required"):
            BlogReactionCreate.model_validate(
                {"postId": post_id, "reactionType": "comment", "comment": "Nice"}
            )
        with pytest.raises(ValidationError, match="comment cannot be empty"):
            BlogReactionCreate.model_validate(
                {
                    "postId": post_id,
                    "reactionType": "comment",
                    "userName": "Ana",
                    "userEmail": "ana@example.com",
                    "comment": "  ",
                }
            )

    def test_like_reaction_needs_no_identity(self):
        reaction = BlogReactionCreate.model_validate(
            {"postId": "7d0f2a52-4c1e-4d55-9d6e-1c2b3a4d5e6f", "reactionType": "like"}
        )
        assert reaction.reaction_type == "like"
