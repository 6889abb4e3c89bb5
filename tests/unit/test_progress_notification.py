"""Tests for the progress-update notification decision."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from src.lovgol.schemas.project import ProjectRead, ProjectUpdate
from src.lovgol.services.progress_notification import (
    NO_DESCRIPTION_FALLBACK,
    client_project_link,
    decide_progress_notification,
)
from tests.factories import ProjectFactory

pytestmark = pytest.mark.unit

BASE_URL = "https://lovgol.test/"

percentages = st.integers(min_value=0, max_value=100).map(str)


def _snapshot(**overrides) -> ProjectRead:
    return ProjectRead.model_validate(ProjectFactory.build(**overrides))


def _after(before: ProjectRead, update: ProjectUpdate) -> ProjectRead:
    """Post-update record the way the store would produce it."""
    return before.model_copy(update=update.changes())


class TestTrigger:
    def test_progress_change_triggers(self):
        before = _snapshot(progress_percentage="0")
        update = ProjectUpdate.model_validate(
            {"progressPercentage": "50", "progressDescription": "Backend complete"}
        )

        result = decide_progress_notification(before, update, _after(before, update), BASE_URL)

        assert result.should_send_email is True
        assert result.email_data is not None
        assert result.email_data.progress_percentage == "50"
        assert result.email_data.progress_description == "Backend complete"

    def test_same_progress_does_not_trigger(self):
        before = _snapshot(progress_percentage="40")
        update = ProjectUpdate.model_validate({"progressPercentage": "40"})

        result = decide_progress_notification(before, update, _after(before, update), BASE_URL)

        assert result.should_send_email is False
        assert result.email_data is None

    def test_omitted_progress_never_triggers(self):
        """Only an explicit progressPercentage can notify."""
        before = _snapshot(progress_percentage="10")
        update = ProjectUpdate.model_validate(
            {
                "clientName": "New Name",
                "progressDescription": "Rewritten",
                "projectHealth": "red",
                "deliveryStatus": "completed",
            }
        )

        result = decide_progress_notification(before, update, _after(before, update), BASE_URL)

        assert result.should_send_email is False

    def test_string_comparison_without_normalization(self):
        before = _snapshot(progress_percentage="5")
        update = ProjectUpdate.model_validate({"progressPercentage": "05"})

        result = decide_progress_notification(before, update, _after(before, update), BASE_URL)

        assert result.should_send_email is True
        assert result.email_data.progress_percentage == "05"

    def test_legacy_current_progress_key_triggers(self):
        before = _snapshot(progress_percentage="20")
        update = ProjectUpdate.model_validate({"currentProgress": "30"})

        result = decide_progress_notification(before, update, _after(before, update), BASE_URL)

        assert result.should_send_email is True
        assert result.email_data.progress_percentage == "30"

    @given(old=percentages, new=percentages)
    def test_flag_iff_value_differs(self, old: str, new: str):
        before = _snapshot(progress_percentage=old)
        update = ProjectUpdate.model_validate({"progressPercentage": new})

        result = decide_progress_notification(before, update, _after(before, update), BASE_URL)

        assert result.should_send_email is (old != new)
        if result.should_send_email:
            assert result.email_data.progress_percentage == new


class TestPayload:
    def test_payload_fields(self):
        before = _snapshot(
            progress_percentage="0",
            client_name="Acme Corp",
            client_email="owner@acme.example",
            title="Storefront",
            estimated_delivery_days="14",
            project_health="yellow",
            delivery_status="pending",
            payment_status="partial",
        )
        update = ProjectUpdate.model_validate({"progressPercentage": "75"})

        result = decide_progress_notification(before, update, _after(before, update), BASE_URL)
        data = result.email_data.model_dump()

        assert data == {
            "to_email": "owner@acme.example",
            "client_name": "Acme Corp",
            "project_title": "Storefront",
            "progress_percentage": "75",
            "progress_description": NO_DESCRIPTION_FALLBACK,
            "client_project_link": f"https://lovgol.test/client-project/{before.client_access_token}",
            "estimated_delivery_days": "14",
            "project_health": "yellow",
            "delivery_status": "pending",
            "payment_status": "partial",
        }

    def test_uses_post_update_values(self):
        before = _snapshot(progress_percentage="10", client_name="Old Name")
        update = ProjectUpdate.model_validate(
            {"progressPercentage": "20", "clientName": "New Name", "projectHealth": "red"}
        )

        result = decide_progress_notification(before, update, _after(before, update), BASE_URL)

        assert result.email_data.client_name == "New Name"
        assert result.email_data.project_health == "red"

    @pytest.mark.parametrize("description", [None, "", "   "])
    def test_blank_description_falls_back(self, description):
        before = _snapshot(progress_percentage="10", progress_description=description)
        update = ProjectUpdate.model_validate({"progressPercentage": "20"})

        result = decide_progress_notification(before, update, _after(before, update), BASE_URL)

        assert result.email_data.progress_description == NO_DESCRIPTION_FALLBACK

    def test_link_joins_without_double_slash(self):
        assert client_project_link("http://host:8000/", "tok") == "http://host:8000/client-project/tok"
        assert client_project_link("http://host:8000", "tok") == "http://host:8000/client-project/tok"
