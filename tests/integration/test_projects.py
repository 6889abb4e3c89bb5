"""Tests for admin project management and progress notification decisions."""

from datetime import datetime
from uuid import uuid4

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from tests.factories import ProjectFactory

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


def project_payload(**overrides) -> dict:
    payload = {
        "title": "Storefront",
        "clientName": "Acme Corp",
        "clientEmail": "owner@acme.example",
        "description": "Headless storefront rebuild",
        "category": "web",
        "technology": "Next.js",
    }
    payload.update(overrides)
    return payload


async def create_project(client: AsyncClient, **overrides) -> dict:
    response = await client.post("/api/projects", json=project_payload(**overrides))
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateProject:
    async def test_applies_status_defaults(self, admin_client: AsyncClient) -> None:
        data = await create_project(admin_client)

        assert data["progressPercentage"] == "0"
        assert data["estimatedDeliveryDays"] == "30"
        assert data["deliveryStatus"] == "pending"
        assert data["paymentStatus"] == "pending"
        assert data["projectHealth"] == "green"
        assert data["progressDescription"] is None
        assert data["milestones"] == []
        assert data["clientAccessToken"]

    async def test_tokens_are_unique(self, admin_client: AsyncClient) -> None:
        first = await create_project(admin_client)
        second = await create_project(admin_client)

        assert first["clientAccessToken"] != second["clientAccessToken"]
        assert first["id"] != second["id"]

    async def test_assigns_ids_to_log_entries(self, admin_client: AsyncClient) -> None:
        data = await create_project(
            admin_client,
            milestones=[
                {"title": "Design", "status": "completed"},
                {"id": "m-keep", "title": "Build"},
            ],
            teamUpdates=[{"date": "2026-01-05", "text": "Kickoff done", "author": "Sam"}],
        )

        milestone_ids = [m["id"] for m in data["milestones"]]
        assert milestone_ids[0]
        assert milestone_ids[1] == "m-keep"
        assert data["teamUpdates"][0]["id"]

    async def test_missing_required_field_is_rejected(self, admin_client: AsyncClient) -> None:
        payload = project_payload()
        del payload["clientEmail"]

        response = await admin_client.post("/api/projects", json=payload)

        assert response.status_code == 422

    async def test_progress_out_of_range_is_rejected(self, admin_client: AsyncClient) -> None:
        response = await admin_client.post(
            "/api/projects", json=project_payload(progressPercentage="150")
        )

        assert response.status_code == 422

    @pytest.mark.parametrize(
        ("field", "value"),
        [("progressPercentage", "00050"), ("estimatedDeliveryDays", "123456789012345")],
    )
    async def test_overlong_numeric_text_is_rejected(
        self, admin_client: AsyncClient, field: str, value: str
    ) -> None:
        response = await admin_client.post("/api/projects", json=project_payload(**{field: value}))

        assert response.status_code == 422

        response = await admin_client.get("/api/projects")
        assert response.json() == []

    async def test_requires_admin_session(self, client: AsyncClient) -> None:
        response = await client.post("/api/projects", json=project_payload())

        assert response.status_code == 401
        assert response.json()["detail"] == "Unauthorized"


class TestReadProjects:
    async def test_get_by_id(self, admin_client: AsyncClient) -> None:
        created = await create_project(admin_client)

        response = await admin_client.get(f"/api/projects/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    async def test_list_newest_first(
        self, admin_client: AsyncClient, db_session: AsyncSession
    ) -> None:
        older = ProjectFactory.build()
        newer = ProjectFactory.build()
        newer.created_at = older.created_at.replace(year=older.created_at.year + 1)
        db_session.add_all([older, newer])
        await db_session.commit()

        response = await admin_client.get("/api/projects")

        assert response.status_code == 200
        ids = [p["id"] for p in response.json()]
        assert ids == [str(newer.id), str(older.id)]

    async def test_unknown_id_is_404(self, admin_client: AsyncClient) -> None:
        response = await admin_client.get(f"/api/projects/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["detail"] == "Project not found"


class TestUpdateProject:
    async def test_progress_change_prepares_email(self, admin_client: AsyncClient) -> None:
        created = await create_project(admin_client)

        response = await admin_client.put(
            f"/api/projects/{created['id']}",
            json={"progressPercentage": "50", "progressDescription": "Backend complete"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["progressPercentage"] == "50"
        assert data["shouldSendEmail"] is True
        email = data["emailData"]
        assert email["to_email"] == "owner@acme.example"
        assert email["client_name"] == "Acme Corp"
        assert email["project_title"] == "Storefront"
        assert email["progress_percentage"] == "50"
        assert email["progress_description"] == "Backend complete"
        assert email["client_project_link"] == (
            f"http://test/client-project/{created['clientAccessToken']}"
        )

    async def test_other_field_change_sends_nothing(self, admin_client: AsyncClient) -> None:
        created = await create_project(admin_client)

        response = await admin_client.put(
            f"/api/projects/{created['id']}", json={"clientName": "Acme Holdings"}
        )

        data = response.json()
        assert data["clientName"] == "Acme Holdings"
        assert data["shouldSendEmail"] is False
        assert data["emailData"] is None

    async def test_same_progress_sends_nothing(self, admin_client: AsyncClient) -> None:
        created = await create_project(admin_client, progressPercentage="40")

        response = await admin_client.put(
            f"/api/projects/{created['id']}", json={"progressPercentage": "40"}
        )

        assert response.json()["shouldSendEmail"] is False

    async def test_blank_description_uses_fallback(self, admin_client: AsyncClient) -> None:
        created = await create_project(admin_client)

        response = await admin_client.put(
            f"/api/projects/{created['id']}",
            json={"progressPercentage": "10", "progressDescription": "   "},
        )

        email = response.json()["emailData"]
        assert email["progress_description"] == "No additional details provided."

    async def test_legacy_current_progress_key(self, admin_client: AsyncClient) -> None:
        created = await create_project(admin_client)

        response = await admin_client.put(
            f"/api/projects/{created['id']}", json={"currentProgress": 75}
        )

        data = response.json()
        assert data["progressPercentage"] == "75"
        assert data["shouldSendEmail"] is True

    async def test_empty_update_only_touches_timestamp(self, admin_client: AsyncClient) -> None:
        created = await create_project(admin_client)

        response = await admin_client.put(f"/api/projects/{created['id']}", json={})

        data = response.json()
        assert data.pop("shouldSendEmail") is False
        assert data.pop("emailData") is None
        assert data.keys() == created.keys()
        assert {key for key in created if created[key] != data[key]} == {"updatedAt"}
        assert datetime.fromisoformat(data["updatedAt"]) > datetime.fromisoformat(
            created["updatedAt"]
        )

    async def test_token_is_immutable(self, admin_client: AsyncClient) -> None:
        created = await create_project(admin_client)

        response = await admin_client.put(
            f"/api/projects/{created['id']}", json={"clientAccessToken": "chosen-token"}
        )

        assert response.json()["clientAccessToken"] == created["clientAccessToken"]

    async def test_log_collections_are_replaced(self, admin_client: AsyncClient) -> None:
        created = await create_project(
            admin_client,
            nextSteps=[{"task": "Write copy"}, {"task": "Pick fonts"}],
        )

        response = await admin_client.put(
            f"/api/projects/{created['id']}",
            json={"nextSteps": [{"task": "Launch", "priority": "high"}]},
        )

        steps = response.json()["nextSteps"]
        assert [s["task"] for s in steps] == ["Launch"]
        assert steps[0]["priority"] == "high"
        assert steps[0]["id"]

    async def test_null_for_required_field_is_rejected(self, admin_client: AsyncClient) -> None:
        created = await create_project(admin_client)

        response = await admin_client.put(f"/api/projects/{created['id']}", json={"title": None})

        assert response.status_code == 422

    async def test_unknown_project_is_404(self, admin_client: AsyncClient) -> None:
        response = await admin_client.put(
            f"/api/projects/{uuid4()}", json={"progressPercentage": "10"}
        )

        assert response.status_code == 404


class TestDeleteProject:
    async def test_delete_then_missing(self, admin_client: AsyncClient) -> None:
        created = await create_project(admin_client)

        response = await admin_client.delete(f"/api/projects/{created['id']}")
        assert response.status_code == 204

        response = await admin_client.get(f"/api/projects/{created['id']}")
        assert response.status_code == 404

    async def test_delete_unknown_is_404(self, admin_client: AsyncClient) -> None:
        response = await admin_client.delete(f"/api/projects/{uuid4()}")

        assert response.status_code == 404
