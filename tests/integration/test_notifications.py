"""Tests for the progress email dispatch endpoint."""

from unittest.mock import patch

import pytest
from httpx import AsyncClient

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]

EMAIL_DATA = {
    "to_email": "owner@acme.example",
    "client_name": "Acme Corp",
    "project_title": "Storefront",
    "progress_percentage": "50",
    "progress_description": "Backend complete",
    "client_project_link": "http://test/client-project/abc",
    "estimated_delivery_days": "30",
    "project_health": "green",
    "delivery_status": "pending",
    "payment_status": "pending",
}


async def test_dispatch_in_dev_mode(admin_client: AsyncClient) -> None:
    response = await admin_client.post("/api/project-notifications", json=EMAIL_DATA)

    assert response.status_code == 200
    assert response.json() == {"sent": True}


async def test_delivery_failure_is_reported(admin_client: AsyncClient) -> None:
    with patch(
        "src.lovgol.api.routes.notifications.send_project_update_email", return_value=False
    ) as mock_send:
        response = await admin_client.post("/api/project-notifications", json=EMAIL_DATA)

    assert response.status_code == 200
    assert response.json() == {"sent": False}
    sent_payload = mock_send.call_args.args[0]
    assert sent_payload.to_email == "owner@acme.example"


async def test_payload_from_project_update_is_accepted(admin_client: AsyncClient) -> None:
    response = await admin_client.post(
        "/api/projects",
        json={
            "title": "Storefront",
            "clientName": "Acme Corp",
            "clientEmail": "owner@acme.example",
            "description": "Rebuild",
            "category": "web",
            "technology": "Next.js",
        },
    )
    project_id = response.json()["id"]
    response = await admin_client.put(
        f"/api/projects/{project_id}", json={"progressPercentage": "20"}
    )
    email_data = response.json()["emailData"]

    with patch(
        "src.lovgol.api.routes.notifications.send_project_update_email", return_value=True
    ) as mock_send:
        response = await admin_client.post("/api/project-notifications", json=email_data)

    assert response.json() == {"sent": True}
    assert mock_send.call_args.args[0].progress_percentage == "20"


async def test_requires_admin(client: AsyncClient) -> None:
    response = await client.post("/api/project-notifications", json=EMAIL_DATA)

    assert response.status_code == 401


async def test_incomplete_payload_is_rejected(admin_client: AsyncClient) -> None:
    response = await admin_client.post(
        "/api/project-notifications", json={"to_email": "owner@acme.example"}
    )

    assert response.status_code == 422
