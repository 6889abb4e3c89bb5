"""Decide whether a project update warrants a progress email to the client.

Pure computation over already-loaded records: no I/O, no exceptions.
"""

from dataclasses import dataclass

from src.lovgol.schemas.project import ProjectRead, ProjectUpdate, ProjectUpdateEmail

NO_DESCRIPTION_FALLBACK = "No additional details provided."
CLIENT_PROJECT_PATH = "/client-project/{token}"


@dataclass(frozen=True)
class ProgressNotification:
    should_send_email: bool
    email_data: ProjectUpdateEmail | None = None


NO_NOTIFICATION = ProgressNotification(should_send_email=False)


def client_project_link(base_url: str, token: str) -> str:
    return base_url.rstrip("/") + CLIENT_PROJECT_PATH.format(token=token)


def decide_progress_notification(
    before: ProjectRead,
    update: ProjectUpdate,
    after: ProjectRead,
    base_url: str,
) -> ProgressNotification:
    """Notify only when the update supplies a different ``progressPercentage``.

    Values are compared as strings ("50" and "050" differ). Changes to any
    other field, progress description included, never notify on their own.
    """
    if "progress_percentage" not in update.model_fields_set:
        return NO_NOTIFICATION
    new_value = update.progress_percentage
    if new_value is None or new_value == before.progress_percentage:
        return NO_NOTIFICATION

    description = after.progress_description
    if not description or not description.strip():
        description = NO_DESCRIPTION_FALLBACK

    email_data = ProjectUpdateEmail(
        to_email=after.client_email,
        client_name=after.client_name,
        project_title=after.title,
        progress_percentage=update.progress_percentage,
        progress_description=description,
        client_project_link=client_project_link(base_url, after.client_access_token),
        estimated_delivery_days=after.estimated_delivery_days,
        project_health=after.project_health,
        delivery_status=after.delivery_status,
        payment_status=after.payment_status,
    )
    return ProgressNotification(should_send_email=True, email_data=email_data)
