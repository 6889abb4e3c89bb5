"""Progress email dispatch (admin only)."""

from fastapi import APIRouter
from starlette.concurrency import run_in_threadpool

from src.lovgol.api.dependencies import CurrentAdmin
from src.lovgol.core.notifications import send_project_update_email
from src.lovgol.schemas.project import NotificationDispatchResponse, ProjectUpdateEmail

router = APIRouter(prefix="/project-notifications", tags=["projects"])


@router.post(
    "",
    response_model=NotificationDispatchResponse,
    summary="Send progress email",
    description=(
        "Send the `emailData` returned by a project update to the client. "
        "`sent` is false when delivery failed; the project itself is already saved."
    ),
)
async def send_progress_notification(
    email_data: ProjectUpdateEmail,
    _admin: CurrentAdmin,
) -> NotificationDispatchResponse:
    sent = await run_in_threadpool(send_project_update_email, email_data)
    return NotificationDispatchResponse(sent=sent)
