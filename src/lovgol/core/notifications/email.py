"""Email client using Resend API."""

import html
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError

import resend

from src.lovgol.core.config import get_settings
from src.lovgol.core.logging import get_logger
from src.lovgol.schemas.project import ProjectUpdateEmail

logger = get_logger(__name__)

# Thread pool for email sending with timeout support
_email_executor = ThreadPoolExecutor(max_workers=4, thread_name_prefix="email_sender")

_BODY_STYLE = (
    "font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; "
    "line-height: 1.6; color: #1f2937; max-width: 600px; margin: 0 auto; padding: 20px;"
)
_BUTTON_STYLE = (
    "background-color: #7c3aed; color: white; padding: 12px 24px; "
    "text-decoration: none; border-radius: 6px; display: inline-block; font-weight: 500;"
)
_BAR_TRACK_STYLE = "background-color: #e5e7eb; border-radius: 9999px; height: 12px; width: 100%;"
_MUTED_STYLE = "color: #6b7280; font-size: 14px;"

_HEALTH_COLORS = {"green": "#16a34a", "yellow": "#ca8a04", "red": "#dc2626"}


def send_project_update_email(email_data: ProjectUpdateEmail) -> bool:
    """Send a progress update email to the client.

    Args:
        email_data: Payload produced by the progress notification decision.

    Returns:
        True if email was sent (or logged in dev mode), False on error
    """
    settings = get_settings()

    if not settings.resend_api_key:
        # Dev mode: log email content instead of sending
        logger.warning(
            "RESEND_API_KEY not set - email not sent",
            to=email_data.to_email,
            email_type="project_update",
            progress=email_data.progress_percentage,
        )
        return True

    resend.api_key = settings.resend_api_key

    def _send() -> None:
        resend.Emails.send(
            {
                "from": settings.email_from,
                "to": [email_data.to_email],
                "subject": f"Project update: {email_data.project_title} is "
                f"{email_data.progress_percentage}% complete",
                "html": render_project_update_html(email_data, settings.app_name),
            }
        )

    try:
        future = _email_executor.submit(_send)
        future.result(timeout=settings.email_send_timeout_seconds)
        logger.info("Project update email sent", to=email_data.to_email)
        return True
    except FuturesTimeoutError:
        logger.error(
            "Email send timed out",
            to=email_data.to_email,
            timeout=settings.email_send_timeout_seconds,
        )
        return False
    except Exception as e:
        logger.error("Failed to send project update email", to=email_data.to_email, error=str(e))
        return False


def render_project_update_html(email_data: ProjectUpdateEmail, app_name: str) -> str:
    """Generate HTML content for the progress update email."""
    client_name = html.escape(email_data.client_name)
    title = html.escape(email_data.project_title)
    description = html.escape(email_data.progress_description)
    link = html.escape(email_data.client_project_link, quote=True)
    health = html.escape(email_data.project_health)
    health_color = _HEALTH_COLORS.get(email_data.project_health, "#6b7280")
    width = _bar_width(email_data.progress_percentage)
    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
</head>
<body style="{_BODY_STYLE}">
    <h1 style="color: #7c3aed; margin-bottom: 24px;">{title}</h1>
    <p>Hi {client_name},</p>
    <p>Your project has moved forward. It is now
    <strong>{html.escape(email_data.progress_percentage)}%</strong> complete.</p>
    <div style="{_BAR_TRACK_STYLE}">
        <div style="background-color: #7c3aed; border-radius: 9999px; height: 12px; width: {width}%;"></div>
    </div>
    <p style="margin-top: 24px;">{description}</p>
    <table style="margin: 24px 0; border-collapse: collapse;">
        <tr><td style="{_MUTED_STYLE} padding-right: 16px;">Project health</td>
            <td style="color: {health_color}; font-weight: 600;">{health}</td></tr>
        <tr><td style="{_MUTED_STYLE} padding-right: 16px;">Estimated delivery</td>
            <td>{html.escape(email_data.estimated_delivery_days)} days</td></tr>
        <tr><td style="{_MUTED_STYLE} padding-right: 16px;">Delivery status</td>
            <td>{html.escape(email_data.delivery_status)}</td></tr>
        <tr><td style="{_MUTED_STYLE} padding-right: 16px;">Payment status</td>
            <td>{html.escape(email_data.payment_status)}</td></tr>
    </table>
    <p style="margin: 32px 0;">
        <a href="{link}" style="{_BUTTON_STYLE}">View project status</a>
    </p>
    <p style="margin-top: 32px;">
        Best regards,<br>
        The {html.escape(app_name)} Team
    </p>
</body>
</html>"""


def _bar_width(progress: str) -> int:
    """Progress bar width in percent; dispatched payloads are not re-validated."""
    try:
        return max(0, min(100, int(progress)))
    except ValueError:
        return 0
