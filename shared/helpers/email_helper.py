import html
import logging
from typing import Optional

from ..utils.email_client import EmailClient
from ..core.config import settings

logger = logging.getLogger(__name__)

GUEST_INVITATION_TEMPLATE = """
<p>Hi {guest_name},</p>
<p>You are invited to <strong>{title}</strong>.</p>
<ul>
  <li>Date: {date}</li>
  <li>Time: {time}</li>
  <li>Location: {location}</li>
</ul>
<p>{note}</p>
<p>See you there!</p>
"""

GUEST_INVITATION_TEXT = (
    "Hi {guest_name},\n\n"
    "You are invited to {title}.\n"
    "Date: {date}\nTime: {time}\nLocation: {location}\n\n"
    "{note}\n"
)


class EmailHelper:
    """Builds and sends the service's transactional emails through EmailClient."""

    def __init__(self, mailer: Optional[EmailClient] = None):
        self.mailer = mailer
        if self.mailer is None and settings.SMTP_HOST:
            self.mailer = EmailClient(
                smtp_host=settings.SMTP_HOST,
                smtp_port=settings.SMTP_PORT,
                username=settings.SMTP_USERNAME,
                password=settings.SMTP_PASSWORD,
                use_ssl=settings.SMTP_USE_SSL,
            )

    @property
    def enabled(self) -> bool:
        return self.mailer is not None

    def send_guest_invitation(self, recipient: str, guest_name: Optional[str], event: dict,
                              note: Optional[str] = None) -> bool:
        if not self.enabled:
            logger.info("SMTP not configured, skipping invitation to %s", recipient)
            return False

        context = {
            "guest_name": guest_name or "Guest",
            "title": event.get("title") or "our event",
            "date": event.get("date") or "TBA",
            "time": event.get("time") or "TBA",
            "location": event.get("location") or "TBA",
            "note": note or "",
        }
        html_body = GUEST_INVITATION_TEMPLATE.format(
            **{k: html.escape(str(v)) for k, v in context.items()})
        text_body = GUEST_INVITATION_TEXT.format(**context)

        return self.mailer.send_email(
            sender=settings.EMAIL_SENDER,
            recipients=[recipient],
            subject=f"You're invited: {context['title']}",
            text_body=text_body,
            html_body=html_body,
        )
