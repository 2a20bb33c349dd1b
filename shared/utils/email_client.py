import logging
import smtplib
import time
from email.message import EmailMessage
from typing import List, Optional

logger = logging.getLogger(__name__)


class EmailClient:
    """SMTP sender for invitation emails; transient failures are retried."""

    def __init__(self, smtp_host: str, smtp_port: int, username: Optional[str],
                 password: Optional[str], use_ssl: bool = False,
                 max_retries: int = 3, retry_delay: float = 3):
        self.smtp_host = smtp_host
        self.smtp_port = smtp_port
        self.username = username
        self.password = password
        self.use_ssl = use_ssl
        self.max_retries = max_retries
        self.retry_delay = retry_delay

    def _open(self) -> smtplib.SMTP:
        if self.use_ssl:
            return smtplib.SMTP_SSL(self.smtp_host, self.smtp_port)
        server = smtplib.SMTP(self.smtp_host, self.smtp_port)
        server.starttls()
        return server

    def send_email(self, sender: str, recipients: List[str], subject: str,
                   text_body: str, html_body: Optional[str] = None) -> bool:
        msg = EmailMessage()
        msg["From"] = sender
        msg["To"] = ", ".join(recipients)
        msg["Subject"] = subject
        msg.set_content(text_body or "")
        if html_body:
            msg.add_alternative(html_body, subtype="html")

        for attempt in range(1, self.max_retries + 1):
            try:
                with self._open() as server:
                    if self.username:
                        server.login(self.username, self.password)
                    server.send_message(msg)
                logger.info("Email sent to %s", ", ".join(recipients))
                return True
            except smtplib.SMTPAuthenticationError:
                logger.error("SMTP authentication failed for %s", self.username)
                return False
            except (smtplib.SMTPException, OSError) as e:
                logger.warning("Email attempt %s/%s failed: %s", attempt, self.max_retries, e)
                if attempt < self.max_retries:
                    time.sleep(self.retry_delay)

        logger.error("Giving up on email to %s", ", ".join(recipients))
        return False
