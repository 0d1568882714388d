"""
Email dispatcher (async).
=========================

Sends transactional HTML emails (account activation) over SMTP.
Failures are reported to the caller as DispatchError; nothing is retried here.
"""
import html
import logging
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Tuple

import aiosmtplib

from ...core.exceptions import DispatchError

logger = logging.getLogger(__name__)

ACTIVATION_SUBJECT = "Account Activation Email"


def build_activation_email(name: str, activation_link: str) -> Tuple[str, str]:
    """Build the subject and HTML body of the account activation email."""
    safe_name = html.escape(name)
    safe_link = html.escape(activation_link, quote=True)
    body = f"""
<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>{ACTIVATION_SUBJECT}</title>
</head>
<body style="font-family:Segoe UI,Helvetica,Arial,sans-serif;background:#f5f5f5;margin:0;padding:24px;">
  <div style="max-width:600px;margin:0 auto;background:#fff;border-radius:8px;padding:24px;">
    <h2 style="margin-top:0;">Hello {safe_name} !</h2>
    <p>Please click here to <a href="{safe_link}" target="_blank">activate your account</a></p>
    <p style="font-size:13px;color:#666;">This link expires in 10 minutes.</p>
  </div>
</body>
</html>
"""
    return ACTIVATION_SUBJECT, body


class EmailDispatcher:
    """Sends a formatted HTML message to a single address via aiosmtplib"""

    def __init__(
        self,
        smtp_host: str,
        smtp_port: int,
        smtp_user: str,
        smtp_password: str,
        email_from: str,
        email_from_name: str = "",
        use_tls: bool = False,
        start_tls: bool = True,
    ) -> None:
        self.smtp_host = smtp_host
        self.smtp_port = smtp_port
        self.smtp_user = smtp_user
        self.smtp_password = smtp_password
        self.email_from = email_from
        self.email_from_name = email_from_name
        self.use_tls = use_tls
        self.start_tls = start_tls

    @property
    def is_configured(self) -> bool:
        return bool(self.smtp_host and self.smtp_user and self.smtp_password and self.email_from)

    def _build_message(self, address: str, subject: str, body_html: str) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = (
            f"{self.email_from_name} <{self.email_from}>" if self.email_from_name else self.email_from
        )
        msg["To"] = address
        msg.attach(MIMEText(body_html, "html", "utf-8"))
        return msg

    async def send(self, address: str, subject: str, body_html: str) -> None:
        """
        Send one HTML email.

        Args:
            address: Recipient email address.
            subject: Subject line.
            body_html: HTML body.

        Raises:
            DispatchError: If SMTP is not configured or the transport fails.
        """
        if not self.is_configured:
            logger.warning("[email_dispatcher] SMTP not configured; cannot send to %s", address)
            raise DispatchError("SMTP is not configured")

        msg = self._build_message(address, subject, body_html)
        try:
            await aiosmtplib.send(
                msg,
                sender=self.email_from,
                recipients=[address],
                hostname=self.smtp_host,
                port=self.smtp_port,
                username=self.smtp_user,
                password=self.smtp_password,
                use_tls=self.use_tls,
                start_tls=self.start_tls if not self.use_tls else False,
            )
        except (aiosmtplib.SMTPException, OSError) as e:
            logger.error("[email_dispatcher] Failed to send '%s' to %s: %s", subject, address, e)
            raise DispatchError(f"Failed to send email: {e}") from e

        logger.info("[email_dispatcher] Email '%s' sent to %s", subject, address)
