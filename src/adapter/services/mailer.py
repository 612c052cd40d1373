"""
Mailer implementations

SmtpMailer delivers through an SMTP relay; LoggingMailer only logs the
message and is used when no relay is configured (local development).
"""

import asyncio
import logging
import smtplib
from email.mime.text import MIMEText

from src.app.services.mailer import IMailer, MailDeliveryError

logger = logging.getLogger(__name__)


class SmtpMailer(IMailer):
    """Sends mail with smtplib on a worker thread"""

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        from_email: str,
        use_tls: bool = True,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.from_email = from_email
        self.use_tls = use_tls

    def _build_message(self, to: str, subject: str, body: str) -> MIMEText:
        msg = MIMEText(body, "plain", "utf-8")
        msg["From"] = self.from_email
        msg["To"] = to
        msg["Subject"] = subject
        return msg

    def _send_sync(self, msg: MIMEText) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=30) as server:
            if self.use_tls:
                server.starttls()
            if self.username:
                server.login(self.username, self.password)
            server.send_message(msg)

    async def send(self, to: str, subject: str, body: str) -> None:
        msg = self._build_message(to, subject, body)
        try:
            await asyncio.to_thread(self._send_sync, msg)
        except (smtplib.SMTPException, OSError) as exc:
            logger.error(f"Failed to send email to {to}: {exc}")
            raise MailDeliveryError(str(exc)) from exc
        logger.info(f"Email sent successfully to {to}")


class LoggingMailer(IMailer):
    """Development mailer: writes the message to the log instead of sending it"""

    async def send(self, to: str, subject: str, body: str) -> None:
        logger.info(f"Email simulated for {to}: {subject}\n{body}")
