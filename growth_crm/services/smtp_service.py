"""
SMTP transport for outgoing mail (a Gmail app password by default).

Callers get a result dict back instead of an exception: a mail problem is
something to log, not something to fail a request over.
"""
import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Any, Dict, Optional

from ..core.config import Settings

logger = logging.getLogger(__name__)

MailResult = Dict[str, Any]


class SMTPService:
    """Sends multipart (plain text + HTML) mail through one SMTP account"""

    def __init__(
        self,
        smtp_host: str,
        smtp_port: int,
        smtp_user: Optional[str],
        smtp_pass: Optional[str],
        from_email: str,
        smtp_secure: bool = False,
        timeout: int = 30
    ):
        """
        Args:
            smtp_host: Server hostname, e.g. smtp.gmail.com
            smtp_port: 587 for STARTTLS, 465 for implicit TLS
            smtp_user: Account used to log in
            smtp_pass: Password or app password for smtp_user
            from_email: Sender address when a message names none
            smtp_secure: Connect with implicit TLS instead of upgrading with STARTTLS
            timeout: Socket timeout in seconds
        """
        self.smtp_host = smtp_host
        self.smtp_port = smtp_port
        self.smtp_user = smtp_user
        self.smtp_pass = smtp_pass
        self.from_email = from_email
        self.smtp_secure = smtp_secure
        self.timeout = timeout

        logger.info(f"SMTP transport configured for {smtp_host}:{smtp_port}")

    @classmethod
    def from_settings(cls, settings: Settings) -> "SMTPService":
        return cls(
            smtp_host=settings.SMTP_HOST,
            smtp_port=settings.SMTP_PORT,
            smtp_user=settings.SMTP_USER,
            smtp_pass=settings.SMTP_PASS,
            from_email=settings.FROM_EMAIL,
            smtp_secure=settings.SMTP_SECURE,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.smtp_user and self.smtp_pass)

    def _connect(self) -> smtplib.SMTP:
        """
        Open a logged-in connection.

        Raises:
            ConnectionError: For refused logins, protocol errors and network failures
        """
        logger.debug(f"Opening SMTP connection to {self.smtp_host}:{self.smtp_port}")
        try:
            if self.smtp_secure:
                server = smtplib.SMTP_SSL(self.smtp_host, self.smtp_port, timeout=self.timeout)
            else:
                server = smtplib.SMTP(self.smtp_host, self.smtp_port, timeout=self.timeout)
                server.ehlo()
                server.starttls()
                server.ehlo()
            server.login(self.smtp_user, self.smtp_pass)
        except smtplib.SMTPAuthenticationError as e:
            logger.error(f"SMTP login rejected for {self.smtp_user}: {e}")
            raise ConnectionError(f"Email authentication failed; check SMTP_USER and SMTP_PASS ({e})") from e
        except smtplib.SMTPException as e:
            logger.error(f"SMTP protocol error: {e}")
            raise ConnectionError(f"Email server error: {e}") from e
        except OSError as e:
            logger.error(f"Cannot reach SMTP server {self.smtp_host}:{self.smtp_port}: {e}")
            raise ConnectionError(f"Failed to connect to email server: {e}") from e

        logger.debug("SMTP login succeeded")
        return server

    def _build_message(
        self,
        sender: str,
        to_email: str,
        subject: str,
        html_content: str,
        text_content: Optional[str],
        reply_to: Optional[str],
    ) -> MIMEMultipart:
        message = MIMEMultipart('alternative')
        message['Subject'] = subject
        message['From'] = sender
        message['To'] = to_email
        if reply_to:
            message['Reply-To'] = reply_to

        # Last part wins in mail clients, so HTML goes after the text fallback
        if text_content:
            message.attach(MIMEText(text_content, 'plain'))
        message.attach(MIMEText(html_content, 'html'))
        return message

    def send_email(
        self,
        to_email: str,
        subject: str,
        html_content: str,
        text_content: Optional[str] = None,
        from_email: Optional[str] = None,
        reply_to: Optional[str] = None
    ) -> MailResult:
        """
        Deliver one message. Never raises.

        Returns:
            {'success': bool, 'message': str}
        """
        if not self.is_configured:
            logger.error("SMTP credentials are missing; email not sent")
            return {'success': False, 'message': 'Email credentials are not configured'}

        sender = from_email or self.from_email
        message = self._build_message(
            sender, to_email, subject, html_content, text_content, reply_to
        )

        try:
            server = self._connect()
            try:
                server.sendmail(sender, [to_email], message.as_string())
            finally:
                server.quit()
        except (ConnectionError, smtplib.SMTPException, OSError) as e:
            logger.error(f"Could not send '{subject}' to {to_email}: {e}")
            return {'success': False, 'message': str(e)}

        logger.info(f"Sent '{subject}' to {to_email}")
        return {'success': True, 'message': f'Email sent to {to_email}'}

    def verify_connection(self) -> bool:
        """Log in and immediately disconnect. True when the credentials work."""
        if not self.is_configured:
            logger.error("SMTP credentials are missing; cannot verify connection")
            return False

        try:
            self._connect().quit()
        except (ConnectionError, smtplib.SMTPException, OSError) as e:
            logger.error(f"SMTP verification failed: {e}")
            return False

        logger.info("SMTP connection verified")
        return True
