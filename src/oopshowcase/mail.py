"""
Mail transport for the email demos.

Sanitising and validation helpers plus a small SMTP-backed ``Mailer``.
Without a configured SMTP host nothing is delivered and ``send`` reports
failure, the same way a host without a mail agent would.
"""

import logging
import re
import smtplib
import string
from email.message import EmailMessage
from typing import Mapping, Optional

from email_validator import EmailNotValidError, validate_email

from .config import MailConfig

logger = logging.getLogger(__name__)

EMAIL_CHARS = frozenset(string.ascii_letters + string.digits + "!#$%&'*+-=?^_`{|}~@.[]")

_LINE_BREAK = re.compile(r"[\r\n]")


def sanitize_email(value: str) -> str:
    """Trim and drop every character that cannot appear in an address."""
    return "".join(c for c in value.strip() if c in EMAIL_CHARS)


def is_valid_email(value: str) -> bool:
    """Syntax check only; no DNS lookups."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def has_header_injection(*values: str) -> bool:
    """True if any value would break out of a mail header line."""
    return any(_LINE_BREAK.search(v) for v in values)


class Mailer:
    """Sends plain-text messages through the configured SMTP server."""

    def __init__(self, config: Optional[MailConfig] = None):
        self.config = config or MailConfig()

    def configure(self, config: MailConfig) -> None:
        self.config = config

    def build_message(self, to: str, subject: str, message: str,
                      headers: Optional[Mapping[str, str]] = None) -> EmailMessage:
        msg = EmailMessage()
        msg["To"] = to
        msg["Subject"] = subject
        for name, value in (headers or {}).items():
            msg[name] = value
        if "From" not in msg:
            msg["From"] = self.config.sender
        msg.set_content(message)
        return msg

    def send(self, to: str, subject: str, message: str,
             headers: Optional[Mapping[str, str]] = None) -> bool:
        """
        Send a message.

        Returns:
            True if the SMTP server accepted the message, False otherwise
        """
        msg = self.build_message(to, subject, message, headers)

        if not self.config.smtp_host:
            logger.info(f"No SMTP host configured, message to {to} not sent")
            return False

        try:
            with smtplib.SMTP(self.config.smtp_host, self.config.smtp_port,
                              timeout=self.config.timeout) as smtp:
                smtp.send_message(msg)
        except (OSError, smtplib.SMTPException) as e:
            logger.warning(f"Sending mail to {to} failed: {e}")
            return False

        logger.info(f"Mail sent to {to}")
        return True


# Global mailer instance
mailer = Mailer()
