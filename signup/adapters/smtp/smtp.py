"""
SMTP email sender adapter - Implements EmailSender protocol.

Sends the activation email as a plain-text message over SMTP, with
optional STARTTLS and login. A new connection is opened per message.
"""

import logging
import smtplib
from email.message import EmailMessage

from signup.domain.exceptions import NotificationFailed

logger = logging.getLogger(__name__)

ACTIVATION_SUBJECT = "Account Activation"


def build_activation_message(sender: str, email: str, token: str) -> EmailMessage:
    """Build the activation email addressed to `email` only."""
    message = EmailMessage()
    message["From"] = sender
    message["To"] = email
    message["Subject"] = ACTIVATION_SUBJECT
    message.set_content(
        "Welcome!\n\n"
        "Your account has been created but is not active yet.\n"
        f"Activation token: {token}\n"
    )
    return message


class SmtpEmailSender:
    """
    Implements EmailSender protocol via smtplib.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(
        self,
        host: str,
        port: int,
        sender: str,
        username: str | None = None,
        password: str | None = None,
        use_tls: bool = False,
        timeout: float = 10.0,
    ) -> None:
        self._host = host
        self._port = port
        self._sender = sender
        self._username = username
        self._password = password
        self._use_tls = use_tls
        self._timeout = timeout

    def send_activation_token(self, email: str, token: str) -> None:
        """
        Deliver the activation email to the SMTP server.

        Raises:
            NotificationFailed: On any SMTP or socket error
        """
        message = build_activation_message(self._sender, email, token)
        try:
            with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as conn:
                if self._use_tls:
                    conn.starttls()
                if self._username:
                    conn.login(self._username, self._password or "")
                conn.send_message(message)
        except (smtplib.SMTPException, OSError) as e:
            raise NotificationFailed(f"SMTP delivery to {email} failed") from e

        logger.info("Activation email sent to %s", email)
