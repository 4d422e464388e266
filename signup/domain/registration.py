"""
Registration domain service - Signup workflow implementation.

This module contains the core business logic for user registration:
validation, password hashing, activation token issuance, persistence and
the activation email.

Registration Lifecycle (single request)
=======================================

    Received -> Validating -> Rejected            (ValidationFailed)
                           -> Validated
    Validated -> Persisting -> PersistFailed      (PersistenceFailed)
                            -> Persisted
    Persisted -> Notifying -> Completed

Notes:
- New accounts are always created inactive; any client-supplied flag is
  ignored because the service never accepts one.
- Email uniqueness is checked by the validator and enforced again by the
  store. A registration that loses the race between the two gets the same
  "email in use" validation error as one caught by the lookup.
- The activation email is fire-and-forget. Its outcome never changes the
  registration result; delivery is at-most-once and not guaranteed.
"""

import base64
import hashlib
import logging
import secrets
from concurrent.futures import Executor, Future
from dataclasses import dataclass

import bcrypt

from .account import Account, NewAccount
from .exceptions import ValidationFailed
from .ports import AccountRepository, EmailSender
from .validation import RegistrationValidator

logger = logging.getLogger(__name__)

ACTIVATION_TOKEN_BYTES = 16


def prehash_password(password: str) -> bytes:
    """
    Reduce a plaintext password to a fixed 44-byte bcrypt input.

    bcrypt only accepts 72 bytes, so the SHA-256 digest (base64 encoded,
    no NUL bytes) is hashed instead of the raw password.
    """
    return base64.b64encode(hashlib.sha256(password.encode("utf-8", "surrogatepass")).digest())


@dataclass(frozen=True)
class RegistrationResult:
    """Outcome of a completed registration."""

    account: Account
    # Resolves to True when the activation email was handed to the transport.
    notification: "Future[bool]"


@dataclass
class RegistrationService:
    """
    Domain service for user registration.

    Orchestrates the registration flow: validation, password hashing,
    token generation, account persistence and the activation email.
    """

    repository: AccountRepository
    email_sender: EmailSender
    bcrypt_rounds: int = 10
    notification_executor: Executor | None = None

    def register(self, username: object, email: object, password: object) -> RegistrationResult:
        """
        Register a new, inactive account and send its activation email.

        Args:
            username: Submitted username (any JSON value)
            email: Submitted email address (any JSON value)
            password: Submitted plaintext password (any JSON value)

        Returns:
            RegistrationResult with the stored account and a future for
            the activation email

        Raises:
            ValidationFailed: If any field fails validation, or the email
                was claimed concurrently
            PersistenceFailed: If the account store fails
        """
        errors = RegistrationValidator(self.repository).validate(username, email, password)
        if errors:
            logger.info("Registration rejected: %s", ", ".join(errors))
            raise ValidationFailed(errors)

        # Validation guarantees all three are non-empty strings from here on.
        new_account = NewAccount(
            username=str(username),
            email=str(email),
            password_hash=self._hash_password(str(password)),
            activation_token=self._generate_activation_token(),
            inactive=True,
        )

        account = self.repository.create(new_account)
        if account is None:
            logger.info("Registration lost email uniqueness race")
            raise ValidationFailed({"email": "email_inuse"})

        logger.info("Account %s created", account.id)
        notification = self._dispatch_activation(account.email, account.activation_token)
        return RegistrationResult(account=account, notification=notification)

    def _dispatch_activation(self, email: str, token: str) -> "Future[bool]":
        """Hand the activation email to the executor, or send it inline."""
        if self.notification_executor is not None:
            return self.notification_executor.submit(self._send_activation, email, token)

        future: Future[bool] = Future()
        future.set_result(self._send_activation(email, token))
        return future

    def _send_activation(self, email: str, token: str) -> bool:
        """
        Send the activation email, absorbing any failure.

        Returns:
            True if the sender accepted the message, False otherwise
        """
        try:
            self.email_sender.send_activation_token(email, token)
        except Exception:
            logger.warning("Activation email to %s failed", email, exc_info=True)
            return False
        return True

    def _generate_activation_token(self) -> str:
        """
        Generate a cryptographically secure activation token.

        128 bits from the secrets module, hex encoded.
        """
        return secrets.token_hex(ACTIVATION_TOKEN_BYTES)

    def _hash_password(self, password: str) -> str:
        """Hash password using bcrypt with the configured cost factor."""
        salt = bcrypt.gensalt(rounds=self.bcrypt_rounds)
        return bcrypt.hashpw(prehash_password(password), salt).decode()
