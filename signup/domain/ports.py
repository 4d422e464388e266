"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from typing import Protocol

from .account import Account, NewAccount


class AccountRepository(Protocol):
    """Port interface for account persistence."""

    def create(self, account: NewAccount) -> Account | None:
        """
        Persist a new account.

        The store enforces email uniqueness itself, so a registration that
        raced past the validator's lookup is still rejected here.

        Args:
            account: Fully built account record (hashed password, token)

        Returns:
            The stored Account, or None if the email is already taken

        Raises:
            PersistenceFailed: If the store is unavailable or the write fails
        """
        ...

    def find_by_email(self, email: str) -> Account | None:
        """
        Look up an account by exact (case-sensitive) email.

        Raises:
            PersistenceFailed: If the store is unavailable
        """
        ...

    def find_all(self) -> list[Account]:
        """Return every stored account ordered by id."""
        ...

    def delete_all(self) -> None:
        """Remove every stored account (administrative and test use)."""
        ...

    def ping(self) -> None:
        """
        Check the store is reachable.

        Raises:
            PersistenceFailed: If the store is unavailable
        """
        ...


class EmailSender(Protocol):
    """Port interface for email delivery."""

    def send_activation_token(self, email: str, token: str) -> None:
        """
        Send the account activation email.

        Args:
            email: Recipient email address (the only recipient)
            token: Activation token, included verbatim in the body

        Raises:
            NotificationFailed: If the transport rejects the message
        """
        ...
