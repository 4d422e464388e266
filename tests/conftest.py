"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- In-memory account store
- Recording and failing email senders
- Valid registration payloads
"""

import pytest

from signup.adapters.repository.memory import InMemoryAccountRepository
from signup.domain.exceptions import NotificationFailed


class RecordingEmailSender:
    """EmailSender test double that keeps every activation email it is given."""

    def __init__(self) -> None:
        self.sent: list[tuple[str, str]] = []

    def send_activation_token(self, email: str, token: str) -> None:
        self.sent.append((email, token))


class FailingEmailSender:
    """EmailSender test double whose transport is always down."""

    def __init__(self) -> None:
        self.attempts = 0

    def send_activation_token(self, email: str, token: str) -> None:
        self.attempts += 1
        raise NotificationFailed("smtp down")


@pytest.fixture
def repository() -> InMemoryAccountRepository:
    """Fresh in-memory account store for each test."""
    return InMemoryAccountRepository()


@pytest.fixture
def email_sender() -> RecordingEmailSender:
    """Email sender that records activation emails."""
    return RecordingEmailSender()


@pytest.fixture
def failing_email_sender() -> FailingEmailSender:
    """Email sender that raises on every send."""
    return FailingEmailSender()


@pytest.fixture
def valid_user() -> dict[str, str]:
    """A registration payload that passes every rule."""
    return {"username": "user1", "email": "user1@mail.com", "password": "P4ssword"}
