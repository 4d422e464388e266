"""
Domain layer - Pure business logic with zero framework imports.

This package contains the core business logic for user registration.
It defines its own port interfaces for infrastructure abstraction, so
storage, email and HTTP stay replaceable adapters.
"""

from .account import Account, NewAccount
from .exceptions import (
    NotificationFailed,
    PersistenceFailed,
    RegistrationError,
    ValidationFailed,
)
from .ports import AccountRepository, EmailSender
from .registration import RegistrationResult, RegistrationService
from .validation import RegistrationValidator

__all__ = [
    "Account",
    "AccountRepository",
    "EmailSender",
    "NewAccount",
    "NotificationFailed",
    "PersistenceFailed",
    "RegistrationError",
    "RegistrationResult",
    "RegistrationService",
    "RegistrationValidator",
    "ValidationFailed",
]
