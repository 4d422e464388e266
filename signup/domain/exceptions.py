"""
Domain exceptions - Semantic error types for registration.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
"""


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class ValidationFailed(RegistrationError):
    """One or more registration fields failed validation.

    Carries an ordered mapping of field name to error code
    (username, email, password order).
    """

    def __init__(self, errors: dict[str, str]) -> None:
        super().__init__(", ".join(errors))
        self.errors = errors


class PersistenceFailed(RegistrationError):
    """Account store unavailable or rejected the write."""

    pass


class NotificationFailed(RegistrationError):
    """Activation email could not be handed to the transport."""

    pass
